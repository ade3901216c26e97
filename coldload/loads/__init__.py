"""Heat load components of a cold room."""

from coldload.loads.base import LoadCalculator, LoadCategory, LoadContext
from coldload.loads.transmission import TransmissionLoad, TransmissionLoadCalculator
from coldload.loads.product import ProductLoad, ProductLoadCalculator, resolve_product
from coldload.loads.infiltration import InfiltrationLoad, InfiltrationLoadCalculator
from coldload.loads.internal import InternalLoad, InternalLoadCalculator

__all__ = [
    "LoadCalculator",
    "LoadCategory",
    "LoadContext",
    "TransmissionLoad",
    "TransmissionLoadCalculator",
    "ProductLoad",
    "ProductLoadCalculator",
    "resolve_product",
    "InfiltrationLoad",
    "InfiltrationLoadCalculator",
    "InternalLoad",
    "InternalLoadCalculator",
]
