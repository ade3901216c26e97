"""
Diagnostics raised by the load engine instead of exceptions.

The engine never fails on bad input. Whenever it substitutes a value
(unparsable number, unknown table key, zero denominator) it records a
:class:`Diagnostic` so a degraded zero can be told apart from a genuine one.

Numeric text must parse as a whole: "4.5m" is unparsable and becomes 0,
where a browser form's ``parseFloat`` would have read 4.5.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

from coldload.core.constants import MAX_INPUT_MAGNITUDE

logger = logging.getLogger(__name__)


class DiagnosticCode(Enum):
    """Reasons an evaluation produced a placeholder value."""

    UNPARSABLE_VALUE = "unparsable_value"
    VALUE_OUT_OF_RANGE = "value_out_of_range"
    NEGATIVE_VALUE_CLAMPED = "negative_value_clamped"
    UNKNOWN_INSULATION = "unknown_insulation"
    UNDEFINED_R_VALUE = "undefined_r_value"
    UNKNOWN_PRODUCT = "unknown_product"
    UNKNOWN_STORAGE_TYPE = "unknown_storage_type"
    ZERO_STORAGE_CAPACITY = "zero_storage_capacity"
    ZERO_COOLING_LOAD = "zero_cooling_load"
    NEGATIVE_COOLING_LOAD = "negative_cooling_load"


@dataclass(frozen=True)
class Diagnostic:
    """A single substitution made during evaluation."""

    code: DiagnosticCode
    field: str
    message: str

    def to_dict(self):
        return {"code": self.code.value, "field": self.field, "message": self.message}


def coerce_float(
    value: Any,
    field: str,
    diagnostics: List[Diagnostic],
    minimum: Optional[float] = None,
) -> float:
    """
    Convert a raw input value to a finite float.

    Strings are stripped and parsed. Anything that cannot be parsed, or
    parses to NaN/infinity, becomes 0.0. Finite values beyond
    ``MAX_INPUT_MAGNITUDE`` are clamped to it.

    Args:
        value: Raw value from an input record
        field: Dotted field name used in diagnostics (e.g. "room.length")
        diagnostics: List the substitution is appended to
        minimum: Optional lower bound; smaller values are clamped to it

    Returns:
        The coerced float
    """
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            number = math.nan
    elif isinstance(value, str):
        text = value.strip()
        try:
            number = float(text)
        except ValueError:
            number = math.nan
    else:
        number = math.nan

    if not math.isfinite(number):
        logger.warning("Unparsable value %s for %s, using 0", short_repr(value), field)
        diagnostics.append(
            Diagnostic(
                DiagnosticCode.UNPARSABLE_VALUE,
                field,
                f"Could not parse {short_repr(value)}; using 0",
            )
        )
        number = 0.0

    if abs(number) > MAX_INPUT_MAGNITUDE:
        bound = math.copysign(MAX_INPUT_MAGNITUDE, number)
        logger.warning("Value %g for %s out of range, clamping to %g", number, field, bound)
        diagnostics.append(
            Diagnostic(
                DiagnosticCode.VALUE_OUT_OF_RANGE,
                field,
                f"{number:g} is beyond ±{MAX_INPUT_MAGNITUDE:g}; using {bound:g}",
            )
        )
        number = bound

    if minimum is not None and number < minimum:
        logger.warning("Value %s for %s below %s, clamping", number, field, minimum)
        diagnostics.append(
            Diagnostic(
                DiagnosticCode.NEGATIVE_VALUE_CLAMPED,
                field,
                f"{number:g} is below {minimum:g}; using {minimum:g}",
            )
        )
        number = minimum

    return number


def short_repr(value: Any, limit: int = 40) -> str:
    """repr() of a raw input for messages, truncated to ``limit`` characters."""
    # repr of a huge int is thousands of digits long, or refused outright
    try:
        text = repr(value)
    except ValueError:
        return f"<{type(value).__name__} too large to display>"
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text


def as_label(value: Any) -> str:
    """str() of a raw key for echoing back, safe for any input."""
    try:
        return str(value)
    except ValueError:
        return short_repr(value)
