"""Tests for the configuration system."""

import json
import tempfile
import unittest
from pathlib import Path

from coldload.core.config import (
    DesignInputs,
    EngineConfig,
    config_to_dict,
    create_design_inputs,
    create_engine_config,
    get_default_config,
    get_default_inputs,
    load_config,
    save_config,
)
from coldload.core.records import (
    AmbientConditions,
    Construction,
    OperationalLoads,
    ProductProfile,
    RoomGeometry,
)
from coldload.engine import LoadEngine

DEFAULT_CONFIG_FILE = Path(__file__).resolve().parents[1] / "data" / "default_config.yaml"


class TestConfigDataclasses(unittest.TestCase):
    """Test configuration dataclass creation and defaults."""

    def test_engine_config_defaults(self):
        """Test EngineConfig default values."""
        config = EngineConfig()
        self.assertEqual(config.air_changes_per_hour, 0.5)
        self.assertEqual(config.air_heat_content, 1.3)
        self.assertEqual(config.door_opening_heat, 900.0)
        self.assertEqual(config.person_heat_kw, 0.407)
        self.assertEqual(config.neutral_storage_factor, 1.0)

    def test_room_defaults(self):
        """Test RoomGeometry default values."""
        room = RoomGeometry()
        self.assertEqual((room.length, room.width, room.height), (4.0, 3.0, 2.5))
        self.assertEqual((room.door_width, room.door_height), (1.0, 2.0))

    def test_other_record_defaults(self):
        """Test the remaining step defaults."""
        self.assertEqual(Construction(), Construction("PUF", 150))
        self.assertEqual(AmbientConditions(), AmbientConditions(35.0, -18.0, 24.0))
        product = ProductProfile()
        self.assertEqual(product.product_type, "Beef")
        self.assertEqual(product.daily_load, 1000.0)
        self.assertEqual(product.storage_type, "Boxed")
        operations = OperationalLoads()
        self.assertEqual(operations.number_of_people, 2)
        self.assertEqual(operations.door_openings, 15)

    def test_design_inputs_defaults(self):
        """Test DesignInputs holds default records."""
        inputs = get_default_inputs()
        self.assertEqual(inputs.room, RoomGeometry())
        self.assertEqual(inputs.operations, OperationalLoads())
        self.assertEqual(get_default_config(), EngineConfig())


class TestConfigFromDict(unittest.TestCase):
    """Test building configuration from dictionaries."""

    def test_create_engine_config(self):
        """Test numeric strings are accepted for engine parameters."""
        config = create_engine_config({"air_heat_content": "1.25", "air_changes_per_hour": 1})
        self.assertEqual(config.air_heat_content, 1.25)
        self.assertEqual(config.air_changes_per_hour, 1.0)
        self.assertEqual(config.door_opening_heat, 900.0)

    def test_create_engine_config_unknown_key(self):
        """Test unknown engine parameters are rejected."""
        with self.assertRaises(TypeError):
            create_engine_config({"fan_speed": 3})

    def test_safety_fraction_not_configurable(self):
        """Test the fixed safety margin is not an engine parameter."""
        with self.assertRaises(TypeError):
            create_engine_config({"safety_fraction": 0.2})

    def test_create_design_inputs_partial(self):
        """Test missing sections and fields keep their defaults."""
        inputs = create_design_inputs({"room": {"length": 6.0}, "operations": None})
        self.assertEqual(inputs.room.length, 6.0)
        self.assertEqual(inputs.room.width, 3.0)
        self.assertEqual(inputs.construction, Construction())
        self.assertEqual(inputs.operations, OperationalLoads())

    def test_create_design_inputs_empty(self):
        """Test an empty dictionary gives the default design."""
        self.assertEqual(create_design_inputs({}), DesignInputs())

    def test_config_to_dict(self):
        """Test dataclass conversion."""
        data = config_to_dict(EngineConfig())
        self.assertEqual(data["air_heat_content"], 1.3)
        self.assertEqual(create_engine_config(data), EngineConfig())


class TestConfigFileIO(unittest.TestCase):
    """Test loading and saving configuration files."""

    def test_save_and_load_json(self):
        """Test saving and loading JSON config."""
        config = {"engine": {"air_changes_per_hour": 1.5}, "design": {"room": {"length": 5}}}
        with tempfile.NamedTemporaryFile(suffix=".json", delete=False) as f:
            path = f.name
        save_config(config, path)
        self.assertEqual(load_config(path), config)

    def test_save_and_load_yaml(self):
        """Test saving and loading YAML config."""
        config = {"design": {"product": {"product_type": "Chicken", "daily_load": 500}}}
        with tempfile.NamedTemporaryFile(suffix=".yaml", delete=False) as f:
            path = f.name
        save_config(config, path)
        self.assertEqual(load_config(path), config)

    def test_load_missing_file(self):
        """Test loading a file that does not exist."""
        with self.assertRaises(FileNotFoundError):
            load_config("/nonexistent/design.yaml")

    def test_unsupported_format(self):
        """Test that unknown suffixes are rejected."""
        with tempfile.NamedTemporaryFile(suffix=".txt", delete=False) as f:
            f.write(b"engine: {}")
            path = f.name
        with self.assertRaises(ValueError):
            load_config(path)
        with self.assertRaises(ValueError):
            save_config({}, path)

    def test_json_content(self):
        """Test the JSON writer output is plain JSON."""
        with tempfile.NamedTemporaryFile(suffix=".json", delete=False) as f:
            path = f.name
        save_config(config_to_dict(EngineConfig()), path)
        with open(path, encoding="utf-8") as f:
            self.assertEqual(json.load(f)["person_heat_kw"], 0.407)


class TestShippedConfig(unittest.TestCase):
    """Test the configuration file shipped with the package."""

    def test_default_config_matches_defaults(self):
        """Test data/default_config.yaml reproduces the built-in defaults."""
        data = load_config(DEFAULT_CONFIG_FILE)
        self.assertEqual(create_engine_config(data["engine"]), EngineConfig())
        self.assertEqual(create_design_inputs(data["design"]), DesignInputs())

    def test_default_config_evaluates(self):
        """Test the shipped design evaluates cleanly."""
        data = load_config(DEFAULT_CONFIG_FILE)
        engine = LoadEngine.from_config(create_engine_config(data["engine"]))
        result = engine.evaluate_inputs(create_design_inputs(data["design"]))
        self.assertFalse(result.is_degraded)
        self.assertGreater(result.total_load_with_safety, 0.0)


if __name__ == "__main__":
    unittest.main()
