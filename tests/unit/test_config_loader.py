from __future__ import annotations

import json
import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import yaml

from lazutils.config import (
    ENV_HASH_WIDTH,
    ENV_LOG_LEVEL,
    ConfigError,
    dump_example_config,
    load_config,
)
from lazutils.io.loader import MAX_FILE_SIZE

CLEAN_ENV = {ENV_HASH_WIDTH: "", ENV_LOG_LEVEL: ""}


class ConfigLoaderTests(unittest.TestCase):
    def test_load_config_defaults(self) -> None:
        with patch.dict(os.environ, CLEAN_ENV, clear=False):
            config = load_config()

        self.assertEqual(config.hashing.width, 64)
        self.assertEqual(config.hashing.output, "hex")
        self.assertEqual(config.logging.level, "INFO")
        self.assertEqual(config.logging.stream, "stderr")
        self.assertIsNone(config.logging.log_path)
        self.assertEqual(config.loader.max_file_size, MAX_FILE_SIZE)

    def test_load_config_applies_overrides(self) -> None:
        overrides = {
            "hashing.width": 32,
            "logging": {"level": "DEBUG"},
            "loader": {"max_file_size": 1024},
        }

        with patch.dict(os.environ, CLEAN_ENV, clear=False):
            config = load_config(overrides=overrides)

        self.assertEqual(config.hashing.width, 32)
        self.assertEqual(config.logging.level, "DEBUG")
        self.assertEqual(config.loader.max_file_size, 1024)

    def test_user_yaml_file_is_merged(self) -> None:
        with TemporaryDirectory() as tmpdir:
            config_file = Path(tmpdir) / "lazutils.yaml"
            config_file.write_text("hashing:\n  output: decimal\n", encoding="utf-8")

            with patch.dict(os.environ, CLEAN_ENV, clear=False):
                config = load_config(config_file)

        self.assertEqual(config.hashing.output, "decimal")
        self.assertEqual(config.hashing.width, 64)

    def test_user_toml_file_is_merged(self) -> None:
        with TemporaryDirectory() as tmpdir:
            config_file = Path(tmpdir) / "lazutils.toml"
            config_file.write_text('[logging]\nstream = "stdout"\n', encoding="utf-8")

            with patch.dict(os.environ, CLEAN_ENV, clear=False):
                config = load_config(config_file)

        self.assertEqual(config.logging.stream, "stdout")

    def test_env_overrides(self) -> None:
        with patch.dict(os.environ, {ENV_HASH_WIDTH: "32", ENV_LOG_LEVEL: "warning"}, clear=False):
            config = load_config()

        self.assertEqual(config.hashing.width, 32)
        self.assertEqual(config.logging.level, "WARNING")

    def test_invalid_env_width(self) -> None:
        with patch.dict(os.environ, {ENV_HASH_WIDTH: "wide", ENV_LOG_LEVEL: ""}, clear=False):
            with self.assertRaises(ConfigError):
                load_config()

    def test_invalid_values_raise_config_error(self) -> None:
        with patch.dict(os.environ, CLEAN_ENV, clear=False):
            with self.assertRaises(ConfigError):
                load_config(overrides={"hashing.width": 48})
            with self.assertRaises(ConfigError):
                load_config(overrides={"loader.max_file_size": 2**31})

    def test_missing_or_malformed_file(self) -> None:
        with TemporaryDirectory() as tmpdir:
            with self.assertRaises(ConfigError):
                load_config(Path(tmpdir) / "absent.yaml")

            broken = Path(tmpdir) / "broken.json"
            broken.write_text("{not json", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_config(broken)

            listing = Path(tmpdir) / "list.yaml"
            listing.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_config(listing)

    def test_dump_example_config_yaml(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "example.yaml"
            dump_example_config(dest)
            data = yaml.safe_load(dest.read_text(encoding="utf-8"))

        self.assertIn("hashing", data)
        self.assertIn("loader", data)

    def test_dump_example_config_json(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "nested" / "example.json"
            dump_example_config(dest)
            data = json.loads(dest.read_text(encoding="utf-8"))

        self.assertEqual(data["hashing"]["width"], 64)

    def test_dump_example_config_rejects_toml(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "config.toml"
            with self.assertRaises(ConfigError):
                dump_example_config(dest)


if __name__ == "__main__":
    unittest.main()
