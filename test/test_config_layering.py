"""Tests for layered config parsing and validation."""

import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TaskSearch.config import load_config, load_config_with_defaults, parse_config_dict


def _base_raw_config() -> dict:
    return {
        "log": {"level": "info", "to_file": False, "dir": "log"},
        "store": {"path": "data/tasks.json", "path_env": "TASKSEARCH_TEST_STORE"},
        "search": {"include_completed": True, "limit": -1},
        "output": {"base_dir": "output", "formats": ["Console", "json"]},
    }


class TestConfigLayering(unittest.TestCase):
    def test_parse_success_nested_access(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.store.path, "data/tasks.json")
        self.assertTrue(cfg.search.include_completed)
        self.assertEqual(cfg.search.limit, -1)
        self.assertEqual(cfg.output.formats, ("console", "json"))

    def test_optional_sections_and_keys(self) -> None:
        raw = _base_raw_config()
        del raw["search"]
        raw["log"] = {"level": "DEBUG"}
        cfg = parse_config_dict(raw)
        self.assertEqual(cfg.search.limit, -1)
        self.assertFalse(cfg.runtime.to_file)
        self.assertEqual(cfg.runtime.dir, "log")

    def test_missing_store_section(self) -> None:
        raw = _base_raw_config()
        del raw["store"]
        with self.assertRaisesRegex(ValueError, "store"):
            parse_config_dict(raw)

    def test_store_path_type_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["store"]["path"] = 42
        with self.assertRaisesRegex(TypeError, "store\\.path"):
            parse_config_dict(raw)

    def test_log_level_error(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = "LOUD"
        with self.assertRaisesRegex(ValueError, "log\\.level"):
            parse_config_dict(raw)

    def test_search_limit_error(self) -> None:
        raw = _base_raw_config()
        raw["search"]["limit"] = 0
        with self.assertRaisesRegex(ValueError, "search\\.limit"):
            parse_config_dict(raw)

    def test_search_flag_type_error(self) -> None:
        raw = _base_raw_config()
        raw["search"]["include_completed"] = "yes"
        with self.assertRaisesRegex(TypeError, "search\\.include_completed"):
            parse_config_dict(raw)

    def test_output_unknown_format_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["output"]["formats"] = ["console", "markdown"]
        with self.assertRaisesRegex(ValueError, "output\\.formats"):
            parse_config_dict(raw)

    def test_output_formats_must_be_strings(self) -> None:
        raw = _base_raw_config()
        raw["output"]["formats"] = ["console", 3]
        with self.assertRaisesRegex(TypeError, "output\\.formats\\[1\\]"):
            parse_config_dict(raw)

    def test_store_path_env_override(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        with patch.dict(os.environ, {"TASKSEARCH_TEST_STORE": "/tmp/other.yml"}, clear=False):
            self.assertEqual(cfg.store.resolved_path, "/tmp/other.yml")
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(cfg.store.resolved_path, "data/tasks.json")

    def test_root_must_be_mapping(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "bad.yml"
            path.write_text("- just\n- a list\n", encoding="utf-8")
            with self.assertRaisesRegex(ValueError, "mapping"):
                load_config(path)


class TestConfigOverride(unittest.TestCase):
    def test_default_config_loads(self) -> None:
        cfg = load_config(REPO_ROOT / "config" / "default.yml")
        self.assertEqual(cfg.store.path, "data/tasks.json")
        self.assertEqual(cfg.output.formats, ("console",))

    def test_override_merges_with_defaults(self) -> None:
        override_yaml = """
log:
  level: DEBUG

search:
  limit: 10
"""
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "override.yml"
            override_path.write_text(override_yaml, encoding="utf-8")
            cfg = load_config_with_defaults(override_path, default_path=REPO_ROOT / "config" / "default.yml")

        self.assertEqual(cfg.runtime.level, "DEBUG")
        self.assertFalse(cfg.runtime.to_file)
        self.assertEqual(cfg.search.limit, 10)
        self.assertTrue(cfg.search.include_completed)
        self.assertEqual(cfg.store.path, "data/tasks.json")

    def test_override_replaces_lists(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "override.yml"
            override_path.write_text("output:\n  formats: [json]\n", encoding="utf-8")
            cfg = load_config_with_defaults(override_path, default_path=REPO_ROOT / "config" / "default.yml")
        self.assertEqual(cfg.output.formats, ("json",))
        self.assertEqual(cfg.output.base_dir, "output")


if __name__ == "__main__":
    unittest.main()
