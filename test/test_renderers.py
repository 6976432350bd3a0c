"""Tests for console and JSON output writers."""

import json
import sys
import tempfile
import unittest
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TaskSearch.config import parse_config_dict
from TaskSearch.core.models import Priority, Section, Task
from TaskSearch.core.parser import parse_query
from TaskSearch.renderers import (
    ConsoleOutputWriter,
    JsonFileWriter,
    MultiOutputWriter,
    create_output_writer,
    render_json,
    render_query,
    render_text,
)

SECTIONS = (Section(id="fin", title="Finance"),)
RENT = Task(
    id="t1",
    title="Pay rent",
    description="Landlord",
    amount=1200,
    priority=Priority.HIGH,
    due_date=datetime(2026, 3, 1, 9),
    section_id="fin",
)
MILK = Task(id="t2", title="Buy milk", is_completed=True)


class TestRenderText(unittest.TestCase):
    def test_task_lines(self) -> None:
        text = render_text([RENT, MILK], SECTIONS)
        lines = text.splitlines()
        self.assertEqual(lines[0], "1. [ ] Pay rent")
        self.assertIn("   Section: Finance", lines)
        self.assertIn("   Priority: High", lines)
        self.assertIn("   Amount: $1200.00", lines)
        self.assertIn("   Due: 2026-03-01", lines)
        self.assertIn("2. [x] Buy milk", lines)
        self.assertIn("   Due: -", lines)
        self.assertTrue(text.endswith("\n"))

    def test_no_results(self) -> None:
        self.assertEqual(render_text([]), "No matching tasks.\n")

    def test_render_query(self) -> None:
        text = render_query(parse_query('"late fee" OR pay* amount:>5'))
        self.assertEqual(
            text.splitlines(),
            [
                "AND 'late fee' [phrase]",
                "OR  'pay' [prefix]",
                "FILTER amount greaterThan '5'",
            ],
        )
        self.assertIn("empty query", render_query(parse_query("")))


class TestRenderJson(unittest.TestCase):
    def test_render_json_fields(self) -> None:
        payload = render_json([RENT, MILK], SECTIONS)
        self.assertEqual(payload[0]["section"], "Finance")
        self.assertEqual(payload[0]["priority"], "High")
        self.assertEqual(payload[0]["due_date"], "2026-03-01T09:00:00")
        self.assertIsNone(payload[1]["section"])
        self.assertTrue(payload[1]["completed"])
        self.assertIsNone(payload[1]["amount"])

    def test_json_writer_writes_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            writer = JsonFileWriter(tmp)
            writer.write_search_result("rent", parse_query("rent"), [RENT], SECTIONS)
            path = writer.finalize("search")

            self.assertEqual(path.parent, Path(tmp) / "json")
            self.assertTrue(path.name.startswith("search_"))
            data = json.loads(path.read_text(encoding="utf-8"))

        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["query"], "rent")
        self.assertEqual(data[0]["parsed"]["terms"][0]["text"], "rent")
        self.assertEqual([t["id"] for t in data[0]["tasks"]], ["t1"])


class TestCreateOutputWriter(unittest.TestCase):
    def test_factory_builds_configured_writers(self) -> None:
        cfg = parse_config_dict(
            {
                "log": {"level": "INFO"},
                "store": {"path": "tasks.json"},
                "output": {"base_dir": "output", "formats": ["console", "json"]},
            }
        )
        writer = create_output_writer(cfg)
        self.assertIsInstance(writer, MultiOutputWriter)
        self.assertEqual(
            [type(w) for w in writer.writers],
            [ConsoleOutputWriter, JsonFileWriter],
        )


if __name__ == "__main__":
    unittest.main()
