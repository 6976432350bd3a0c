"""Tests for the snapshot filtering service."""

from __future__ import annotations

import sys
import unittest
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TaskSearch.config import parse_config_dict
from TaskSearch.core.models import Priority, Section, Task
from TaskSearch.services import create_search_service
from TaskSearch.services.search import TaskSearchService
from TaskSearch.storage.snapshot import TaskSnapshot


def _snapshot() -> TaskSnapshot:
    return TaskSnapshot(
        sections=(Section(id="fin", title="Finance"),),
        tasks=(
            Task(id="t1", title="Pay rent", amount=1200, section_id="fin", priority=Priority.HIGH),
            Task(id="t2", title="Buy milk", is_completed=True),
            Task(id="t3", title="Pay invoice", amount=80, due_date=datetime(2026, 3, 1, 12)),
        ),
    )


class TestTaskSearchService(unittest.TestCase):
    def test_empty_search_returns_all_in_order(self) -> None:
        service = TaskSearchService(snapshot=_snapshot())
        self.assertEqual([t.id for t in service.search("")], ["t1", "t2", "t3"])

    def test_filters_by_query(self) -> None:
        service = TaskSearchService(snapshot=_snapshot())
        self.assertEqual([t.id for t in service.search("pay")], ["t1", "t3"])
        self.assertEqual([t.id for t in service.search("amount:>1000")], ["t1"])
        self.assertEqual([t.id for t in service.search("section:finance")], ["t1"])
        self.assertEqual([t.id for t in service.search("rent OR milk")], ["t1", "t2"])

    def test_now_is_forwarded(self) -> None:
        service = TaskSearchService(snapshot=_snapshot())
        result = service.search("due:today", now=datetime(2026, 3, 1, 8))
        self.assertEqual([t.id for t in result], ["t3"])

    def test_exclude_completed(self) -> None:
        service = TaskSearchService(snapshot=_snapshot(), include_completed=False)
        self.assertEqual([t.id for t in service.search("")], ["t1", "t3"])

    def test_limit(self) -> None:
        service = TaskSearchService(snapshot=_snapshot(), limit=1)
        self.assertEqual([t.id for t in service.search("pay")], ["t1"])

    def test_parse_cache_reuses_last_query(self) -> None:
        service = TaskSearchService(snapshot=_snapshot())
        first = service.parse("rent OR milk")
        self.assertIs(service.parse("rent OR milk"), first)
        other = service.parse("rent")
        self.assertIsNot(other, first)
        self.assertEqual(service.parse("rent OR milk"), first)

    def test_section_title(self) -> None:
        service = TaskSearchService(snapshot=_snapshot())
        tasks = _snapshot().tasks
        self.assertEqual(service.section_title(tasks[0]), "Finance")
        self.assertIsNone(service.section_title(tasks[1]))

    def test_factory_reads_search_config(self) -> None:
        cfg = parse_config_dict(
            {
                "log": {"level": "INFO"},
                "store": {"path": "tasks.json"},
                "search": {"include_completed": False, "limit": 5},
                "output": {"base_dir": "output", "formats": ["console"]},
            }
        )
        service = create_search_service(cfg, _snapshot())
        self.assertFalse(service.include_completed)
        self.assertEqual(service.limit, 5)


if __name__ == "__main__":
    unittest.main()
