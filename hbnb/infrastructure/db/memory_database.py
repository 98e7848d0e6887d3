"""
In-Memory Database
==================

Process-local store backing the reference repositories. It is constructed
explicitly and injected into each repository; there is no module-level
instance.
"""
import threading
from collections import OrderedDict
from typing import Any, Dict


class InMemoryDatabase:
    """
    Named tables of entities keyed by id, in insertion order.

    A single re-entrant lock makes each repository operation atomic.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._tables: Dict[str, "OrderedDict[str, Any]"] = {}

    def table(self, name: str) -> "OrderedDict[str, Any]":
        """Get (creating on first use) the table with this name."""
        with self.lock:
            if name not in self._tables:
                self._tables[name] = OrderedDict()
            return self._tables[name]

    def clear(self) -> None:
        """Empty every table (repositories keep their table handles)."""
        with self.lock:
            for table in self._tables.values():
                table.clear()
