"""
Mock Data Store Adapter

In-memory implementation of the hosted table store.
Used for local development and tests; nothing survives a restart.
"""
import copy
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from app.adapters.store_adapter_interface import DataStoreInterface, Row


class StoreMockAdapter(DataStoreInterface):
    """Mock adapter for the table store"""

    def __init__(self, tables: Optional[Dict[str, List[Row]]] = None):
        self.tables: Dict[str, List[Row]] = {
            name: [dict(row) for row in rows]
            for name, rows in (tables or {}).items()
        }
        # (operation, table, filters) for every call, in order
        self.calls: List[Tuple[str, str, Dict[str, Any]]] = []

    async def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        columns: str = "*",
        order_by: Optional[str] = None,
        descending: bool = False
    ) -> List[Row]:
        self.calls.append(("select", table, dict(filters or {})))
        rows = self._matching(table, filters)

        if order_by:
            # Newest insert first on ties when descending
            ordered = list(reversed(rows)) if descending else rows
            rows = sorted(
                ordered,
                key=lambda r: (r.get(order_by) is not None, r.get(order_by)),
                reverse=descending
            )

        if columns != "*":
            wanted = [c.strip() for c in columns.split(",")]
            rows = [{c: row.get(c) for c in wanted} for row in rows]

        return copy.deepcopy(rows)

    async def insert(self, table: str, rows: List[Row]) -> List[Row]:
        self.calls.append(("insert", table, {}))
        stored = []
        for row in rows:
            record = dict(row)
            record.setdefault("id", str(uuid.uuid4()))
            record.setdefault("created_at", datetime.utcnow().isoformat())
            self.tables.setdefault(table, []).append(record)
            stored.append(record)
        return copy.deepcopy(stored)

    async def update(
        self,
        table: str,
        values: Row,
        filters: Dict[str, Any]
    ) -> List[Row]:
        self.calls.append(("update", table, dict(filters)))
        updated = []
        for row in self._matching(table, filters):
            row.update(values)
            updated.append(row)
        return copy.deepcopy(updated)

    async def delete(self, table: str, filters: Dict[str, Any]) -> List[Row]:
        self.calls.append(("delete", table, dict(filters)))
        removed = self._matching(table, filters)
        self.tables[table] = [
            row for row in self.tables.get(table, []) if row not in removed
        ]
        return copy.deepcopy(removed)

    def _matching(self, table: str, filters: Optional[Dict[str, Any]]) -> List[Row]:
        rows = self.tables.get(table, [])
        if not filters:
            return list(rows)
        return [
            row for row in rows
            if all(row.get(column) == value for column, value in filters.items())
        ]
