"""
Data Store Adapter Interface

Abstract interface for the hosted table store (vehicles, bookings).
This allows easy switching between the in-memory mock and Supabase.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


Row = Dict[str, Any]


class StoreError(Exception):
    """Exception raised when the data store rejects a request"""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class StoreUnavailableError(StoreError):
    """Exception raised when the data store cannot be reached"""
    pass


class DataStoreInterface(ABC):
    """Abstract interface for table store adapters"""

    @abstractmethod
    async def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        columns: str = "*",
        order_by: Optional[str] = None,
        descending: bool = False
    ) -> List[Row]:
        """
        Read rows matching every equality filter.

        Args:
            table: Table name
            filters: Column -> value equality filters
            columns: Comma separated column list, "*" for all
            order_by: Column to order by
            descending: Sort direction for order_by

        Returns:
            Matching rows (possibly empty)
        """
        pass

    @abstractmethod
    async def insert(self, table: str, rows: List[Row]) -> List[Row]:
        """Insert rows and return them as stored (with id and created_at)."""
        pass

    @abstractmethod
    async def update(
        self,
        table: str,
        values: Row,
        filters: Dict[str, Any]
    ) -> List[Row]:
        """Update rows matching the filters and return them."""
        pass

    @abstractmethod
    async def delete(self, table: str, filters: Dict[str, Any]) -> List[Row]:
        """Delete rows matching the filters and return them."""
        pass
