from abc import ABC, abstractmethod

from meeting_analysis.analysis.models import CombinedReport


class KeyValueStore(ABC):
    """Contract for string key-value persistence backends."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent.

        Raises:
            StorageError: if the backend cannot be read.
        """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Replace the value stored under *key*.

        Raises:
            StorageError: if the backend cannot be written.
        """


class ReportRepository(ABC):
    """Persistence contract for the CombinedReport collection.

    There is no partial update: every write replaces the whole collection.
    """

    @abstractmethod
    def list_all(self) -> list[CombinedReport]:
        """Return all reports in insertion order."""

    @abstractmethod
    def find_by_id(self, report_id: int) -> CombinedReport | None:
        """Return the report with *report_id*, or None."""

    @abstractmethod
    def append(self, report: CombinedReport) -> None:
        """Add *report* at the end of the collection.

        Raises:
            StorageError: if the collection cannot be read or written.
        """

    @abstractmethod
    def delete_by_id(self, report_id: int) -> bool:
        """Remove the report with *report_id*, keeping the others in order.

        Returns:
            True if a report was removed.

        Raises:
            StorageError: if the collection cannot be read or written.
        """
