import json
from typing import Any

from meeting_analysis.analysis.models import CombinedReport
from meeting_analysis.logging.logger import Log
from meeting_analysis.storage.base import KeyValueStore, ReportRepository
from meeting_analysis.storage.exceptions import StorageError

DEFAULT_KEY = "analysisResults"


class KeyValueReportRepository(ReportRepository):
    """Keeps the whole report collection as one JSON array under a single key.

    Writes are read-modify-write of the full array and assume a single writer;
    two batches appending at the same time can lose one of the reports.
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_KEY) -> None:
        self._store = store
        self._key = key

    def list_all(self) -> list[CombinedReport]:
        """Return all reports; an unreadable collection reads as empty."""
        try:
            return self._load()
        except StorageError as exc:
            Log.warning(f"Report collection '{self._key}' unreadable, treating as empty: {exc}")
            return []

    def find_by_id(self, report_id: int) -> CombinedReport | None:
        for report in self.list_all():
            if report.id == report_id:
                return report
        return None

    def append(self, report: CombinedReport) -> None:
        reports = self._load()
        reports.append(report)
        self._save(reports)
        Log.info("Stored report", report_id=report.id, total=len(reports))

    def delete_by_id(self, report_id: int) -> bool:
        reports = self._load()
        remaining = [report for report in reports if report.id != report_id]
        if len(remaining) == len(reports):
            return False
        self._save(remaining)
        Log.info("Deleted report", report_id=report_id)
        return True

    def _load(self) -> list[CombinedReport]:
        raw = self._store.get(self._key)
        if not raw:
            return []
        try:
            payload: Any = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Report collection is not valid JSON: {exc}") from exc
        if not isinstance(payload, list):
            raise StorageError("Report collection must be a JSON array")
        try:
            return [CombinedReport.from_dict(item) for item in payload]
        except (TypeError, ValueError, AttributeError) as exc:
            raise StorageError(f"Malformed report in collection: {exc}") from exc

    def _save(self, reports: list[CombinedReport]) -> None:
        payload = [report.to_dict() for report in reports]
        self._store.set(self._key, json.dumps(payload, ensure_ascii=False))
