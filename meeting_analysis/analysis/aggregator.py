"""Fan-out analysis of a file batch into one persisted CombinedReport.

Processing flow:
1. Start one extraction task per file, all at once, each with its own deadline.
2. Recover extraction errors, unsupported types and expired deadlines into a
   degraded result for that file only.
3. Wait for every task, then merge the results in submission order.
4. Assign id and timestamp and append the report to the repository.
"""

import asyncio
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from meeting_analysis.analysis.document_extractor import DocumentExtractor
from meeting_analysis.analysis.exceptions import (
    AggregationError,
    ExtractionError,
    UnsupportedFormatError,
)
from meeting_analysis.analysis.format_detector import FormatDetector
from meeting_analysis.analysis.media_extractor import MediaExtractor
from meeting_analysis.analysis.models import (
    BatchProgress,
    BatchState,
    CombinedReport,
    ExtractionResult,
    FileKind,
    FileState,
    SourceFile,
)
from meeting_analysis.analyzers.factory import TextAnalyzerFactory
from meeting_analysis.config.settings import Settings
from meeting_analysis.logging.logger import Log
from meeting_analysis.media.factory import MediaDecodingServiceFactory
from meeting_analysis.pdf.factory import PdfExtractorFactory
from meeting_analysis.storage.base import ReportRepository
from meeting_analysis.storage.exceptions import StorageError
from meeting_analysis.storage.factory import build_report_repository

ProgressCallback = Callable[[BatchProgress], None]

UNSUPPORTED_DEGRADE = "degrade"
UNSUPPORTED_DROP = "drop"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ResultAggregator:
    """Runs extraction for a batch of files and persists the merged report."""

    def __init__(
        self,
        detector: FormatDetector,
        document_extractor: DocumentExtractor,
        media_extractor: MediaExtractor,
        repository: ReportRepository,
        *,
        timeout_seconds: float = 120.0,
        unsupported_policy: str = UNSUPPORTED_DEGRADE,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        policy = unsupported_policy.strip().lower()
        if policy not in (UNSUPPORTED_DEGRADE, UNSUPPORTED_DROP):
            raise ValueError(
                f"Unknown unsupported_policy '{unsupported_policy}'. "
                f"Choose from: {[UNSUPPORTED_DEGRADE, UNSUPPORTED_DROP]}"
            )
        self._detector = detector
        self._document_extractor = document_extractor
        self._media_extractor = media_extractor
        self._repository = repository
        self._timeout_seconds = timeout_seconds
        self._unsupported_policy = policy
        self._clock = clock
        self._last_id = 0
        self._in_flight = 0
        self.state = BatchState.IDLE

    async def analyze(
        self,
        files: Sequence[SourceFile],
        progress_callback: ProgressCallback | None = None,
    ) -> CombinedReport:
        """Analyze *files* and return the stored report.

        Per-file failures are folded into the report and never raised. Per-file
        states are reported only through *progress_callback*, so overlapping
        calls on one aggregator do not share batch state. ``state`` stays
        RUNNING while any batch is in flight and otherwise holds the outcome of
        the last batch to finish.

        Raises:
            AggregationError: if the report cannot be built or persisted.
        """
        self._in_flight += 1
        self.state = BatchState.RUNNING
        Log.info(f"Analyzing batch of {len(files)} files")
        try:
            report = await self._run(files, progress_callback)
        except AggregationError as exc:
            self._fail(exc)
            raise
        except Exception as exc:
            self._fail(exc)
            raise AggregationError(f"Analysis failed: {exc}") from exc
        self._settle(BatchState.COMPLETED)
        Log.info("Batch completed", report_id=report.id, files=len(report.files))
        return report

    async def _run(
        self,
        files: Sequence[SourceFile],
        progress_callback: ProgressCallback | None,
    ) -> CombinedReport:
        accepted = self._intake(files)
        results = await self._extract_all(accepted, progress_callback)
        report = self._merge(accepted, results)
        try:
            self._repository.append(report)
        except StorageError as exc:
            raise AggregationError(f"Failed to persist report: {exc}") from exc
        return report

    def _fail(self, exc: Exception) -> None:
        self._settle(BatchState.FAILED)
        Log.error(f"Batch analysis failed: {exc}")

    def _settle(self, outcome: BatchState) -> None:
        self._in_flight -= 1
        if self._in_flight == 0:
            self.state = outcome

    # ------------------------------------------------------------------
    # Intake and fan-out
    # ------------------------------------------------------------------

    def _intake(self, files: Sequence[SourceFile]) -> list[SourceFile]:
        if self._unsupported_policy == UNSUPPORTED_DEGRADE:
            return list(files)
        accepted: list[SourceFile] = []
        for file in files:
            try:
                self._detector.classify(file)
            except UnsupportedFormatError as exc:
                Log.warning(f"Dropping {file.name} from batch: {exc}")
                continue
            accepted.append(file)
        return accepted

    async def _extract_all(
        self,
        files: list[SourceFile],
        progress_callback: ProgressCallback | None,
    ) -> list[ExtractionResult]:
        total = len(files)
        completed = 0

        async def run(file: SourceFile) -> ExtractionResult:
            nonlocal completed
            result, file_state = await self._extract_one(file)
            completed += 1
            if progress_callback is not None:
                progress_callback(
                    BatchProgress(
                        completed=completed,
                        total=total,
                        percent=completed / total * 100,
                        file_name=file.name,
                        file_state=file_state,
                    )
                )
            return result

        settled = await asyncio.gather(
            *(run(file) for file in files),
            return_exceptions=True,
        )
        for outcome in settled:
            if isinstance(outcome, BaseException):
                raise outcome
        return [outcome for outcome in settled if isinstance(outcome, ExtractionResult)]

    async def _extract_one(self, file: SourceFile) -> tuple[ExtractionResult, FileState]:
        try:
            result = await self._extract_with_deadline(file)
        except (ExtractionError, UnsupportedFormatError) as exc:
            Log.warning(f"Analysis failed: {exc}", file=file.name)
            return ExtractionResult.failed(file.name, str(exc)), FileState.FAILED
        return result, FileState.DONE

    async def _extract_with_deadline(self, file: SourceFile) -> ExtractionResult:
        try:
            return await asyncio.wait_for(self._route(file), timeout=self._timeout_seconds)
        except TimeoutError as exc:
            raise ExtractionError(
                f"Extraction timed out after {self._timeout_seconds:g} seconds"
            ) from exc

    async def _route(self, file: SourceFile) -> ExtractionResult:
        kind = self._detector.classify(file)
        if kind is FileKind.DOCUMENT:
            return await self._document_extractor.extract(file)
        return await self._media_extractor.extract(file, kind)

    # ------------------------------------------------------------------
    # Merge
    # ------------------------------------------------------------------

    def _merge(
        self,
        files: list[SourceFile],
        results: list[ExtractionResult],
    ) -> CombinedReport:
        now = self._clock()
        return CombinedReport(
            id=self._next_id(now),
            date=now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            files=[file.name for file in files],
            summary="\n\n".join(result.summary for result in results),
            participants=list(
                dict.fromkeys(p for result in results for p in result.participants)
            ),
            key_points=[point for result in results for point in result.key_points],
        )

    def _next_id(self, now: datetime) -> int:
        """Epoch milliseconds, moved forward past any id already in use."""
        taken = {report.id for report in self._repository.list_all()}
        candidate = max(int(now.timestamp() * 1000), self._last_id + 1)
        while candidate in taken:
            candidate += 1
        self._last_id = candidate
        return candidate


def build_aggregator(
    settings: Settings,
    repository: ReportRepository | None = None,
) -> ResultAggregator:
    """Build a ResultAggregator with all adapters selected by *settings*.

    Also configures the package logger from ``settings.log_level``.
    """
    Log.configure(settings.log_level)
    Log.info(
        "Building aggregator",
        env=settings.app_env,
        pdf_engine=settings.pdf_engine,
        storage=settings.storage_backend,
    )
    if repository is None:
        repository = build_report_repository(settings)
    analyzer = TextAnalyzerFactory.create(settings)
    document_extractor = DocumentExtractor(
        pdf_extractor=PdfExtractorFactory.create(settings),
        analyzer=analyzer,
    )
    media_extractor = MediaExtractor(
        decoding_service=MediaDecodingServiceFactory.create(settings),
        analyzer=analyzer,
    )
    return ResultAggregator(
        detector=FormatDetector(),
        document_extractor=document_extractor,
        media_extractor=media_extractor,
        repository=repository,
        timeout_seconds=settings.extraction_timeout_seconds,
        unsupported_policy=settings.unsupported_policy,
    )
