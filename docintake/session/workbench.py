import asyncio
from collections.abc import Callable
from pathlib import Path

from docintake.analysis.analyzer import Analyzer
from docintake.analysis.exceptions import AnalysisError
from docintake.analysis.factory import AnalyzerFactory
from docintake.analysis.models import AnalysisResult
from docintake.analysis.ticker import AnalysisTicker
from docintake.config.settings import Settings
from docintake.documents.file_loader import FileLoader
from docintake.documents.models import RawDocument
from docintake.logging.logger import Log
from docintake.pipeline.errors import IntakeError, describe
from docintake.pipeline.models import ExtractionOutcome, ProgressEvent
from docintake.pipeline.orchestrator import ExtractionOrchestrator, build_orchestrator
from docintake.sanitization.models import RefinementOptions
from docintake.sanitization.refiner import Refiner
from docintake.session.exceptions import MissingInputError
from docintake.session.state import (
    AnalysisFailed,
    AnalysisStarted,
    AnalysisSucceeded,
    AnalysisTicked,
    AppState,
    Event,
    ExtractionFailed,
    ExtractionProgressed,
    ExtractionStarted,
    ExtractionSucceeded,
    JobDescriptionEdited,
    RefinePanelToggled,
    RefinementApplied,
    SessionReset,
    ValidationFailed,
    WorkingTextEdited,
    reduce,
)

StateListener = Callable[[AppState], None]


class Workbench:
    """Drives one user session: document intake, refinement and analysis.

    Holds the only mutable reference to ``AppState``; every change goes
    through ``reduce``. Each document load gets a fresh, increasing run id.
    """

    def __init__(
        self,
        *,
        orchestrator: ExtractionOrchestrator,
        analyzer: Analyzer,
        refiner: Refiner | None = None,
        file_loader: FileLoader | None = None,
        tick_seconds: float = 3.0,
        on_change: StateListener | None = None,
    ) -> None:
        self._orchestrator = orchestrator
        self._analyzer = analyzer
        self._refiner = refiner or Refiner()
        self._file_loader = file_loader or FileLoader()
        self._ticker = AnalysisTicker(
            interval_seconds=tick_seconds,
            on_tick=lambda label: self._dispatch(AnalysisTicked(label)),
        )
        self._on_change = on_change
        self._state = AppState()
        self._last_run_id = 0

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def ticker(self) -> AnalysisTicker:
        return self._ticker

    def _dispatch(self, event: Event) -> None:
        self._state = reduce(self._state, event)
        if self._on_change is not None:
            self._on_change(self._state)

    def _start_run(self, file_name: str) -> int:
        self._last_run_id += 1
        self._dispatch(ExtractionStarted(run_id=self._last_run_id, file_name=file_name))
        return self._last_run_id

    async def load_document(self, document: RawDocument) -> ExtractionOutcome:
        """Extract and sanitize a document as a new run.

        Earlier runs still in flight are not cancelled; their results are
        simply ignored once this run has started.
        """
        run_id = self._start_run(document.file_name)

        def on_progress(event: ProgressEvent) -> None:
            self._dispatch(ExtractionProgressed(run_id=run_id, event=event))

        outcome = await self._orchestrator.run(document, run_id, on_progress)
        if outcome.failure is not None:
            self._dispatch(ExtractionFailed(run_id=run_id, failure=outcome.failure))
        else:
            self._dispatch(ExtractionSucceeded(run_id=run_id, text=outcome.text))
        if run_id != self._state.run_id:
            Log.info(f"Run {run_id} finished after run {self._state.run_id} started; result discarded")
        return outcome

    async def load_path(self, path: Path | str, media_type: str | None = None) -> ExtractionOutcome:
        """Read a file from disk and run it through ``load_document``."""
        try:
            document = await asyncio.to_thread(self._file_loader.load, path, media_type)
        except IntakeError as exc:
            file_name = Path(path).name
            run_id = self._start_run(file_name)
            failure = describe(exc)
            Log.error(f"Run {run_id}: {failure.message}")
            self._dispatch(ExtractionFailed(run_id=run_id, failure=failure))
            return ExtractionOutcome(run_id=run_id, file_name=file_name, failure=failure)
        return await self.load_document(document)

    def edit_working_text(self, text: str) -> None:
        self._dispatch(WorkingTextEdited(text))

    def set_job_description(self, text: str) -> None:
        self._dispatch(JobDescriptionEdited(text))

    def toggle_refine_panel(self, is_open: bool) -> None:
        self._dispatch(RefinePanelToggled(is_open))

    def refine(self, options: RefinementOptions) -> str:
        """Apply the enabled refinements once to the current working text."""
        text = self._refiner.refine(self._state.working_text, options)
        Log.info(
            f"Refined working text: {len(self._state.working_text)} -> {len(text)} chars"
        )
        self._dispatch(RefinementApplied(text))
        return text

    async def analyze(self) -> AnalysisResult | None:
        """Submit the working text and job description to the analyzer.

        Returns None when validation fails or the analysis call fails; the
        failure is recorded in ``state.failure`` and the texts are kept.
        """
        if self._state.is_analyzing:
            Log.warning("Analysis already in flight; ignoring request")
            return None
        resume_text = self._state.working_text
        job_description = self._state.job_description
        if not resume_text.strip() or not job_description.strip():
            failure = describe(
                MissingInputError(
                    "Requirement missing: resume text and job description are both required."
                )
            )
            Log.warning(failure.message)
            self._dispatch(ValidationFailed(failure))
            return None

        self._dispatch(AnalysisStarted())
        self._ticker.start()
        try:
            result = await asyncio.to_thread(
                self._analyzer.analyze, resume_text, job_description
            )
        except Exception as exc:
            # Anything raised while the collaborator is in flight is an analysis failure.
            error = exc if isinstance(exc, IntakeError) else AnalysisError(str(exc))
            failure = describe(error)
            Log.error(f"Analysis failed: {failure.message}")
            self._dispatch(AnalysisFailed(failure))
            return None
        finally:
            self._ticker.stop()

        self._dispatch(AnalysisSucceeded(result))
        return result

    def reset(self) -> None:
        self._ticker.stop()
        self._dispatch(SessionReset())


def build_workbench(
    settings: Settings,
    files_root: Path | None = None,
    on_change: StateListener | None = None,
) -> Workbench:
    """Build a Workbench with all required adapters."""
    Log.configure(settings.log_level)
    return Workbench(
        orchestrator=build_orchestrator(settings),
        analyzer=AnalyzerFactory.create(settings),
        refiner=Refiner(),
        file_loader=FileLoader(files_root=files_root),
        tick_seconds=settings.analysis_tick_seconds,
        on_change=on_change,
    )
