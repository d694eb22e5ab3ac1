"""Application state as an immutable value plus a pure transition function.

Every user action or pipeline notification becomes one event and one atomic
``reduce`` call. Extraction events carry the run that produced them; events
from any run other than the latest are dropped, so a slow stale run can never
overwrite what a newer run displayed.
"""

from dataclasses import dataclass, replace
from typing import TypeAlias

from docintake.analysis.models import AnalysisResult
from docintake.analysis.ticker import ANALYSIS_PHASES
from docintake.logging.logger import Log
from docintake.pipeline.errors import PipelineFailure
from docintake.pipeline.models import ExtractionPhase, ProgressEvent


@dataclass(frozen=True)
class AppState:
    run_id: int = 0
    file_name: str | None = None
    phase: ExtractionPhase = ExtractionPhase.IDLE
    progress_label: str = ""
    current_page: int | None = None
    total_pages: int | None = None
    source_text: str = ""
    working_text: str = ""
    job_description: str = ""
    refine_panel_open: bool = False
    is_analyzing: bool = False
    analysis_label: str = ANALYSIS_PHASES[0]
    result: AnalysisResult | None = None
    failure: PipelineFailure | None = None

    @property
    def is_extracting(self) -> bool:
        return self.phase not in (
            ExtractionPhase.IDLE,
            ExtractionPhase.SUCCESS,
            ExtractionPhase.FAILED,
        )


@dataclass(frozen=True)
class ExtractionStarted:
    run_id: int
    file_name: str


@dataclass(frozen=True)
class ExtractionProgressed:
    run_id: int
    event: ProgressEvent


@dataclass(frozen=True)
class ExtractionSucceeded:
    run_id: int
    text: str


@dataclass(frozen=True)
class ExtractionFailed:
    run_id: int
    failure: PipelineFailure


@dataclass(frozen=True)
class WorkingTextEdited:
    text: str


@dataclass(frozen=True)
class JobDescriptionEdited:
    text: str


@dataclass(frozen=True)
class RefinePanelToggled:
    open: bool


@dataclass(frozen=True)
class RefinementApplied:
    text: str


@dataclass(frozen=True)
class AnalysisStarted:
    pass


@dataclass(frozen=True)
class AnalysisTicked:
    label: str


@dataclass(frozen=True)
class AnalysisSucceeded:
    result: AnalysisResult


@dataclass(frozen=True)
class AnalysisFailed:
    failure: PipelineFailure


@dataclass(frozen=True)
class ValidationFailed:
    failure: PipelineFailure


@dataclass(frozen=True)
class SessionReset:
    pass


Event: TypeAlias = (
    ExtractionStarted
    | ExtractionProgressed
    | ExtractionSucceeded
    | ExtractionFailed
    | WorkingTextEdited
    | JobDescriptionEdited
    | RefinePanelToggled
    | RefinementApplied
    | AnalysisStarted
    | AnalysisTicked
    | AnalysisSucceeded
    | AnalysisFailed
    | ValidationFailed
    | SessionReset
)


def _is_current_run(state: AppState, run_id: int) -> bool:
    if run_id != state.run_id:
        Log.debug(f"Dropping event from stale run {run_id} (current run {state.run_id})")
        return False
    return True


def _progress(state: AppState, progress: ProgressEvent) -> AppState:
    if state.phase.is_terminal or progress.phase < state.phase:
        return state
    return replace(
        state,
        phase=progress.phase,
        progress_label=progress.label,
        current_page=progress.current_page,
        total_pages=progress.total_pages,
    )


def reduce(state: AppState, event: Event) -> AppState:
    """Return the state that results from applying one event."""
    match event:
        case ExtractionStarted(run_id=run_id, file_name=file_name):
            if run_id <= state.run_id:
                return state
            return replace(
                state,
                run_id=run_id,
                file_name=file_name,
                phase=ExtractionPhase.IDLE,
                progress_label="",
                current_page=None,
                total_pages=None,
                failure=None,
            )
        case ExtractionProgressed(run_id=run_id, event=progress):
            if not _is_current_run(state, run_id):
                return state
            return _progress(state, progress)
        case ExtractionSucceeded(run_id=run_id, text=text):
            if not _is_current_run(state, run_id):
                return state
            return replace(
                state,
                phase=ExtractionPhase.SUCCESS,
                source_text=text,
                working_text=text,
                refine_panel_open=True,
                failure=None,
            )
        case ExtractionFailed(run_id=run_id, failure=failure):
            if not _is_current_run(state, run_id):
                return state
            # No file counts as loaded once its extraction failed.
            return replace(
                state,
                phase=ExtractionPhase.FAILED,
                file_name=None,
                failure=failure,
            )
        case WorkingTextEdited(text=text):
            return replace(state, working_text=text)
        case JobDescriptionEdited(text=text):
            return replace(state, job_description=text)
        case RefinePanelToggled(open=is_open):
            return replace(state, refine_panel_open=is_open)
        case RefinementApplied(text=text):
            return replace(state, working_text=text, refine_panel_open=False)
        case AnalysisStarted():
            return replace(
                state,
                is_analyzing=True,
                analysis_label=ANALYSIS_PHASES[0],
                result=None,
                failure=None,
            )
        case AnalysisTicked(label=label):
            if not state.is_analyzing:
                return state
            return replace(state, analysis_label=label)
        case AnalysisSucceeded(result=result):
            return replace(state, is_analyzing=False, result=result)
        case AnalysisFailed(failure=failure):
            return replace(state, is_analyzing=False, failure=failure)
        case ValidationFailed(failure=failure):
            return replace(state, failure=failure)
        case SessionReset():
            # run_id survives a reset so runs started before it stay stale.
            return AppState(run_id=state.run_id)
    raise TypeError(f"Unknown event: {event!r}")
