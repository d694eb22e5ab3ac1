from docintake.config.settings import Settings
from docintake.documents.format_detector import FormatDetector
from docintake.documents.models import RawDocument
from docintake.extractors.flow_document import DocxExtractor
from docintake.extractors.plain_text import PlainTextExtractor
from docintake.extractors.registry import ExtractorRegistry
from docintake.logging.logger import Log
from docintake.pdf.factory import PdfExtractorFactory
from docintake.pipeline.errors import ErrorCategory, describe
from docintake.pipeline.models import (
    SUCCESS_LABEL,
    ExtractionContext,
    ExtractionOutcome,
    ExtractionPhase,
    ProgressEvent,
)
from docintake.pipeline.pipeline import PipelineStep, ProgressCallback
from docintake.pipeline.steps import (
    AcquireStep,
    DetectFormatStep,
    ExtractTextStep,
    SanitizeStep,
)
from docintake.sanitization.sanitizer import Sanitizer


def _discard(_event: ProgressEvent) -> None:
    return None


class ExtractionOrchestrator:
    """Runs the extraction steps in order and classifies any failure once.

    Pipeline: acquire -> detect format -> extract -> sanitize.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    async def run(
        self,
        document: RawDocument,
        run_id: int,
        on_progress: ProgressCallback | None = None,
    ) -> ExtractionOutcome:
        emit = on_progress or _discard
        context = ExtractionContext(
            run_id=run_id, file_name=document.file_name, document=document
        )
        Log.info(f"Run {run_id}: starting extraction of '{document.file_name}'")
        try:
            for step in self._steps:
                emit(ProgressEvent(phase=step.phase, label=step.label(context)))
                context = await step.run(context, emit)
        except Exception as exc:
            failure = describe(exc)
            if failure.category is ErrorCategory.UNKNOWN:
                Log.exception(f"Run {run_id}: unexpected failure: {exc}")
            else:
                Log.error(f"Run {run_id}: {failure.category.value} failure: {failure.message}")
            emit(ProgressEvent(phase=ExtractionPhase.FAILED, label=failure.title))
            return ExtractionOutcome(
                run_id=run_id, file_name=document.file_name, failure=failure
            )

        emit(ProgressEvent(phase=ExtractionPhase.SUCCESS, label=SUCCESS_LABEL))
        Log.info(f"Run {run_id}: extraction of '{document.file_name}' succeeded")
        return ExtractionOutcome(
            run_id=run_id,
            file_name=document.file_name,
            text=context.text,
            format=context.format,
        )


def build_orchestrator(settings: Settings) -> ExtractionOrchestrator:
    """Build an ExtractionOrchestrator with the configured PDF engine."""
    registry = ExtractorRegistry(
        plain_text=PlainTextExtractor(),
        flow_document=DocxExtractor(),
        page_document=PdfExtractorFactory.create(settings),
    )
    steps: list[PipelineStep] = [
        AcquireStep(),
        DetectFormatStep(FormatDetector()),
        ExtractTextStep(registry),
        SanitizeStep(Sanitizer()),
    ]
    return ExtractionOrchestrator(steps)
