import asyncio

from docintake.documents.format_detector import FormatDetector
from docintake.extractors.exceptions import EmptyDocumentError
from docintake.extractors.registry import ExtractorRegistry
from docintake.logging.logger import Log
from docintake.pipeline.models import (
    ACQUIRING_LABEL,
    FORMAT_DISPATCH_LABEL,
    FORMAT_LABELS,
    SANITIZING_LABEL,
    ExtractionContext,
    ExtractionPhase,
    ProgressEvent,
)
from docintake.pipeline.pipeline import PipelineStep, ProgressCallback
from docintake.sanitization.sanitizer import Sanitizer


def _require_document(context: ExtractionContext) -> bytes:
    if context.document is None:
        raise ValueError("ExtractionContext.document must be set before this step")
    return context.document.data


class AcquireStep(PipelineStep):
    phase = ExtractionPhase.ACQUIRING

    def label(self, context: ExtractionContext) -> str:
        return ACQUIRING_LABEL

    async def run(
        self, context: ExtractionContext, emit: ProgressCallback
    ) -> ExtractionContext:
        if context.document is None:
            raise ValueError("ExtractionContext.document must be set before acquisition")
        Log.info(
            f"Run {context.run_id}: acquired {context.document.size_bytes} bytes"
            f" from '{context.file_name}'"
        )
        return context


class DetectFormatStep(PipelineStep):
    phase = ExtractionPhase.FORMAT_DISPATCH

    def __init__(self, detector: FormatDetector) -> None:
        self._detector = detector

    def label(self, context: ExtractionContext) -> str:
        return FORMAT_DISPATCH_LABEL

    async def run(
        self, context: ExtractionContext, emit: ProgressCallback
    ) -> ExtractionContext:
        if context.document is None:
            raise ValueError("ExtractionContext.document must be set before format detection")
        context.format = self._detector.detect(context.document)
        Log.info(f"Run {context.run_id}: detected format {context.format.value}")
        return context


class ExtractTextStep(PipelineStep):
    """Decodes the document off the event loop, relaying page progress in order."""

    phase = ExtractionPhase.EXTRACTING

    def __init__(self, registry: ExtractorRegistry) -> None:
        self._registry = registry

    def label(self, context: ExtractionContext) -> str:
        if context.format is None:
            raise ValueError("ExtractionContext.format must be set before extraction")
        return FORMAT_LABELS[context.format]

    async def run(
        self, context: ExtractionContext, emit: ProgressCallback
    ) -> ExtractionContext:
        data = _require_document(context)
        if context.format is None:
            raise ValueError("ExtractionContext.format must be set before extraction")
        extractor = self._registry.for_format(context.format)
        loop = asyncio.get_running_loop()

        def on_page(current: int, total: int) -> None:
            Log.debug(f"Run {context.run_id}: page {current} of {total}")
            loop.call_soon_threadsafe(emit, ProgressEvent.page(current, total))

        context.raw_text = await asyncio.to_thread(extractor.extract, data, on_page)
        # The raw bytes are consumed once and not kept past extraction.
        context.document = None
        Log.info(f"Run {context.run_id}: extracted {len(context.raw_text)} chars")
        return context


class SanitizeStep(PipelineStep):
    phase = ExtractionPhase.SANITIZING

    def __init__(self, sanitizer: Sanitizer) -> None:
        self._sanitizer = sanitizer

    def label(self, context: ExtractionContext) -> str:
        return SANITIZING_LABEL

    async def run(
        self, context: ExtractionContext, emit: ProgressCallback
    ) -> ExtractionContext:
        context.text = self._sanitizer.sanitize(context.raw_text)
        if not context.text:
            raise EmptyDocumentError(
                "Data void: the provided file contains no interpretable text structure."
            )
        Log.info(f"Run {context.run_id}: sanitized text is {len(context.text)} chars")
        return context
