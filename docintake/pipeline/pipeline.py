from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import ClassVar

from docintake.pipeline.models import ExtractionContext, ExtractionPhase, ProgressEvent

ProgressCallback = Callable[[ProgressEvent], None]


class PipelineStep(ABC):
    phase: ClassVar[ExtractionPhase]

    @abstractmethod
    def label(self, context: ExtractionContext) -> str:
        """Human-readable progress label shown when the step starts."""

    @abstractmethod
    async def run(
        self, context: ExtractionContext, emit: ProgressCallback
    ) -> ExtractionContext:
        raise NotImplementedError
