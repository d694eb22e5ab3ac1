import asyncio
from collections.abc import Callable

ANALYSIS_PHASES: tuple[str, ...] = (
    "Awakening Neural Correlates...",
    "Synthesizing Career Trajectories...",
    "Evaluating Semantic Alignment...",
    "Quantifying Market Relevance...",
    "Generating Strategic Intelligence...",
)


class AnalysisTicker:
    """Cosmetic phase ticker shown while an analysis call is in flight.

    Advances on a fixed interval and holds at the last phase. It knows nothing
    about the real call; completion is decided solely by the caller.
    """

    def __init__(
        self,
        interval_seconds: float = 3.0,
        on_tick: Callable[[str], None] | None = None,
        phases: tuple[str, ...] = ANALYSIS_PHASES,
    ) -> None:
        if not phases:
            raise ValueError("AnalysisTicker needs at least one phase label")
        self._interval = interval_seconds
        self._on_tick = on_tick
        self._phases = phases
        self._index = 0
        self._task: asyncio.Task[None] | None = None

    @property
    def label(self) -> str:
        return self._phases[self._index]

    @property
    def phase_index(self) -> int:
        return self._index

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Reset to the first phase and begin ticking on the running loop."""
        self.stop()
        self._index = 0
        self._notify()
        self._task = asyncio.get_running_loop().create_task(self._advance())

    def stop(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _advance(self) -> None:
        while self._index < len(self._phases) - 1:
            await asyncio.sleep(self._interval)
            self._index += 1
            self._notify()

    def _notify(self) -> None:
        if self._on_tick is not None:
            self._on_tick(self.label)
