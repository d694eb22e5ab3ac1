from dataclasses import dataclass


@dataclass(frozen=True)
class GlyphRun:
    """A text fragment positioned on a page.

    ``y`` is the baseline in page space with the origin at the bottom edge,
    so larger values are higher on the page.
    """

    text: str
    x: float
    y: float
