"""Reading-order reconstruction for page documents."""

import math
from collections import defaultdict

from docintake.pdf.models import GlyphRun


def line_key(y: float) -> int:
    """Bucket a baseline to the nearest integer, rounding halves up."""
    return math.floor(y + 0.5)


def group_lines(runs: list[GlyphRun]) -> list[list[GlyphRun]]:
    """Group runs into lines ordered top-to-bottom, each ordered left-to-right."""
    buckets: dict[int, list[GlyphRun]] = defaultdict(list)
    for run in runs:
        buckets[line_key(run.y)].append(run)
    return [
        sorted(buckets[key], key=lambda run: run.x)
        for key in sorted(buckets, reverse=True)
    ]


def assemble_page(runs: list[GlyphRun]) -> str:
    """Join runs on a line with one space and lines with a newline."""
    return "\n".join(
        " ".join(run.text for run in line) for line in group_lines(runs)
    )
