"""Mandatory text hygiene applied once to every freshly extracted document."""

import re

# C0 controls except tab, LF and CR, plus DEL and the C1 block.
CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F-\x9F]")
LINE_BREAKS = re.compile(r"\r\n?")
HORIZONTAL_WHITESPACE = re.compile(r"[ \t]+")


def strip_control_chars(text: str) -> str:
    return CONTROL_CHARS.sub("", text)


def normalize_line_endings(text: str) -> str:
    return LINE_BREAKS.sub("\n", text)


def collapse_horizontal_whitespace(text: str) -> str:
    return HORIZONTAL_WHITESPACE.sub(" ", text)


class Sanitizer:
    """Runs the fixed three-stage cleanup chain.

    Stage order matters: CR must survive control stripping so that line
    endings can be normalised before whitespace is collapsed.
    """

    STAGES = (
        strip_control_chars,
        normalize_line_endings,
        collapse_horizontal_whitespace,
    )

    def sanitize(self, text: str) -> str:
        for stage in self.STAGES:
            text = stage(text)
        return text.strip()
