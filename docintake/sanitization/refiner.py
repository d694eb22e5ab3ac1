"""Optional, user-triggered cleanup of the working text."""

import re

from docintake.sanitization.models import RefinementOptions
from docintake.sanitization.sanitizer import (
    collapse_horizontal_whitespace,
    strip_control_chars,
)

BLANK_LINE_RUNS = re.compile(r"\n\s*\n")
# Whitespace is listed explicitly: Python's \s also matches the C0 separators
# U+001C..U+001F, which must not survive this filter.
WHITESPACE_CHARS = " \t\n\r\f\v\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
NON_STANDARD_CHARS = re.compile(
    "[^a-zA-Z0-9" + WHITESPACE_CHARS + r".,!?;:()'\"\-/&@$€%]"
)
BULLET_GLYPHS = re.compile(r"[•●■▪◦]")


def normalize_spacing(text: str) -> str:
    text = BLANK_LINE_RUNS.sub("\n\n", text)
    return collapse_horizontal_whitespace(text)


def remove_special_chars(text: str) -> str:
    return NON_STANDARD_CHARS.sub("", text)


def strip_unwanted_formatting(text: str) -> str:
    text = strip_control_chars(text)
    return BULLET_GLYPHS.sub("-", text)


class Refiner:
    """Applies the enabled refinement transforms in a fixed order."""

    def refine(self, text: str, options: RefinementOptions) -> str:
        if options.normalize_spacing:
            text = normalize_spacing(text)
        if options.remove_special_chars:
            text = remove_special_chars(text)
        if options.strip_unwanted_formatting:
            text = strip_unwanted_formatting(text)
        return text.strip()
