from dataclasses import dataclass


@dataclass(frozen=True)
class RefinementOptions:
    """User toggles for the optional refinement pass."""

    normalize_spacing: bool = True
    remove_special_chars: bool = False
    strip_unwanted_formatting: bool = True
