"""
Range-based text editing used to print updated source nodes.
Unchanged text between edited ranges is copied verbatim, so the output keeps
the original formatting everywhere the rewrite did not touch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class TextRange:
    """Represents a range in text by character positions."""
    start_char: int
    end_char: int

    def __post_init__(self):
        if self.start_char > self.end_char:
            raise ValueError(f"Invalid range: start_char ({self.start_char}) > end_char ({self.end_char})")

    def overlaps(self, other: TextRange) -> bool:
        """Check if this range overlaps with another."""
        return not (self.end_char <= other.start_char or other.end_char <= self.start_char)


@dataclass(frozen=True)
class Edit:
    """Replacement of a character range (empty replacement deletes it)."""
    range: TextRange
    replacement: str


class RangeEditor:
    """
    Collects non-overlapping edits against a text and applies them at once.
    Positions are relative to the start of the edited text.
    """

    def __init__(self, original_text: str):
        self.original_text = original_text
        self.edits: List[Edit] = []

    def add_replacement(self, start_char: int, end_char: int, replacement: str) -> None:
        char_range = TextRange(start_char, end_char)
        if start_char < 0 or end_char > len(self.original_text):
            raise ValueError(
                f"Edit {start_char}..{end_char} is outside of the text (length {len(self.original_text)})"
            )
        for existing in self.edits:
            if char_range.overlaps(existing.range):
                raise ValueError(
                    f"Edit {start_char}..{end_char} overlaps "
                    f"{existing.range.start_char}..{existing.range.end_char}"
                )
        self.edits.append(Edit(char_range, replacement))

    def add_deletion(self, start_char: int, end_char: int) -> None:
        self.add_replacement(start_char, end_char, "")

    def apply_edits(self) -> str:
        if not self.edits:
            return self.original_text

        parts: List[str] = []
        cursor = 0
        for edit in sorted(self.edits, key=lambda e: e.range.start_char):
            parts.append(self.original_text[cursor:edit.range.start_char])
            parts.append(edit.replacement)
            cursor = edit.range.end_char
        parts.append(self.original_text[cursor:])
        return "".join(parts)


__all__ = ["TextRange", "Edit", "RangeEditor"]
