"""Source clean-up: trimming, ``define`` constants and label resolution."""

from __future__ import annotations

from collections.abc import Iterable

from .config import DEFINITION_KEY_WORD, FIRST_LABEL_CHAR
from .lexical import WHITESPACE


def extract_label(line: str) -> tuple[str, str]:
    """Split a line into its leading label and the text after the first space."""
    label, _, rest = line.partition(" ")
    return label, rest


def extract_definition(line: str) -> tuple[str, str]:
    """Return the name and value of a ``define NAME VALUE`` line."""
    parts = line.split(" ")
    if len(parts) != 3:
        raise ValueError("Wrong definition format")
    return parts[1], parts[2]


class Preprocessor:
    """Rewrites source lines into plain instructions ready for parsing."""

    def __init__(self, lines: Iterable[str]) -> None:
        self.lines: list[str] = list(lines)
        self.labels_n_definitions: dict[str, str] = {}

    def preprocess(self) -> list[str]:
        self.uniformize()
        self.find_definitions()
        self.find_labels()
        self.replace_labels()
        return self.lines

    def uniformize(self) -> None:
        """Trim lines, drop blank ones and join a lone label to the next line."""
        cleaned: list[str] = []
        remaining = iter(self.lines)
        for raw in remaining:
            line = raw.strip(WHITESPACE)
            if not line:
                continue
            if line.startswith(FIRST_LABEL_CHAR):
                label, rest = extract_label(line)
                while not rest:
                    try:
                        rest = next(remaining).strip(WHITESPACE)
                    except StopIteration:
                        raise ValueError(
                            f"Label {label} is not followed by an instruction"
                        ) from None
                line = f"{label} {rest}"
            cleaned.append(line)
        self.lines = cleaned

    def find_definitions(self) -> None:
        """Record and remove ``define`` lines."""
        kept: list[str] = []
        for line in self.lines:
            if line.startswith(DEFINITION_KEY_WORD):
                name, value = extract_definition(line)
                self.labels_n_definitions[name] = value
            else:
                kept.append(line)
        self.lines = kept

    def find_labels(self) -> None:
        """Record each label's line number and strip it from its line."""
        resolved: list[str] = []
        for number, line in enumerate(self.lines):
            line = line.strip(WHITESPACE)
            if line.startswith(FIRST_LABEL_CHAR):
                label, line = extract_label(line)
                self.labels_n_definitions[label] = str(number)
            resolved.append(line)
        self.lines = resolved

    def replace_labels(self) -> None:
        """Substitute every known name, in sorted name order."""
        replacements = sorted(self.labels_n_definitions.items())
        rewritten: list[str] = []
        for line in self.lines:
            for name, value in replacements:
                line = line.replace(name, value)
            rewritten.append(line)
        self.lines = rewritten