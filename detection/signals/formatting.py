"""Layout signal: one-sentence-per-line "broetry" posts."""

import re

from detection.protocols import SignalExtractor, clamp
from detection.types import SignalName, TextSample

# Terminators followed by more text on the same line mark a second sentence
_INNER_BREAK_RE = re.compile(r"[.!?]+\s+\S")


class LineBreakFormattingSignal(SignalExtractor):
    """
    Share of non-empty lines holding at most one sentence.

    Needs at least *min_lines* lines. A 50% share is neutral, 90% and above
    saturates; posts where every line is its own blank-line separated
    paragraph get a further 0.2.
    """

    min_lines = 4

    @property
    def name(self) -> SignalName:
        return SignalName.LINE_BREAK_FORMATTING

    def contribution(self, sample: TextSample) -> float:
        lines = sample.lines
        if len(lines) < self.min_lines:
            return 0.0

        single = sum(1 for line in lines if not _INNER_BREAK_RE.search(line))
        share = single / len(lines)
        value = (share - 0.5) / 0.4

        paragraphs = [p for p in sample.text.split('\n\n') if p.strip()]
        if len(paragraphs) == len(lines):
            value += 0.2

        return clamp(value, 0.0, 1.0)
