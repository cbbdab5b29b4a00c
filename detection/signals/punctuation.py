"""Punctuation signals: dash habits and terminal punctuation uniformity."""

import re

from detection.protocols import SignalExtractor, clamp
from detection.types import SignalName, TextSample

_EM_EN_DASH_RE = re.compile("[\u2014\u2013]")
_DOUBLE_HYPHEN_RE = re.compile(r"\s--\s")
_SPACED_HYPHEN_RE = re.compile(r"(?<=\S)[ \t]-\s")
_TERMINATOR_RE = re.compile(r"[.!?]")


class DashUsageSignal(SignalExtractor):
    """
    Dash rate per 100 words above an allowance of 0.5.

    Em/en dashes and spaced double hyphens count 1; spaced single hyphens,
    which casual writers do use, count 0.5.
    """

    allowance_per_100 = 0.5
    span = 1.5

    @property
    def name(self) -> SignalName:
        return SignalName.DASH_USAGE

    def contribution(self, sample: TextSample) -> float:
        weighted = (
            len(_EM_EN_DASH_RE.findall(sample.text))
            + len(_DOUBLE_HYPHEN_RE.findall(sample.text))
            + 0.5 * len(_SPACED_HYPHEN_RE.findall(sample.text))
        )
        if not weighted:
            return 0.0
        rate = weighted * 100.0 / max(len(sample.words), 1)
        return clamp((rate - self.allowance_per_100) / self.span, 0.0, 1.0)


class PunctuationPatternSignal(SignalExtractor):
    """
    Terminal punctuation variety and comma density.

    Almost-all-period endings push toward AI, a real mix of ! and ? pushes
    toward human; comma-heavy prose adds on top.
    """

    min_sentences = 3

    @property
    def name(self) -> SignalName:
        return SignalName.PUNCTUATION_PATTERN

    def contribution(self, sample: TextSample) -> float:
        if len(sample.sentences) < self.min_sentences:
            return 0.0

        terminators = _TERMINATOR_RE.findall(sample.text)
        if not terminators:
            return 0.0

        value = 0.0
        period_ratio = terminators.count('.') / len(terminators)
        if period_ratio > 0.95:
            value += 0.6
        elif period_ratio < 0.7:
            value -= 0.3

        if sample.words and sample.text.count(',') / len(sample.words) > 0.15:
            value += 0.4

        return value
