"""Value types shared by the signal extractors, aggregator, port and fusion."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class SignalName(str, Enum):
    """
    The closed set of heuristic signals.

    Member order is the presentation order of fired signals. Adding a member
    requires a weight in aggregation.SIGNAL_WEIGHTS and a registered extractor;
    both are checked when the engine is built.
    """
    LOW_SENTENCE_VARIANCE = "low_sentence_variance"
    LOW_VOCABULARY_DIVERSITY = "low_vocabulary_diversity"
    LOW_BURSTINESS = "low_burstiness"
    FORMULAIC_PHRASES = "formulaic_phrases"
    DASH_USAGE = "dash_usage"
    AI_VOCABULARY = "ai_vocabulary"
    PUNCTUATION_PATTERN = "punctuation_pattern"
    HUMAN_INFORMALITY = "human_informality"
    LINE_BREAK_FORMATTING = "line_break_formatting"
    PROMOTIONAL_PATTERN = "promotional_pattern"


@dataclass(frozen=True)
class SignalResult:
    name: SignalName
    contribution: float
    fired: bool


_WORD_RE = re.compile(r"[^\W_]+(?:['\u2019][^\W_]+)*")
_SENTENCE_SPLIT_RE = re.compile(r'[.!?]+')


@dataclass(frozen=True)
class TextSample:
    """
    Normalized text tokenized once for all extractors.

    words: lowercase word tokens (apostrophes kept inside words)
    sentences: non-empty stripped fragments between . ! ? runs
    lines: non-empty stripped lines
    """
    text: str
    lower: str
    words: Tuple[str, ...]
    sentences: Tuple[str, ...]
    lines: Tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> "TextSample":
        lower = text.lower()
        return cls(
            text=text,
            lower=lower,
            words=tuple(_WORD_RE.findall(lower)),
            sentences=tuple(s.strip() for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()),
            lines=tuple(line.strip() for line in text.split('\n') if line.strip()),
        )

    @property
    def sentence_lengths(self) -> List[int]:
        return [len(s.split()) for s in self.sentences]


@dataclass(frozen=True)
class HeuristicScore:
    value: int
    fired_signals: Tuple[str, ...] = ()
    signals: Tuple[SignalResult, ...] = field(default=(), compare=False)


@dataclass(frozen=True)
class ModelScore:
    value: int
    confidence: float


class JudgmentStatus(str, Enum):
    SCORED = "scored"
    UNAVAILABLE = "unavailable"
    FAILED = "failed"


@dataclass(frozen=True)
class Judgment:
    """Outcome of one Model Judgment Port call."""
    status: JudgmentStatus
    score: Optional[ModelScore] = None
    reason: Optional[str] = None

    @classmethod
    def scored(cls, score: ModelScore) -> "Judgment":
        return cls(JudgmentStatus.SCORED, score=score)

    @classmethod
    def unavailable(cls) -> "Judgment":
        return cls(JudgmentStatus.UNAVAILABLE)

    @classmethod
    def failed(cls, reason: str) -> "Judgment":
        return cls(JudgmentStatus.FAILED, reason=reason)
