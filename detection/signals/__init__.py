"""Built-in signal extractors, one per SignalName."""

from detection.signals.rhythm import LowSentenceVarianceSignal, LowBurstinessSignal
from detection.signals.vocabulary import LowVocabularyDiversitySignal, AIVocabularySignal
from detection.signals.phrasing import FormulaicPhrasesSignal, PromotionalPatternSignal
from detection.signals.punctuation import DashUsageSignal, PunctuationPatternSignal
from detection.signals.informality import HumanInformalitySignal
from detection.signals.formatting import LineBreakFormattingSignal

BUILTIN_SIGNALS = [
    LowSentenceVarianceSignal(),
    LowVocabularyDiversitySignal(),
    LowBurstinessSignal(),
    FormulaicPhrasesSignal(),
    DashUsageSignal(),
    AIVocabularySignal(),
    PunctuationPatternSignal(),
    HumanInformalitySignal(),
    LineBreakFormattingSignal(),
    PromotionalPatternSignal(),
]

__all__ = [
    "LowSentenceVarianceSignal",
    "LowVocabularyDiversitySignal",
    "LowBurstinessSignal",
    "FormulaicPhrasesSignal",
    "DashUsageSignal",
    "AIVocabularySignal",
    "PunctuationPatternSignal",
    "HumanInformalitySignal",
    "LineBreakFormattingSignal",
    "PromotionalPatternSignal",
    "BUILTIN_SIGNALS",
]
