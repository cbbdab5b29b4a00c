"""Vocabulary signals: type-token ratio and AI-favoured word choice."""

import re

from detection.protocols import SignalExtractor, clamp
from detection.types import SignalName, TextSample

# Words over-represented in model output. Matched as whole words only,
# so listed inflections must be spelled out.
AI_VOCABULARY = [
    "plethora", "myriad", "delve", "delves", "delved", "delving",
    "leverage", "leverages", "leveraged", "leveraging",
    "unleash", "unleashes", "unleashing", "unlock", "unlocks", "unlocking",
    "harness", "harnessing", "revolutionize", "revolutionizes", "revolutionizing",
    "paradigm", "paradigms", "synergy", "synergies", "holistic", "nuanced",
    "robust", "transformative", "cutting-edge", "game-changer", "game-changers",
    "supercharge", "supercharged", "tapestry", "bustling", "pivotal",
    "comprehensive", "framework", "frameworks", "trajectory", "spectrum",
    "facet", "facets", "confluence", "remarkable", "seamless", "seamlessly",
    "elevate", "elevates", "elevating", "empower", "empowers", "empowering",
    "foster", "fostering", "streamline", "streamlined", "underscore", "underscores",
    "showcase", "showcasing", "landscape", "realm", "testament", "intricate",
    "intricacies", "meticulous", "meticulously", "invaluable", "unparalleled",
    "multifaceted", "embark", "embarking", "master", "mastering", "masterclass",
]

_AI_VOCABULARY_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(w) for w in AI_VOCABULARY) + r")\b",
    re.IGNORECASE,
)


class LowVocabularyDiversitySignal(SignalExtractor):
    """
    Type-token ratio over the first *window* words.

    TTR falls as texts get longer, so only a fixed-size prefix is measured,
    and texts shorter than *min_words* are not judged at all.
    """

    min_words = 20
    window = 100

    @property
    def name(self) -> SignalName:
        return SignalName.LOW_VOCABULARY_DIVERSITY

    def contribution(self, sample: TextSample) -> float:
        if len(sample.words) < self.min_words:
            return 0.0
        words = sample.words[:self.window]
        ttr = len(set(words)) / len(words)
        return clamp((0.6 - ttr) / 0.2, -0.25, 1.0)


class AIVocabularySignal(SignalExtractor):
    """
    Whole-word matches against AI_VOCABULARY.

    Each match is worth 0.4 per 100 words (texts under 100 words count as 100),
    so a single hit in a short post fires.
    """

    per_match = 0.4

    @property
    def name(self) -> SignalName:
        return SignalName.AI_VOCABULARY

    def contribution(self, sample: TextSample) -> float:
        matches = len(_AI_VOCABULARY_RE.findall(sample.text))
        if not matches:
            return 0.0
        scale = 100.0 / max(len(sample.words), 100)
        return min(1.0, self.per_match * matches * scale)
