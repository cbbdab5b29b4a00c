"""Sentence rhythm signals: length variance and burstiness."""

import numpy as np

from detection.protocols import SignalExtractor, clamp
from detection.types import SignalName, TextSample

MIN_SENTENCES = 3


class LowSentenceVarianceSignal(SignalExtractor):
    """
    Uniform sentence lengths read as generated text.

    Population variance of sentence word counts: 0 maps to +1, 15 to 0,
    30 and above to -0.5.
    """

    neutral_variance = 15.0

    @property
    def name(self) -> SignalName:
        return SignalName.LOW_SENTENCE_VARIANCE

    def contribution(self, sample: TextSample) -> float:
        lengths = sample.sentence_lengths
        if len(lengths) < MIN_SENTENCES:
            return 0.0
        variance = float(np.var(lengths))
        return clamp((self.neutral_variance - variance) / self.neutral_variance, -0.5, 1.0)


class LowBurstinessSignal(SignalExtractor):
    """
    Burstiness b = ((std - mean) / (std + mean) + 1) / 2, in [0, 1].

    Human writing alternates short and long sentences (b near 0.5 or above);
    generated text flows evenly (b well below 0.4).
    """

    neutral_burstiness = 0.4
    span = 0.15

    @property
    def name(self) -> SignalName:
        return SignalName.LOW_BURSTINESS

    def contribution(self, sample: TextSample) -> float:
        lengths = np.asarray(sample.sentence_lengths, dtype=float)
        if len(lengths) < MIN_SENTENCES:
            return 0.0
        mean = float(lengths.mean())
        std = float(lengths.std())
        if mean + std == 0:
            return 0.0
        burstiness = ((std - mean) / (std + mean) + 1.0) / 2.0
        return clamp((self.neutral_burstiness - burstiness) / self.span, -0.5, 1.0)
