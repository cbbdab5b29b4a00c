"""Heuristic aggregation: weight table, baseline, clamp and rounding."""

import math
from typing import Dict, Iterable, Mapping

from common.errors import HeuristicError
from detection.types import HeuristicScore, SignalName, SignalResult

# Points on the 0-10 scale contributed by a signal at full strength (|c| = 1).
SIGNAL_WEIGHTS: Dict[SignalName, float] = {
    SignalName.LOW_SENTENCE_VARIANCE: 1.0,
    SignalName.LOW_VOCABULARY_DIVERSITY: 0.75,
    SignalName.LOW_BURSTINESS: 0.75,
    SignalName.FORMULAIC_PHRASES: 2.0,
    SignalName.DASH_USAGE: 1.0,
    SignalName.AI_VOCABULARY: 1.5,
    SignalName.PUNCTUATION_PATTERN: 0.75,
    SignalName.HUMAN_INFORMALITY: 2.5,
    SignalName.LINE_BREAK_FORMATTING: 1.0,
    SignalName.PROMOTIONAL_PATTERN: 1.5,
}

# Score of a text with no signal at all: the middle of the mixed band
NEUTRAL_BASELINE = 5.0
SCORE_MIN = 0
SCORE_MAX = 10


def round_half_up(value: float) -> int:
    """Round to nearest integer, .5 going up (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


class WeightedSignalAggregator:
    """Baseline plus weighted sum of contributions, clamped to [0, 10]."""

    def __init__(
        self,
        weights: Mapping[SignalName, float] = None,
        baseline: float = NEUTRAL_BASELINE,
    ):
        self.weights = dict(weights if weights is not None else SIGNAL_WEIGHTS)
        self.baseline = baseline
        missing = [n.value for n in SignalName if n not in self.weights]
        if missing:
            raise HeuristicError(f"No weight for signals: {', '.join(missing)}")

    def raw_score(self, results: Iterable[SignalResult]) -> float:
        """Unclamped, unrounded weighted score."""
        return self.baseline + sum(
            self.weights[r.name] * r.contribution for r in results
        )

    def aggregate(self, results: Iterable[SignalResult]) -> HeuristicScore:
        results = tuple(results)
        names = [r.name for r in results]
        if sorted(names) != sorted(SignalName) or len(set(names)) != len(names):
            raise HeuristicError(
                f"Expected exactly one result per signal, got {[n.value for n in names]}"
            )

        ordered = tuple(sorted(results, key=lambda r: list(SignalName).index(r.name)))
        value = min(float(SCORE_MAX), max(float(SCORE_MIN), self.raw_score(ordered)))

        return HeuristicScore(
            value=round_half_up(value),
            fired_signals=tuple(r.name.value for r in ordered if r.fired),
            signals=ordered,
        )
