"""Heuristic engine: tokenizes once, runs every extractor, aggregates."""

from typing import List, Optional

from common.errors import HeuristicError
from detection.aggregation import WeightedSignalAggregator
from detection.protocols import SignalExtractor
from detection.registry import SignalRegistry
from detection.signals import BUILTIN_SIGNALS
from detection.types import HeuristicScore, SignalResult, TextSample


class HeuristicEngine:
    """
    Deterministic local scorer over normalized text.

    Args:
        extractors: Optional list of extractors (defaults to BUILTIN_SIGNALS).
            Must cover every SignalName.
        aggregator: Optional aggregator (defaults to WeightedSignalAggregator).
    """

    def __init__(
        self,
        extractors: Optional[List[SignalExtractor]] = None,
        aggregator: Optional[WeightedSignalAggregator] = None,
    ):
        self.registry = SignalRegistry()
        for extractor in (extractors or BUILTIN_SIGNALS):
            self.registry.register(extractor)

        missing = self.registry.missing
        if missing:
            raise HeuristicError(
                f"No extractor registered for: {', '.join(n.value for n in missing)}"
            )

        self.aggregator = aggregator or WeightedSignalAggregator()

    def extract(self, text: str) -> List[SignalResult]:
        """All signal results for *text*, in SignalName order."""
        sample = TextSample.from_text(text)
        return [e.extract(sample) for e in self.registry.extractors]

    def analyze(self, text: str) -> HeuristicScore:
        return self.aggregator.aggregate(self.extract(text))
