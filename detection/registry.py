"""Signal registry keyed by the closed SignalName set."""

from typing import Dict, List, Optional

from detection.protocols import SignalExtractor
from detection.types import SignalName


class SignalRegistry:
    """Registry for signal extractors, keyed by SignalName."""

    def __init__(self):
        self._extractors: Dict[SignalName, SignalExtractor] = {}

    def register(self, extractor: SignalExtractor) -> None:
        """Register an extractor (replaces existing with same name)."""
        self._extractors[SignalName(extractor.name)] = extractor

    def unregister(self, name: SignalName) -> None:
        """Remove an extractor by name. No-op if not found."""
        self._extractors.pop(name, None)

    def get(self, name: SignalName) -> Optional[SignalExtractor]:
        return self._extractors.get(name)

    @property
    def extractors(self) -> List[SignalExtractor]:
        """Registered extractors in SignalName declaration order."""
        return [self._extractors[n] for n in SignalName if n in self._extractors]

    @property
    def missing(self) -> List[SignalName]:
        """Signal names with no registered extractor."""
        return [n for n in SignalName if n not in self._extractors]

    def __len__(self) -> int:
        return len(self._extractors)

    def __contains__(self, name: SignalName) -> bool:
        return name in self._extractors
