"""Abstract base classes for the detection system."""

from abc import ABC, abstractmethod

from detection.types import ModelScore, SignalName, SignalResult, TextSample

# A signal fires when |contribution| strictly exceeds this
DEFAULT_ACTIVATION_THRESHOLD = 0.3


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class SignalExtractor(ABC):
    """Protocol for a single heuristic signal."""

    activation_threshold: float = DEFAULT_ACTIVATION_THRESHOLD

    @property
    @abstractmethod
    def name(self) -> SignalName:
        """The signal this extractor produces."""
        ...

    @abstractmethod
    def contribution(self, sample: TextSample) -> float:
        """
        Compute the raw contribution for a text sample.

        Must be total: any well-formed (possibly very short) sample yields a
        number. Positive pushes toward AI, negative toward human.
        """
        ...

    def extract(self, sample: TextSample) -> SignalResult:
        value = clamp(float(self.contribution(sample)), -1.0, 1.0)
        return SignalResult(
            name=self.name,
            contribution=value,
            fired=abs(value) > self.activation_threshold,
        )


class ModelJudge(ABC):
    """Protocol for a remote model provider that scores text 0-10."""

    @property
    @abstractmethod
    def provider(self) -> str:
        """Provider id reported by the health query (e.g. 'anthropic')."""
        ...

    @property
    @abstractmethod
    def model(self) -> str:
        """Model id sent to the provider."""
        ...

    @abstractmethod
    async def score(self, text: str) -> ModelScore:
        """
        Return the provider's score for *text*.

        Raises:
            ModelFailure: on transport errors, auth rejection or an
                unparseable response.
        """
        ...
