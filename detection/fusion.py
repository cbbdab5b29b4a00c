"""
Score fusion and labeling.

With a model score:   final = round(0.6 * model + 0.4 * heuristic),
                      confidence = min(1, model_conf * 0.7 + 0.3)
Heuristics only:      final = heuristic, confidence capped at 0.5
"""

from typing import Optional

from common.errors import DetectorError
from common.models import AnalysisResult, Label
from detection.judgment import ProviderConfig
from detection.types import HeuristicScore, ModelScore

MODEL_WEIGHT = 6
HEURISTIC_WEIGHT = 4

HEURISTIC_ONLY_CONFIDENCE_CAP = 0.5
_HEURISTIC_CONFIDENCE_BASE = 0.3
_HEURISTIC_CONFIDENCE_PER_POINT = 0.04
_HEURISTIC_CONFIDENCE_PER_SIGNAL = 0.02


def score_to_label(score: int) -> Label:
    if score <= 3:
        return Label.HUMAN
    if score <= 5:
        return Label.MIXED
    if score <= 7:
        return Label.LIKELY_AI
    return Label.AI


def fused_score(model: int, heuristic: int) -> int:
    # Integer arithmetic keeps x.5 rounding up without float drift
    return (MODEL_WEIGHT * model + HEURISTIC_WEIGHT * heuristic + 5) // 10


def heuristic_confidence(heuristic: HeuristicScore) -> float:
    """Grows with distance from the neutral 5 and with the number of fired signals."""
    value = (
        _HEURISTIC_CONFIDENCE_BASE
        + _HEURISTIC_CONFIDENCE_PER_POINT * abs(heuristic.value - 5)
        + _HEURISTIC_CONFIDENCE_PER_SIGNAL * len(heuristic.fired_signals)
    )
    return round(min(value, HEURISTIC_ONLY_CONFIDENCE_CAP), 4)


def fuse(
    heuristic: HeuristicScore,
    model_score: Optional[ModelScore],
    provider: ProviderConfig,
) -> AnalysisResult:
    """
    Combine the heuristic score with an optional model score.

    Raises:
        DetectorError: a model score was supplied while no provider is configured.
    """
    if model_score is not None and not provider.configured:
        raise DetectorError("Model score supplied but no model provider is configured")

    if model_score is None:
        score = heuristic.value
        confidence = heuristic_confidence(heuristic)
        llm_score = None
    else:
        score = fused_score(model_score.value, heuristic.value)
        confidence = round(min(
            1.0,
            model_score.confidence * provider.confidence_scale + provider.confidence_offset,
        ), 4)
        llm_score = model_score.value

    return AnalysisResult(
        score=score,
        confidence=confidence,
        label=score_to_label(score),
        heuristic_score=heuristic.value,
        model_score=llm_score,
        fired_signals=tuple(heuristic.fired_signals),
    )
