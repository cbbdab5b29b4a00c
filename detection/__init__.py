"""
AI-generated content detection.

Public API:
    DetectorService    analyze / history / authors / health
    HeuristicEngine    deterministic local scoring
    ModelJudgmentPort  optional remote model score
    ProviderConfig     resolved provider settings
    fuse, score_to_label
"""

from detection.engine import HeuristicEngine
from detection.fusion import fuse, score_to_label
from detection.judgment import ModelJudgmentPort, ProviderConfig
from detection.protocols import ModelJudge, SignalExtractor
from detection.service import VERSION, DetectorService
from detection.types import SignalName

__version__ = VERSION

__all__ = [
    "DetectorService",
    "HeuristicEngine",
    "ModelJudgmentPort",
    "ProviderConfig",
    "ModelJudge",
    "SignalExtractor",
    "SignalName",
    "fuse",
    "score_to_label",
    "__version__",
]
