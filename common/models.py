"""
Domain model dataclasses for the detector.

Row-backed models provide:
- from_row(): classmethod to construct from a database row tuple
- to_dict(): returns the dict shape served to API / CLI consumers
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, List, Tuple

from common.text_utils import content_preview


class Platform(str, Enum):
    TWITTER = "twitter"
    INSTAGRAM = "instagram"
    LINKEDIN = "linkedin"


class Label(str, Enum):
    """Categorical verdict derived from the final 0-10 score."""
    HUMAN = "human"
    MIXED = "mixed"
    LIKELY_AI = "likely_ai"
    AI = "ai"


# How the mixed band is shown when no model judgment backs the score
UNCERTAIN_LABEL = "uncertain"


@dataclass(frozen=True)
class AnalyzeRequest:
    """Input to the analyze operation, as received from the HTTP layer."""
    content: str
    platform: str
    post_id: Optional[str] = None
    author: Optional[str] = None


@dataclass(frozen=True)
class AnalysisResult:
    """Final verdict for one unique content hash. Never updated once stored."""
    score: int
    confidence: float
    label: Label
    heuristic_score: int
    model_score: Optional[int]
    fired_signals: Tuple[str, ...] = ()

    @property
    def heuristics_only(self) -> bool:
        return self.model_score is None

    @property
    def display_label(self) -> str:
        if self.heuristics_only and self.label is Label.MIXED:
            return UNCERTAIN_LABEL
        return self.label.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'confidence': self.confidence,
            'label': self.display_label,
            'breakdown': {
                'llm_score': self.model_score,
                'heuristic_score': self.heuristic_score,
                'signals': list(self.fired_signals),
            },
        }


@dataclass(frozen=True)
class AnalysisRecord:
    """One persisted row of the analyses table (the cache record)."""
    id: str
    content_hash: str
    content: str
    platform: str
    post_id: Optional[str]
    author: Optional[str]
    result: AnalysisResult
    created_at: str

    # Column order shared by every SELECT in AnalysisRepository
    COLUMNS = (
        "id, content_hash, content, platform, post_id, author, score, "
        "confidence, label, llm_score, heuristic_score, signals, created_at"
    )

    @classmethod
    def from_row(cls, row: tuple) -> "AnalysisRecord":
        return cls(
            id=row[0],
            content_hash=row[1],
            content=row[2],
            platform=row[3],
            post_id=row[4],
            author=row[5],
            result=AnalysisResult(
                score=row[6],
                confidence=row[7],
                label=Label(row[8]),
                model_score=row[9],
                heuristic_score=row[10],
                fired_signals=tuple(json.loads(row[11] or "[]")),
            ),
            created_at=row[12],
        )

    def to_row(self) -> tuple:
        r = self.result
        return (
            self.id,
            self.content_hash,
            self.content,
            self.platform,
            self.post_id,
            self.author,
            r.score,
            r.confidence,
            r.label.value,
            r.model_score,
            r.heuristic_score,
            json.dumps(list(r.fired_signals)),
            self.created_at,
        )

    def to_dict(self, preview_chars: int = 150) -> Dict[str, Any]:
        """History item shape."""
        return {
            'id': self.id,
            'content': self.content,
            'content_preview': content_preview(self.content, preview_chars),
            'platform': self.platform,
            'post_id': self.post_id,
            'author': self.author,
            'score': self.result.score,
            'confidence': self.result.confidence,
            'label': self.result.display_label,
            'llm_score': self.result.model_score,
            'heuristic_score': self.result.heuristic_score,
            'signals': list(self.result.fired_signals),
            'created_at': self.created_at,
        }


@dataclass
class HistoryPage:
    """A page of history items plus the unpaginated total."""
    items: List[AnalysisRecord] = field(default_factory=list)
    total: int = 0
    limit: int = 20
    offset: int = 0
    preview_chars: int = 150

    def to_dict(self) -> Dict[str, Any]:
        return {
            'items': [item.to_dict(self.preview_chars) for item in self.items],
            'total': self.total,
            'limit': self.limit,
            'offset': self.offset,
        }
