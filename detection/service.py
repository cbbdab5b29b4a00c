"""
DetectorService: the analyze / history / authors / health operations.

analyze():
    validate -> normalize -> hash -> cache.get_or_compute(
        gather(heuristics in a worker thread, model judgment) -> fuse -> record)

The same ProviderConfig instance drives the judgment port, fusion and
health(), so what health reports is what fusion does.
"""

import asyncio
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from common.config import config as _default_config
from common.errors import ValidationError
from common.logging.logger import get_logger
from common.models import AnalysisRecord, AnalysisResult, AnalyzeRequest, HistoryPage, Platform
from common.repositories import AnalysisRepository
from common.text_utils import content_hash, normalize_text
from detection.cache import AnalysisCache
from detection.engine import HeuristicEngine
from detection.fusion import fuse
from detection.judges import build_judge
from detection.judgment import ModelJudgmentPort, ProviderConfig
from detection.types import JudgmentStatus

logger = get_logger("detector")

VERSION = "0.1.0"

_PLATFORMS = {p.value for p in Platform}


class DetectorService:
    """
    Args:
        repository: AnalysisRepository (defaults to the module-level database).
        engine: HeuristicEngine (defaults to the builtin signal set).
        port: ModelJudgmentPort. Defaults to one built from *provider*.
        provider: ProviderConfig. Defaults to heuristics-only.
        max_content_length: Longest accepted content, in characters.
        default_limit, max_limit: History page size when omitted, and its cap.
        preview_chars: Length of content_preview in history items.
    """

    def __init__(
        self,
        repository: Optional[AnalysisRepository] = None,
        engine: Optional[HeuristicEngine] = None,
        port: Optional[ModelJudgmentPort] = None,
        provider: Optional[ProviderConfig] = None,
        max_content_length: Optional[int] = None,
        default_limit: int = 20,
        max_limit: int = 100,
        preview_chars: int = 150,
    ):
        self.repository = repository or AnalysisRepository()
        self.engine = engine or HeuristicEngine()
        self.provider = provider or ProviderConfig()
        self.port = port or ModelJudgmentPort(
            build_judge(self.provider), timeout_seconds=self.provider.timeout_seconds
        )
        if max_content_length is None:
            max_content_length = int(_default_config.get("detector.max_content_length"))
        self.max_content_length = max_content_length
        self.default_limit = default_limit
        self.max_limit = max_limit
        self.preview_chars = preview_chars
        self.cache = AnalysisCache(self.repository)

    @classmethod
    def from_config(cls, cfg=None) -> "DetectorService":
        """Build the service from config.json / environment."""
        cfg = cfg or _default_config
        cfg.validate()
        return cls(
            provider=ProviderConfig.from_config(cfg),
            max_content_length=int(cfg.get("detector.max_content_length")),
            default_limit=int(cfg.get("history.default_limit")),
            max_limit=int(cfg.get("history.max_limit")),
            preview_chars=int(cfg.get("detector.preview_chars")),
        )

    # ---- analyze ----

    async def analyze(self, request: AnalyzeRequest) -> AnalysisResult:
        record, _ = await self.analyze_record(request)
        return record.result

    async def analyze_record(self, request: AnalyzeRequest) -> Tuple[AnalysisRecord, bool]:
        """
        Analyze *request*, returning the stored record and whether it was cached.

        Raises:
            ValidationError: empty, oversized or unknown-platform request.
            StoreError: the store could not be read or written.
        """
        normalized = self._validate(request)
        key = content_hash(normalized)

        async def compute() -> AnalysisRecord:
            result = await self._compute(normalized)
            return AnalysisRecord(
                id=uuid.uuid4().hex,
                content_hash=key,
                content=request.content,
                platform=request.platform,
                post_id=request.post_id,
                author=request.author or None,
                result=result,
                created_at=datetime.now(timezone.utc).isoformat(timespec='microseconds'),
            )

        record, cached = await self.cache.get_or_compute(key, compute)
        logger.info(
            f"Analyzed {key[:12]}: score={record.result.score} "
            f"label={record.result.display_label} cached={cached}"
        )
        return record, cached

    async def _compute(self, normalized: str) -> AnalysisResult:
        heuristic, judgment = await asyncio.gather(
            asyncio.to_thread(self.engine.analyze, normalized),
            self.port.judge(normalized),
        )
        model_score = judgment.score if judgment.status is JudgmentStatus.SCORED else None
        return fuse(heuristic, model_score, self.provider)

    def _validate(self, request: AnalyzeRequest) -> str:
        if request.content is None or not request.content.strip():
            raise ValidationError("content", "must not be empty")
        if len(request.content) > self.max_content_length:
            raise ValidationError(
                "content",
                f"exceeds {self.max_content_length} characters ({len(request.content)})",
            )
        if request.platform not in _PLATFORMS:
            raise ValidationError(
                "platform", f"must be one of {', '.join(sorted(_PLATFORMS))}"
            )
        normalized = normalize_text(request.content)
        # Zero-width-only input normalizes to nothing
        if not normalized:
            raise ValidationError("content", "must not be empty")
        return normalized

    # ---- reads ----

    def history(
        self,
        limit: Optional[int] = None,
        offset: int = 0,
        author: Optional[str] = None,
    ) -> HistoryPage:
        """Most recent first. limit is clamped to 1..max_limit."""
        if limit is None:
            limit = self.default_limit
        limit = max(1, min(int(limit), self.max_limit))
        if offset is None:
            offset = 0
        if offset < 0:
            raise ValidationError("offset", "must be >= 0")

        items = self.repository.get_history(limit=limit, offset=offset, author=author)
        total = self.repository.get_count(author=author)
        return HistoryPage(
            items=items, total=total, limit=limit, offset=offset, preview_chars=self.preview_chars
        )

    def authors(self) -> List[str]:
        return self.repository.get_authors()

    def health(self) -> Dict[str, Any]:
        return {
            'status': 'ok',
            'version': VERSION,
            'provider': self.provider.provider,
            'model': self.provider.model,
        }
