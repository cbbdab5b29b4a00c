"""
Model Judgment Port.

ProviderConfig is resolved once at process start and handed to everything
that needs to know which provider is active (the port, fusion, health), so
what health reports and how fusion behaves cannot drift apart.

ModelJudgmentPort.judge() never raises for provider trouble:
- no judge configured  -> Judgment.unavailable() (steady state, DEBUG log)
- ModelFailure/timeout -> Judgment.failed(reason) (logged as a failure)
- any other judge error -> Judgment.failed(reason) (logged with traceback)
"""

import asyncio
from dataclasses import dataclass, field
from typing import Optional

from common.config import config as _default_config
from common.errors import ConfigError, ModelFailure
from common.logging.logger import get_logger
from detection.protocols import ModelJudge
from detection.types import Judgment

logger = get_logger("judgment")

PROVIDER_NONE = "none"
PROVIDER_ANTHROPIC = "anthropic"
PROVIDER_OPENROUTER = "openrouter"
KNOWN_PROVIDERS = (PROVIDER_ANTHROPIC, PROVIDER_OPENROUTER, PROVIDER_NONE)


@dataclass(frozen=True)
class ProviderConfig:
    """Immutable description of the configured model provider."""
    provider: str = PROVIDER_NONE
    model: Optional[str] = None
    api_key: Optional[str] = field(default=None, repr=False)
    timeout_seconds: float = 20.0
    max_tokens: int = 100
    temperature: float = 0.1
    # Fused confidence = min(1, model_confidence * scale + offset)
    confidence_scale: float = 0.7
    confidence_offset: float = 0.3

    @property
    def configured(self) -> bool:
        return self.provider != PROVIDER_NONE

    @classmethod
    def from_config(cls, cfg=None) -> "ProviderConfig":
        """
        Resolve the provider from config.json / environment.

        llm.provider = anthropic | openrouter forces that provider (a missing
        key is a ConfigError); none disables the model; auto (default) picks
        anthropic if its key is set, else openrouter, else none.
        """
        cfg = cfg or _default_config
        choice = str(cfg.get("llm.provider") or "auto").lower()
        if choice == "claude":
            choice = PROVIDER_ANTHROPIC

        anthropic_key = cfg.get("llm.anthropic_api_key")
        openrouter_key = cfg.get("llm.openrouter_api_key")

        if choice == "auto":
            if anthropic_key:
                choice = PROVIDER_ANTHROPIC
            elif openrouter_key:
                choice = PROVIDER_OPENROUTER
            else:
                logger.info(
                    "No LLM provider configured, running in heuristics-only mode. "
                    "Set ANTHROPIC_API_KEY or OPENROUTER_API_KEY to enable model judgment."
                )
                choice = PROVIDER_NONE

        if choice not in KNOWN_PROVIDERS:
            raise ConfigError("llm.provider", f"unknown provider {choice!r}")

        common = dict(
            timeout_seconds=float(cfg.get("llm.timeout_seconds")),
            max_tokens=int(cfg.get("llm.max_tokens")),
            temperature=float(cfg.get("llm.temperature")),
        )

        if choice == PROVIDER_ANTHROPIC:
            anthropic_key = cfg.require("llm.anthropic_api_key")
            resolved = cls(PROVIDER_ANTHROPIC, cfg.get("llm.anthropic_model"), anthropic_key, **common)
        elif choice == PROVIDER_OPENROUTER:
            openrouter_key = cfg.require("llm.openrouter_api_key")
            resolved = cls(PROVIDER_OPENROUTER, cfg.get("llm.openrouter_model"), openrouter_key, **common)
        else:
            resolved = cls(PROVIDER_NONE, None, None, **common)

        logger.info(f"LLM provider: {resolved.provider} (model={resolved.model})")
        return resolved


class ModelJudgmentPort:
    """Wraps zero or one ModelJudge with a timeout and fail-open semantics."""

    def __init__(self, judge: Optional[ModelJudge] = None, timeout_seconds: float = 20.0):
        self.judge_impl = judge
        self.timeout_seconds = timeout_seconds

    @property
    def available(self) -> bool:
        return self.judge_impl is not None

    async def judge(self, text: str) -> Judgment:
        if self.judge_impl is None:
            logger.debug("No model provider configured, skipping model judgment")
            return Judgment.unavailable()

        provider = self.judge_impl.provider
        try:
            score = await asyncio.wait_for(self.judge_impl.score(text), self.timeout_seconds)
        except asyncio.TimeoutError:
            reason = f"{provider} timed out after {self.timeout_seconds:.1f}s"
            logger.warning(f"Model judgment failed: {reason}")
            return Judgment.failed(reason)
        except ModelFailure as e:
            logger.error(f"Model judgment failed: {e}")
            return Judgment.failed(str(e))
        except Exception as e:
            logger.exception(f"Model judgment failed unexpectedly: {provider}: {e}")
            return Judgment.failed(f"{provider}: {e}")

        return Judgment.scored(score)
