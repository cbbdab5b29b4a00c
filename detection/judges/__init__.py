"""Model provider adapters behind the ModelJudge protocol."""

from typing import Optional

from detection.judges.anthropic import AnthropicJudge
from detection.judges.base import HttpModelJudge
from detection.judges.openrouter import OpenRouterJudge
from detection.judges.parsing import SYSTEM_PROMPT, parse_score
from detection.judgment import PROVIDER_ANTHROPIC, PROVIDER_OPENROUTER, ProviderConfig
from detection.protocols import ModelJudge

JUDGES = {
    PROVIDER_ANTHROPIC: AnthropicJudge,
    PROVIDER_OPENROUTER: OpenRouterJudge,
}


def build_judge(settings: ProviderConfig) -> Optional[ModelJudge]:
    """The judge for *settings*, or None when no provider is configured."""
    if not settings.configured:
        return None
    return JUDGES[settings.provider](settings)


__all__ = [
    "AnthropicJudge",
    "HttpModelJudge",
    "OpenRouterJudge",
    "SYSTEM_PROMPT",
    "parse_score",
    "build_judge",
    "JUDGES",
]
