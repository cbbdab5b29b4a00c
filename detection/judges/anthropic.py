"""Anthropic Messages API adapter."""

from typing import Any, Dict

from detection.judges.base import HttpModelJudge
from detection.judges.parsing import SYSTEM_PROMPT, USER_TEMPLATE

ANTHROPIC_VERSION = "2023-06-01"
# OAuth setup tokens authenticate with Bearer instead of x-api-key
OAUTH_TOKEN_PREFIX = "sk-ant-oat01-"
OAUTH_BETA = "oauth-2025-04-20"


class AnthropicJudge(HttpModelJudge):

    endpoint = "https://api.anthropic.com/v1/messages"

    def build_headers(self) -> Dict[str, str]:
        key = self.settings.api_key or ""
        headers = {"anthropic-version": ANTHROPIC_VERSION}
        if key.startswith(OAUTH_TOKEN_PREFIX):
            headers["Authorization"] = f"Bearer {key}"
            headers["anthropic-beta"] = OAUTH_BETA
        else:
            headers["x-api-key"] = key
        return headers

    def build_payload(self, text: str) -> Dict[str, Any]:
        return {
            "model": self.settings.model,
            "system": SYSTEM_PROMPT,
            "messages": [{"role": "user", "content": USER_TEMPLATE.format(text=text)}],
            "temperature": self.settings.temperature,
            "max_tokens": self.settings.max_tokens,
        }

    def extract_content(self, body: Dict[str, Any]) -> str:
        return body["content"][0]["text"]
