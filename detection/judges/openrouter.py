"""OpenRouter (OpenAI-compatible chat completions) adapter."""

from typing import Any, Dict

from detection.judges.base import HttpModelJudge
from detection.judges.parsing import SYSTEM_PROMPT, USER_TEMPLATE


class OpenRouterJudge(HttpModelJudge):

    endpoint = "https://openrouter.ai/api/v1/chat/completions"

    def build_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.settings.api_key or ''}",
            "HTTP-Referer": "https://aidetector.local",
            "X-Title": "AI Content Detector",
        }

    def build_payload(self, text: str) -> Dict[str, Any]:
        return {
            "model": self.settings.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": USER_TEMPLATE.format(text=text)},
            ],
            "temperature": self.settings.temperature,
            "max_tokens": self.settings.max_tokens,
        }

    def extract_content(self, body: Dict[str, Any]) -> str:
        return body["choices"][0]["message"]["content"]
