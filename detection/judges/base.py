"""HTTP plumbing shared by the provider adapters."""

import asyncio
from typing import Any, Dict

import aiohttp

from common.errors import ModelFailure
from common.logging.logger import get_logger
from detection.judgment import ProviderConfig
from detection.judges.parsing import parse_score
from detection.protocols import ModelJudge
from detection.types import ModelScore

logger = get_logger("judges")

_RETRY_STATUSES = (429, 503)


class HttpModelJudge(ModelJudge):
    """
    ModelJudge that POSTs one JSON request per score() call.

    Subclasses provide the endpoint, headers, request body and the path to
    the reply text; transport errors, non-2xx statuses and unparseable
    bodies all surface as ModelFailure.
    """

    endpoint: str = ""
    max_retries: int = 2

    def __init__(self, settings: ProviderConfig):
        self.settings = settings

    @property
    def provider(self) -> str:
        return self.settings.provider

    @property
    def model(self) -> str:
        return self.settings.model

    def build_headers(self) -> Dict[str, str]:
        raise NotImplementedError

    def build_payload(self, text: str) -> Dict[str, Any]:
        raise NotImplementedError

    def extract_content(self, body: Dict[str, Any]) -> str:
        raise NotImplementedError

    async def score(self, text: str) -> ModelScore:
        body = await self._post_json(self.build_payload(text))
        try:
            content = self.extract_content(body)
        except (KeyError, IndexError, TypeError) as e:
            raise ModelFailure(self.provider, f"Unexpected response shape: {e}")
        return parse_score(content, self.provider)

    async def _post_json(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        client_timeout = aiohttp.ClientTimeout(total=self.settings.timeout_seconds)
        headers = {'content-type': 'application/json', **self.build_headers()}

        async with aiohttp.ClientSession(timeout=client_timeout, headers=headers) as session:
            for attempt in range(self.max_retries):
                try:
                    async with session.post(self.endpoint, json=payload) as response:
                        if response.status in _RETRY_STATUSES and attempt < self.max_retries - 1:
                            logger.info(f"{self.provider} returned {response.status}, retrying")
                            await asyncio.sleep(0.5 * (2 ** attempt))
                            continue
                        if response.status >= 400:
                            detail = (await response.text(errors='replace'))[:500]
                            raise ModelFailure(self.provider, f"HTTP {response.status}: {detail}")
                        return await response.json(content_type=None)
                except aiohttp.ClientError as e:
                    raise ModelFailure(self.provider, f"Request failed: {e}")
                except ValueError as e:
                    raise ModelFailure(self.provider, f"Bad response body: {e}")

        raise ModelFailure(self.provider, "Retries exhausted")
