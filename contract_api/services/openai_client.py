"""
OpenAI chat-completions client used to generate contract code.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from ..core.errors import UpstreamError

logger = logging.getLogger(__name__)


class OpenAIChatClient:
    def __init__(
        self,
        api_key: str,
        url: str = "https://api.openai.com/v1/chat/completions",
        model: str = "gpt-4-0314",
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.model = model
        self.timeout = timeout
        self.transport = transport
        self.headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def _build_body(self, prompt: str) -> Dict[str, Any]:
        return {
            "messages": [{"role": "user", "content": prompt}],
            "model": self.model,
        }

    async def complete(self, prompt: str) -> str:
        """
        Send a single user message and return the content of the first choice.

        One round trip, no retries. Cancelling the awaiting task aborts the
        request and closes the connection.

        Raises:
            UpstreamError: on a non-200 status, a transport failure or timeout,
                or a reply without choices[0].message.content.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    self.url, headers=self.headers, json=self._build_body(prompt)
                )
        except httpx.TimeoutException as e:
            logger.warning(f"OpenAI API request timed out after {self.timeout}s")
            raise UpstreamError("OpenAI API request timed out") from e
        except httpx.RequestError as e:
            logger.warning(f"OpenAI API request failed: {e}")
            raise UpstreamError(f"OpenAI API request failed: {e}") from e

        if response.status_code != 200:
            logger.warning(
                f"OpenAI API Error: status {response.status_code}: {response.text}"
            )
            raise UpstreamError(
                f"OpenAI API returned status {response.status_code}",
                status_code=response.status_code,
                detail=response.text,
            )

        try:
            return response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.warning(f"OpenAI API returned an unexpected payload: {response.text}")
            raise UpstreamError(
                "OpenAI API returned an unexpected payload",
                status_code=response.status_code,
                detail=response.text,
            ) from e
