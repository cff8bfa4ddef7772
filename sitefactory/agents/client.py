"""OpenAI SDK wrapper for the single JSON generation call"""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence

from openai import OpenAI

from sitefactory.core.config import settings
from sitefactory.models.errors import ApplicationError, ErrorCode, GenerationTransportError

logger = logging.getLogger(__name__)


class OpenAIClient:
    """
    Wrapper for the OpenAI chat completion API.

    One call per generation, JSON object mode, optional low-detail reference
    images. Never retries: a failed call surfaces as GenerationTransportError
    and the caller decides whether to try again.
    """

    def __init__(self, api_key: Optional[str] = None, client: Any = None, model: Optional[str] = None,
                 temperature: Optional[float] = None, timeout: Optional[float] = None):
        key = api_key if api_key is not None else settings.openai_api_key
        if client is None and not key:
            logger.warning("[OpenAI] OPENAI_API_KEY not set; generation calls will fail")
        self.model = model or settings.openai_model
        self.temperature = settings.openai_temperature if temperature is None else temperature
        self.timeout = timeout or settings.openai_timeout_seconds
        if client is None and key:
            client = OpenAI(api_key=key, max_retries=0, timeout=self.timeout)
        self.client = client

    @staticmethod
    def build_messages(system_prompt: str, prompt: str, image_urls: Sequence[str] = ()) -> List[Dict[str, Any]]:
        if not image_urls:
            user_content: Any = prompt
        else:
            user_content = [{"type": "text", "text": prompt}] + [
                {"type": "image_url", "image_url": {"url": url, "detail": "low"}} for url in image_urls
            ]
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_content},
        ]

    async def generate_json(self, system_prompt: str, prompt: str, image_urls: Sequence[str] = ()) -> str:
        """
        Run one generation and return the raw response text.

        Raises:
            ApplicationError: CONFIGURATION_ERROR if no API key is configured
            GenerationTransportError: on API failure, timeout, or empty content
        """
        if self.client is None:
            raise ApplicationError(
                code=ErrorCode.CONFIGURATION_ERROR,
                message="OpenAI API key not configured. Please set OPENAI_API_KEY in .env file."
            )

        kwargs = {
            "model": self.model,
            "messages": self.build_messages(system_prompt, prompt, image_urls),
            "temperature": self.temperature,
            "response_format": {"type": "json_object"},
        }

        logger.info(
            f"[OpenAI] Calling {self.model} | images={len(image_urls)} | "
            f"prompt_length={len(prompt)} | timeout={self.timeout}s"
        )
        try:
            response = await asyncio.wait_for(
                asyncio.to_thread(self.client.chat.completions.create, **kwargs),
                timeout=self.timeout
            )
        except asyncio.TimeoutError:
            logger.error(f"[OpenAI] Timed out after {self.timeout}s")
            raise GenerationTransportError(f"Generation timed out after {self.timeout}s")
        except Exception as e:
            logger.error(f"[OpenAI] API call failed: {e}")
            raise GenerationTransportError(f"OpenAI API call failed: {e}")

        content = response.choices[0].message.content if response.choices else None
        if not isinstance(content, str) or not content.strip():
            logger.error("[OpenAI] Empty response content")
            raise GenerationTransportError("OpenAI returned an empty response")

        usage = getattr(response, "usage", None)
        total_tokens = getattr(usage, "total_tokens", "n/a")
        logger.info(f"[OpenAI] Response received ({total_tokens} tokens, {len(content)} chars)")
        return content


# Global client instance
openai_client = OpenAIClient()
