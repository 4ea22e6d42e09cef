# pdfchat/core/services/answer_service.py
import json
import logging
from typing import Dict, List, Optional
from groq import Groq, GroqError, APIStatusError, APITimeoutError

from pdfchat.core.errors import ProviderError

logger = logging.getLogger(__name__)


class GroqAnswerProvider:
    """Sends the system prompt plus the conversation to the Groq chat completions API."""

    def __init__(self, api_key: str, model: str, max_tokens: int = 1000, timeout: float = 60.0):
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.timeout = timeout
        # Built on first use so the app starts without GROQ_API_KEY.
        self._client: Optional[Groq] = None

    def _ensure_client(self) -> Groq:
        if self._client is None:
            if not self.api_key:
                raise ProviderError("Failed to get response from the language model API: GROQ_API_KEY is not set")
            self._client = Groq(api_key=self.api_key, timeout=self.timeout, max_retries=0)
        return self._client

    def complete(self, system_prompt: str, transcript: List[Dict[str, str]]) -> str:
        client = self._ensure_client()
        messages = [{"role": "system", "content": system_prompt}, *transcript]
        try:
            chat_completion = client.chat.completions.create(
                messages=messages,
                model=self.model,
                max_tokens=self.max_tokens,
            )
        except APIStatusError as e:
            body = _body_text(e.body)
            logger.error("Language model API returned %s: %s", e.status_code, body)
            raise ProviderError(
                f"Failed to get response from the language model API: {body or e.message}",
                status_code=e.status_code,
                body=body,
            ) from e
        except APITimeoutError as e:
            logger.error("Language model API timed out after %.1fs", self.timeout)
            raise ProviderError("Failed to get response from the language model API: request timed out") from e
        except GroqError as e:
            logger.error("Error calling language model API: %s", e)
            raise ProviderError(f"Failed to get response from the language model API: {e}") from e

        choices = chat_completion.choices or []
        answer = choices[0].message.content if choices else None
        if not answer:
            raise ProviderError("Failed to get response from the language model API: empty completion")
        return answer


def _body_text(body) -> Optional[str]:
    if body is None:
        return None
    if isinstance(body, str):
        return body
    return json.dumps(body)
