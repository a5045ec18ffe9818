# smartnotes/functions/llm.py
import logging
import os
from typing import Any

import httpx

from smartnotes.shared.config import settings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an intelligent note summarization assistant for SmartNotePro. "
    "Create concise, meaningful summaries that capture the key points and insights. "
    "Keep summaries under 200 words and focus on actionable takeaways."
)

class UpstreamError(RuntimeError):
    """The completion API answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"upstream returned {status_code}")
        self.status_code = status_code
        self.body = body

def build_messages(title: str | None, content: str) -> list[dict]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {
            "role": "user",
            "content": f"Please summarize this note:\n\nTitle: {title or 'Untitled'}\n\nContent: {content}",
        },
    ]

def first_choice_text(data: Any) -> str | None:
    """Pull choices[0].message.content out of a chat-completion body."""
    try:
        text = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    return text or None

class CompletionClient:
    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self.transport = transport

    def _headers(self) -> dict:
        # key is read per call; a missing key surfaces as an upstream 401
        api_key = os.getenv(settings.LLM_API_KEY_ENV, "")
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": settings.LLM_REFERER,
        }

    async def summarize(self, title: str | None, content: str) -> str | None:
        payload = {
            "model": settings.LLM_MODEL,
            "messages": build_messages(title, content),
            "temperature": settings.LLM_TEMPERATURE,
            "max_tokens": settings.LLM_MAX_TOKENS,
        }
        async with httpx.AsyncClient(transport=self.transport, timeout=settings.LLM_TIMEOUT_S) as client:
            resp = await client.post(settings.LLM_API_URL, headers=self._headers(), json=payload)
        if resp.is_error:
            raise UpstreamError(resp.status_code, resp.text)
        return first_choice_text(resp.json())

# FastAPI dep (overridden in tests)
def get_completion_client() -> CompletionClient:
    return CompletionClient()
