"""Groq-backed structured completions and embeddings."""

import json
import logging

import groq
import jsonschema
from groq import Groq

from ranking.validation import ResponseSchema
from resume_matcher.config import REQUEST_TIMEOUT_SECONDS, Settings
from resume_matcher.errors import MissingAPIKeyError, UpstreamAPIError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.groq.com"
EMPTY_INPUT = "empty"


def _upstream_error(e: groq.APIError) -> UpstreamAPIError:
    """Surface the upstream message and type when the error body carries them."""
    if isinstance(e, groq.APIStatusError):
        body = e.body
        detail = body.get("error", body) if isinstance(body, dict) else None
        if isinstance(detail, dict) and detail.get("message"):
            return UpstreamAPIError(f"{detail['message']} ({detail.get('type') or ''})")
        return UpstreamAPIError(f"http {e.status_code}: {e.response.text.strip()}")
    return UpstreamAPIError(str(e) or e.__class__.__name__)


class GroqLLMClient:
    """
    One client per run. Calls block for at most REQUEST_TIMEOUT_SECONDS and are
    never retried; every failure surfaces as UpstreamAPIError.
    """

    def __init__(self, settings: Settings, client: Groq | None = None):
        if not settings.api_key:
            raise MissingAPIKeyError()
        self.settings = settings
        self.client = client or Groq(
            api_key=settings.api_key,
            base_url=settings.base_url or DEFAULT_BASE_URL,
            timeout=REQUEST_TIMEOUT_SECONDS,
            max_retries=0,
        )

    def complete_json(self, schema: ResponseSchema, system: str, user: str) -> dict:
        """Schema-constrained completion; returns the parsed, validated JSON object."""
        try:
            response = self.client.chat.completions.create(
                model=self.settings.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                response_format=schema.response_format(),
                temperature=self.settings.temperature,
            )
        except groq.APIError as e:
            raise _upstream_error(e) from e

        if not response.choices:
            raise UpstreamAPIError("empty response")
        message = response.choices[0].message
        refusal = (getattr(message, "refusal", None) or "").strip()
        if refusal:
            raise UpstreamAPIError(f"refusal: {refusal}")
        content = (message.content or "").strip()
        if not content:
            raise UpstreamAPIError("empty content")

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise UpstreamAPIError(f"invalid json: {e}") from e
        try:
            schema.validate(data)
        except jsonschema.ValidationError as e:
            raise UpstreamAPIError(f"{schema.name} response failed schema: {e.message}") from e
        logger.debug("%s completion ok (%d chars)", schema.name, len(content))
        return data

    def embed_texts(self, texts: list[str]) -> list[list[float] | None]:
        """
        One vector per input, in input order. Batches are sent sequentially;
        a slot the server leaves out stays None.
        """
        cleaned = [t.strip() or EMPTY_INPUT for t in texts]
        out: list[list[float] | None] = [None] * len(cleaned)
        size = self.settings.embed_batch_size
        for start in range(0, len(cleaned), size):
            batch = cleaned[start:start + size]
            try:
                response = self.client.embeddings.create(model=self.settings.embed_model, input=batch)
            except groq.APIError as e:
                raise _upstream_error(e) from e
            for item in response.data:
                idx = start + item.index
                if 0 <= idx < len(out):
                    out[idx] = list(item.embedding)
        return out
