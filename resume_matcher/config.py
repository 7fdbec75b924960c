"""
Run configuration. Built once from the environment and passed to every component.
Adjust defaults here.
"""

import os
from dataclasses import dataclass
from typing import Mapping

from ranking.pipeline.skills import MATCH_MODES, SUBSTRING

DEFAULT_MODEL = "openai/gpt-oss-120b"
DEFAULT_EMBED_MODEL = "nomic-embed-text-v1_5"
DEFAULT_EXPLAIN_TOPN = 20
DEFAULT_EMBED_BATCH = 96
DEFAULT_EMBED_CHUNK_WORDS = 2000
DEFAULT_EXPLAIN_MAX_CHARS = 12000
DEFAULT_TEMPERATURE = 0.2

MIN_EMBED_BATCH = 1
MIN_EMBED_CHUNK_WORDS = 500
MIN_EXPLAIN_MAX_CHARS = 2000

REQUEST_TIMEOUT_SECONDS = 90.0

_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


def _get(env: Mapping[str, str], key: str) -> str:
    return (env.get(key) or "").strip()


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    """Positive int, else default."""
    raw = _get(env, key)
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = _get(env, key)
    try:
        return float(raw)
    except ValueError:
        return default


def _env_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = _get(env, key).lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    return default


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    base_url: str = ""
    model: str = DEFAULT_MODEL
    embed_model: str = DEFAULT_EMBED_MODEL
    explain_top_n: int = DEFAULT_EXPLAIN_TOPN
    embed_batch_size: int = DEFAULT_EMBED_BATCH
    embed_chunk_words: int = DEFAULT_EMBED_CHUNK_WORDS
    explain_max_chars: int = DEFAULT_EXPLAIN_MAX_CHARS
    temperature: float = DEFAULT_TEMPERATURE
    require_ai: bool = False
    skill_match_mode: str = SUBSTRING

    @property
    def ai_available(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Read settings; unparseable values fall back to defaults, floors and clamps applied."""
        env = os.environ if environ is None else environ
        mode = _get(env, "RESUME_MATCHER_SKILL_MATCH").lower()
        return cls(
            api_key=_get(env, "GROQ_API_KEY"),
            base_url=_get(env, "GROQ_BASE_URL").rstrip("/"),
            model=_get(env, "GROQ_MODEL") or DEFAULT_MODEL,
            embed_model=_get(env, "GROQ_EMBED_MODEL") or DEFAULT_EMBED_MODEL,
            explain_top_n=_env_int(env, "RESUME_MATCHER_EXPLAIN_TOPN", DEFAULT_EXPLAIN_TOPN),
            embed_batch_size=max(
                MIN_EMBED_BATCH, _env_int(env, "RESUME_MATCHER_EMBED_BATCH", DEFAULT_EMBED_BATCH)
            ),
            embed_chunk_words=max(
                MIN_EMBED_CHUNK_WORDS,
                _env_int(env, "RESUME_MATCHER_EMBED_CHUNK_WORDS", DEFAULT_EMBED_CHUNK_WORDS),
            ),
            explain_max_chars=max(
                MIN_EXPLAIN_MAX_CHARS,
                _env_int(env, "RESUME_MATCHER_EXPLAIN_MAX_CHARS", DEFAULT_EXPLAIN_MAX_CHARS),
            ),
            temperature=min(1.0, max(0.0, _env_float(env, "RESUME_MATCHER_LLM_TEMPERATURE", DEFAULT_TEMPERATURE))),
            require_ai=_env_bool(env, "RESUME_MATCHER_REQUIRE_AI", False),
            skill_match_mode=mode if mode in MATCH_MODES else SUBSTRING,
        )
