"""Settings built from an environment mapping."""

from resume_matcher.config import (
    DEFAULT_EMBED_BATCH,
    DEFAULT_EMBED_MODEL,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    Settings,
)


def test_defaults():
    s = Settings.from_env({})
    assert s == Settings()
    assert s.model == DEFAULT_MODEL
    assert s.embed_model == DEFAULT_EMBED_MODEL
    assert s.explain_top_n == 20
    assert s.embed_batch_size == 96
    assert s.embed_chunk_words == 2000
    assert s.explain_max_chars == 12000
    assert s.temperature == 0.2
    assert s.require_ai is False
    assert s.skill_match_mode == "substring"
    assert not s.ai_available


def test_values_read():
    s = Settings.from_env({
        "GROQ_API_KEY": " gsk_test ",
        "GROQ_BASE_URL": "https://proxy.local/",
        "GROQ_MODEL": "llama-3.3-70b-versatile",
        "GROQ_EMBED_MODEL": "custom-embed",
        "RESUME_MATCHER_EXPLAIN_TOPN": "5",
        "RESUME_MATCHER_EMBED_BATCH": "8",
        "RESUME_MATCHER_EMBED_CHUNK_WORDS": "800",
        "RESUME_MATCHER_EXPLAIN_MAX_CHARS": "4000",
        "RESUME_MATCHER_LLM_TEMPERATURE": "0.7",
        "RESUME_MATCHER_REQUIRE_AI": "Yes",
        "RESUME_MATCHER_SKILL_MATCH": "WORD",
    })
    assert s.api_key == "gsk_test"
    assert s.ai_available
    assert s.base_url == "https://proxy.local"
    assert s.model == "llama-3.3-70b-versatile"
    assert s.embed_model == "custom-embed"
    assert (s.explain_top_n, s.embed_batch_size, s.embed_chunk_words, s.explain_max_chars) == (5, 8, 800, 4000)
    assert s.temperature == 0.7
    assert s.require_ai is True
    assert s.skill_match_mode == "word"


def test_floors_and_clamps():
    s = Settings.from_env({
        "RESUME_MATCHER_EMBED_CHUNK_WORDS": "100",
        "RESUME_MATCHER_EXPLAIN_MAX_CHARS": "50",
        "RESUME_MATCHER_LLM_TEMPERATURE": "3",
    })
    assert s.embed_chunk_words == 500
    assert s.explain_max_chars == 2000
    assert s.temperature == 1.0
    assert Settings.from_env({"RESUME_MATCHER_LLM_TEMPERATURE": "-1"}).temperature == 0.0


def test_invalid_values_fall_back():
    s = Settings.from_env({
        "RESUME_MATCHER_EXPLAIN_TOPN": "many",
        "RESUME_MATCHER_EMBED_BATCH": "0",
        "RESUME_MATCHER_LLM_TEMPERATURE": "warm",
        "RESUME_MATCHER_REQUIRE_AI": "maybe",
        "RESUME_MATCHER_SKILL_MATCH": "fuzzy",
    })
    assert s.explain_top_n == 20
    assert s.embed_batch_size == DEFAULT_EMBED_BATCH
    assert s.temperature == DEFAULT_TEMPERATURE
    assert s.require_ai is False
    assert s.skill_match_mode == "substring"


def test_bool_false_words():
    for word in ("0", "false", "No", "n", "OFF"):
        assert Settings.from_env({"RESUME_MATCHER_REQUIRE_AI": word}).require_ai is False


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk_env")
    monkeypatch.setenv("RESUME_MATCHER_EXPLAIN_TOPN", "3")
    s = Settings.from_env()
    assert s.api_key == "gsk_env"
    assert s.explain_top_n == 3
