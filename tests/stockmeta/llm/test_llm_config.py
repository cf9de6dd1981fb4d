"""
Tests for stockmeta.llm.config

Precedence: environment > YAML llm section > defaults.
"""

import textwrap

from stockmeta.llm.config import LLMConfig


def test_defaults():
    config = LLMConfig.load_from_dict({})
    assert config.openai.default_model == "gpt-4o"
    assert config.openai.api_key == ""
    assert config.anthropic.default_model == "claude-3-5-sonnet-20241022"
    assert config.ollama.default_model == "llava"
    assert config.ollama.timeout == 180
    assert config.gemini.default_model == "gemini-2.5-flash"
    assert config.gemini.api_key == ""


def test_yaml_section(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(textwrap.dedent("""
        llm:
          openai:
            default_model: gpt-4o-mini
            detail: high
          ollama:
            base_url: http://gpu-box:11434
            max_tokens: 512
    """))

    config = LLMConfig.load_from_yaml(str(path))

    assert config.openai.default_model == "gpt-4o-mini"
    assert config.openai.detail == "high"
    assert config.ollama.base_url == "http://gpu-box:11434"
    assert config.ollama.max_tokens == 512


def test_environment_overrides_yaml(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("llm:\n  openai:\n    default_model: gpt-4o-mini\n")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4.1")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("OLLAMA_TEMPERATURE", "0.1")

    config = LLMConfig.load_from_yaml(str(path))

    assert config.openai.default_model == "gpt-4.1"
    assert config.openai.api_key == "sk-env"
    assert config.ollama.temperature == 0.1


def test_missing_file_uses_defaults(tmp_path):
    config = LLMConfig.load_from_yaml(str(tmp_path / "missing.yaml"))
    assert config.openai.default_model == "gpt-4o"


def test_empty_env_value_ignored(monkeypatch):
    monkeypatch.setenv("OPENAI_MODEL", "")
    assert LLMConfig._resolve_value("from-config", "OPENAI_MODEL", "default") == "from-config"


def test_gemini_key_sources(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "google-env")
    assert LLMConfig.load_from_dict({}).gemini.api_key == "google-env"
    assert LLMConfig.load_from_dict({"gemini": {"api_key": "from-yaml"}}).gemini.api_key == "from-yaml"

    monkeypatch.setenv("GEMINI_API_KEY", "gemini-env")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-pro")
    config = LLMConfig.load_from_dict({"gemini": {"api_key": "from-yaml"}})
    assert config.gemini.api_key == "gemini-env"
    assert config.gemini.default_model == "gemini-2.5-pro"
