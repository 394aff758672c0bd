"""Tests for config loading and validation."""

import pytest

from recruit_sandbox.config import AppConfig, ContentConfig, LLMConfig, load_config
from recruit_sandbox.errors import ConfigurationError


class TestConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.llm.model == "claude-sonnet-4-5-20250929"
        assert config.llm.thinking_budget == 16000
        assert config.content.language == "he"
        assert config.content.language_name == "Hebrew"
        assert config.content.enforce_contracts is True

    def test_load_config_defaults(self, tmp_path):
        """Loading from non-existent path returns defaults."""
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.llm.timeout == 600
        assert config.speech.voice == "coral"

    def test_load_config_from_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text(
            "llm:\n  model: test-model\n  thinking_budget: 0\ncontent:\n  language: en\n"
        )
        config = load_config(yaml_path)
        assert config.llm.model == "test-model"
        assert config.llm.thinking_budget == 0
        assert config.content.language_name == "English"
        # Defaults for unspecified
        assert config.llm.max_retries == 3

    def test_frozen_config(self):
        config = LLMConfig()
        with pytest.raises(AttributeError):
            config.model = "changed"


class TestConfigValidation:
    def test_invalid_timeout(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  timeout: 0\n")
        with pytest.raises(ConfigurationError, match="timeout"):
            load_config(yaml)

    def test_invalid_max_retries(self):
        with pytest.raises(ConfigurationError, match="max_retries"):
            LLMConfig(max_retries=0)

    def test_thinking_budget_must_fit_max_tokens(self):
        with pytest.raises(ConfigurationError, match="thinking_budget"):
            LLMConfig(thinking_budget=40000, max_tokens=32000)

    def test_unknown_language(self):
        with pytest.raises(ConfigurationError, match="language"):
            ContentConfig(language="fr")

    def test_unknown_key(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  temperature: 0.3\n")
        with pytest.raises(ConfigurationError, match="Unknown config key"):
            load_config(yaml)
