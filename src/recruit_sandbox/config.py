"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from recruit_sandbox.errors import ConfigurationError

# Language codes the prompt builder and label tables know how to localize.
SUPPORTED_LANGUAGES: dict[str, str] = {
    "he": "Hebrew",
    "en": "English",
}


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-sonnet-4-5-20250929"
    thinking_budget: int = 16000
    max_tokens: int = 32000
    max_retries: int = 3
    timeout: int = 600

    def __post_init__(self) -> None:
        if self.timeout < 1:
            raise ConfigurationError(f"llm.timeout must be >= 1, got {self.timeout}")
        if not 1 <= self.max_retries <= 10:
            raise ConfigurationError(
                f"llm.max_retries must be between 1 and 10, got {self.max_retries}"
            )
        if self.thinking_budget < 0:
            raise ConfigurationError(
                f"llm.thinking_budget must be >= 0, got {self.thinking_budget}"
            )
        if self.thinking_budget and self.thinking_budget >= self.max_tokens:
            raise ConfigurationError(
                "llm.thinking_budget must be smaller than llm.max_tokens "
                f"({self.thinking_budget} >= {self.max_tokens})"
            )


@dataclass(frozen=True)
class SpeechConfig:
    model: str = "gpt-4o-mini-tts"
    voice: str = "coral"
    response_format: str = "wav"
    timeout: int = 60


@dataclass(frozen=True)
class ContentConfig:
    language: str = "he"
    enforce_contracts: bool = True

    def __post_init__(self) -> None:
        if self.language not in SUPPORTED_LANGUAGES:
            raise ConfigurationError(
                f"content.language must be one of {sorted(SUPPORTED_LANGUAGES)}, "
                f"got {self.language!r}"
            )

    @property
    def language_name(self) -> str:
        return SUPPORTED_LANGUAGES[self.language]


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    speech: SpeechConfig = field(default_factory=SpeechConfig)
    content: ContentConfig = field(default_factory=ContentConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    try:
        return AppConfig(
            llm=LLMConfig(**raw.get("llm", {})),
            speech=SpeechConfig(**raw.get("speech", {})),
            content=ContentConfig(**raw.get("content", {})),
        )
    except TypeError as e:
        raise ConfigurationError(f"Unknown config key: {e}") from e
