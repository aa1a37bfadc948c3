"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from cover_letter_kit.models.tone import Tone


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-sonnet-4-5-20250929"
    max_tokens: int = 4096
    timeout: int = 60

    def __post_init__(self) -> None:
        _check_range("timeout", self.timeout, 1, 600)
        _check_range("max_tokens", self.max_tokens, 1, 64000)


@dataclass(frozen=True)
class ScrapeConfig:
    timeout: float = 8.0
    user_agent: str = "Mozilla/5.0 (compatible; CoverLetterBot/1.0)"
    max_chars: int = 10_000

    def __post_init__(self) -> None:
        if not 0 < self.timeout <= 60:
            raise ValueError(f"scrape timeout must be in (0, 60], got {self.timeout}")
        if self.max_chars < 1:
            raise ValueError(f"max_chars must be positive, got {self.max_chars}")


@dataclass(frozen=True)
class PromptConfig:
    max_input_chars: int = 8_000
    default_tone: str = "professional"

    def __post_init__(self) -> None:
        if self.max_input_chars < 100:
            raise ValueError(f"max_input_chars must be at least 100, got {self.max_input_chars}")
        if self.default_tone not in {t.value for t in Tone}:
            raise ValueError(f"default_tone must be one of {[t.value for t in Tone]}")


@dataclass(frozen=True)
class ExportConfig:
    output_dir: str = "./output"

    @property
    def resolved_output_dir(self) -> Path:
        return Path(self.output_dir).expanduser()


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    scrape: ScrapeConfig = field(default_factory=ScrapeConfig)
    prompt: PromptConfig = field(default_factory=PromptConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


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
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        scrape=ScrapeConfig(**raw.get("scrape", {})),
        prompt=PromptConfig(**raw.get("prompt", {})),
        export=ExportConfig(**raw.get("export", {})),
    )
