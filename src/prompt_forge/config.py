"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-haiku-4-5-20251001"
    timeout: int = 30
    max_attempts: int = 1  # 1 = no automatic retry
    temperature: float = 0.7
    max_tokens: int = 2000

    def __post_init__(self) -> None:
        if self.timeout < 1:
            raise ValueError(f"llm.timeout must be >= 1, got {self.timeout}")
        if not 1 <= self.max_attempts <= 5:
            raise ValueError(f"llm.max_attempts must be between 1 and 5, got {self.max_attempts}")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"llm.temperature must be between 0 and 1, got {self.temperature}")
        if self.max_tokens < 1:
            raise ValueError(f"llm.max_tokens must be >= 1, got {self.max_tokens}")


@dataclass(frozen=True)
class EnhancerConfig:
    short_request_chars: int = 25
    style_confidence_threshold: float = 0.7

    def __post_init__(self) -> None:
        if self.short_request_chars < 0:
            raise ValueError(f"enhancer.short_request_chars must be >= 0, got {self.short_request_chars}")
        if not 0.0 <= self.style_confidence_threshold <= 1.0:
            raise ValueError(
                f"enhancer.style_confidence_threshold must be between 0 and 1, got {self.style_confidence_threshold}"
            )


@dataclass(frozen=True)
class GeneratorConfig:
    default_modality: str = "text"
    default_platform: str = "chatgpt"


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    enhancer: EnhancerConfig = field(default_factory=EnhancerConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)


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
        enhancer=EnhancerConfig(**raw.get("enhancer", {})),
        generator=GeneratorConfig(**raw.get("generator", {})),
    )
