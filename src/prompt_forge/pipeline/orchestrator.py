"""Pipeline orchestrator - enhance, analyze and generate in one call."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from prompt_forge.clients.llm_client import DEFAULT_MODEL, LLMClient
from prompt_forge.config import EnhancerConfig
from prompt_forge.engine.analyzer import analyze_input
from prompt_forge.engine.enhancer import enhance_input
from prompt_forge.engine.generator import generate_prompts
from prompt_forge.models.enhancement import EnhancementResult
from prompt_forge.models.profile import InputProfile
from prompt_forge.models.template import Modality, PromptTemplate
from prompt_forge.pipeline.optimizer import DEFAULT_PLATFORM, PromptOptimizer

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Complete result from one prompt-generation run."""

    prompts: list[PromptTemplate]
    profile: InputProfile
    enhancement: EnhancementResult | None = None
    source: str = "local"  # "local" | "remote"
    elapsed_seconds: float = 0.0

    @property
    def recommended(self) -> PromptTemplate:
        return self.prompts[0]


class PromptPipeline:
    """Runs the local rule-based path, or the remote LLM path when a client is given."""

    def __init__(
        self,
        llm: LLMClient | None = None,
        *,
        enhancer_config: EnhancerConfig | None = None,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        max_tokens: int = 2000,
    ):
        self.enhancer_config = enhancer_config
        self.optimizer = (
            PromptOptimizer(llm, model=model, temperature=temperature, max_tokens=max_tokens)
            if llm is not None
            else None
        )

    def _prepare(self, text: str, enhance: bool) -> tuple[str, EnhancementResult | None]:
        if not enhance:
            return text, None
        enhancement = enhance_input(text, self.enhancer_config)
        return enhancement.enhanced, enhancement

    def run(
        self,
        text: str,
        modality: Modality | str = Modality.TEXT,
        *,
        enhance: bool = True,
    ) -> PipelineResult:
        """Local path: enhance (optional) -> analyze -> generate."""
        start = time.monotonic()
        source_text, enhancement = self._prepare(text, enhance)
        profile = analyze_input(source_text)
        prompts = generate_prompts(modality, source_text)
        return PipelineResult(
            prompts=prompts,
            profile=profile,
            enhancement=enhancement,
            source="local",
            elapsed_seconds=time.monotonic() - start,
        )

    async def run_remote(
        self,
        text: str,
        platform: str = DEFAULT_PLATFORM,
        *,
        enhance: bool = False,
    ) -> PipelineResult:
        """Remote path: the hosted LLM writes the variants."""
        if self.optimizer is None:
            raise ValueError("Remote generation requires an LLMClient")

        start = time.monotonic()
        source_text, enhancement = self._prepare(text, enhance)
        profile = analyze_input(source_text)
        prompts = await self.optimizer.optimize(source_text, platform)
        return PipelineResult(
            prompts=prompts,
            profile=profile,
            enhancement=enhancement,
            source="remote",
            elapsed_seconds=time.monotonic() - start,
        )
