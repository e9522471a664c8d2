"""Tests for pipeline orchestrator."""

import pytest

from prompt_forge.engine import enhance_input, generate_prompts
from prompt_forge.models.profile import Intent
from prompt_forge.models.template import Modality
from prompt_forge.pipeline.orchestrator import PipelineResult, PromptPipeline


class TestLocalRun:
    def test_enhance_then_generate(self):
        result = PromptPipeline().run("make me a logo", Modality.IMAGE)

        assert isinstance(result, PipelineResult)
        assert result.source == "local"
        assert result.enhancement == enhance_input("make me a logo")
        assert result.prompts == generate_prompts(Modality.IMAGE, result.enhancement.enhanced)
        assert result.recommended.title == "Photorealistic"
        assert result.elapsed_seconds >= 0

    def test_without_enhancement(self):
        result = PromptPipeline().run("explain how recursion works", "text", enhance=False)

        assert result.enhancement is None
        assert result.profile.intent is Intent.EXPLAIN
        assert result.prompts == generate_prompts("text", "explain how recursion works")

    def test_unknown_modality(self):
        result = PromptPipeline().run("a cat", "hologram", enhance=False)
        assert result.prompts == generate_prompts("text", "a cat")

    def test_empty_input(self):
        result = PromptPipeline().run("")
        assert len(result.prompts) == 3
        assert result.enhancement.improvements == []


class TestRemoteRun:
    @pytest.mark.asyncio
    async def test_requires_client(self):
        with pytest.raises(ValueError, match="requires an LLMClient"):
            await PromptPipeline().run_remote("a cat")

    @pytest.mark.asyncio
    async def test_remote_prompts(self, mock_llm_client):
        pipeline = PromptPipeline(mock_llm_client)

        result = await pipeline.run_remote("write a haiku about autumn", "claude")

        assert result.source == "remote"
        assert result.enhancement is None
        assert result.recommended.title == "Quick & Direct"
        mock_llm_client.generate.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_remote_with_enhancement(self, mock_llm_client):
        pipeline = PromptPipeline(mock_llm_client)

        result = await pipeline.run_remote("make me a logo", "dalle", enhance=True)

        prompt = mock_llm_client.generate.call_args.kwargs["prompt"]
        assert result.enhancement is not None
        assert result.enhancement.enhanced in prompt
