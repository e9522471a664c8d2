"""Remote optimizer - delegates prompt generation to a hosted LLM."""

from __future__ import annotations

import logging
from types import MappingProxyType

from pydantic import ValidationError

from prompt_forge.clients.llm_client import DEFAULT_MODEL, LLMClient
from prompt_forge.models.template import Modality, PromptTemplate
from prompt_forge.utils.json_parser import extract_json_array

logger = logging.getLogger(__name__)

DEFAULT_PLATFORM = "chatgpt"
FALLBACK_TITLES = ("Quick & Direct", "Detailed & Professional", "Creative & Enhanced")
VARIANT_COUNT = 3

PLATFORM_PROMPTS = MappingProxyType({
    "chatgpt": """\
You are an expert at creating prompts for ChatGPT. Generate 3 optimized prompt variations that:
- Use clear, specific instructions
- Include role definitions when beneficial
- Structure complex tasks with numbered steps
- Specify desired output format
- Include examples when helpful""",
    "claude": """\
You are an expert at creating prompts for Claude (Anthropic). Generate 3 optimized prompt variations that:
- Leverage Claude's strong analytical and reasoning capabilities
- Use XML tags for structure when dealing with complex data
- Include clear thinking instructions for complex reasoning
- Specify output format preferences
- Take advantage of Claude's long context window for detailed tasks""",
    "gemini": """\
You are an expert at creating prompts for Google Gemini. Generate 3 optimized prompt variations that:
- Leverage multimodal capabilities (text, image, code)
- Use clear, structured instructions
- Include context and examples
- Specify output format
- Take advantage of Google's knowledge integration""",
    "grok": """\
You are an expert at creating prompts for Grok (xAI). Generate 3 optimized prompt variations that:
- Leverage real-time information and current events
- Use conversational yet precise language
- Include context about timing and currency of information
- Specify factual accuracy requirements
- Structure for quick, actionable responses""",
    "midjourney": """\
You are an expert at creating prompts for MidJourney. Generate 3 optimized prompt variations that:
- Include detailed visual descriptions (subject, style, lighting, composition)
- Use specific artistic terms and styles
- Add technical parameters (--ar, --v, --stylize, --chaos)
- Reference specific artists or art movements when relevant
- Specify mood, atmosphere, and color palette""",
    "dalle": """\
You are an expert at creating prompts for DALL-E. Generate 3 optimized prompt variations that:
- Use clear, descriptive language for subjects and scenes
- Specify artistic style and medium
- Include lighting, perspective, and composition details
- Add color scheme and mood descriptors
- Keep prompts concise but detailed (under 400 characters)""",
    "stable-diffusion": """\
You are an expert at creating prompts for Stable Diffusion. Generate 3 optimized prompt variations that:
- Use weighted keywords and emphasis with (keyword:weight) syntax
- Include negative prompts to avoid unwanted elements
- Specify quality tags (8k, highly detailed, masterpiece)
- Reference specific models or LoRAs when beneficial
- Structure with main subject, style, technical specs, quality tags""",
    "copilot": """\
You are an expert at creating prompts for GitHub Copilot. Generate 3 optimized code comment variations that:
- Use clear, specific function/method descriptions
- Include parameter types and return values
- Specify edge cases and error handling
- Reference coding patterns and best practices
- Add context about purpose and usage""",
    "cursor": """\
You are an expert at creating prompts for Cursor AI. Generate 3 optimized prompt variations that:
- Use specific, actionable instructions
- Include file context and project structure when relevant
- Specify coding standards and patterns
- Reference existing code when making changes
- Include testing and documentation requirements""",
    "elevenlabs": """\
You are an expert at creating prompts for ElevenLabs voice synthesis. Generate 3 optimized script variations that:
- Use natural, conversational language
- Include punctuation for proper pacing and intonation
- Add emotional context when needed
- Specify voice characteristics (tone, pace, emotion)
- Structure for clear, engaging delivery""",
    "musicgen": """\
You are an expert at creating prompts for MusicGen. Generate 3 optimized prompt variations that:
- Specify genre, mood, and tempo
- Include instrumentation details
- Reference specific musical styles or artists
- Add atmosphere and emotional descriptors
- Specify structure (intro, verse, chorus, etc.)""",
    "runway": """\
You are an expert at creating prompts for Runway video editing. Generate 3 optimized prompt variations that:
- Describe the desired video transformation clearly
- Specify visual style and aesthetic
- Include motion and transition details
- Add atmosphere and mood descriptors
- Reference specific video effects or techniques""",
    "pika": """\
You are an expert at creating prompts for Pika text-to-video. Generate 3 optimized prompt variations that:
- Describe the scene with clear visual details
- Specify motion and camera movement
- Include lighting and atmosphere
- Add style and aesthetic descriptors
- Keep prompts concise but descriptive""",
    "sora": """\
You are an expert at creating prompts for Sora (OpenAI video generation). Generate 3 optimized prompt variations that:
- Use cinematic, descriptive language
- Specify camera angles and movements
- Include detailed visual descriptions of subjects and environments
- Add temporal elements (time of day, season, weather)
- Describe mood, atmosphere, and visual style""",
})

# First entry is the default platform for the modality.
MODALITY_PLATFORMS = MappingProxyType({
    Modality.TEXT: ("chatgpt", "claude", "gemini", "grok"),
    Modality.IMAGE: ("midjourney", "dalle", "stable-diffusion"),
    Modality.CODE: ("copilot", "cursor"),
    Modality.AUDIO: ("elevenlabs", "musicgen"),
    Modality.VIDEO: ("runway", "pika", "sora"),
})

USER_PROMPT = """\
Original user request: "{text}"

Generate 3 distinct optimized prompt variations:
1. "Quick & Direct" - Concise, straightforward version
2. "Detailed & Professional" - Comprehensive, well-structured version
3. "Creative & Enhanced" - Imaginative version with rich details

Return ONLY a JSON array with this exact structure:
[
  {{"title": "Quick & Direct", "prompt": "..."}},
  {{"title": "Detailed & Professional", "prompt": "..."}},
  {{"title": "Creative & Enhanced", "prompt": "..."}}
]"""


def resolve_platform(target: str | None) -> str:
    """Map a platform id or a modality name to a known platform id."""
    key = (target or "").strip().lower()
    if key in PLATFORM_PROMPTS:
        return key
    if key in {m.value for m in Modality}:
        return MODALITY_PLATFORMS[Modality(key)][0]
    return DEFAULT_PLATFORM


def fallback_templates(content: str) -> list[PromptTemplate]:
    """Wrap unstructured completion text into the three fixed fallback variants."""
    return [PromptTemplate(title=title, prompt=content) for title in FALLBACK_TITLES]


class PromptOptimizer:
    """Generate optimized prompt variants for a specific AI platform via Claude."""

    def __init__(
        self,
        llm: LLMClient,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        max_tokens: int = 2000,
    ):
        self.llm = llm
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def optimize(self, text: str, platform: str = DEFAULT_PLATFORM) -> list[PromptTemplate]:
        """Ask the LLM for three variants of ``text`` tuned for ``platform``.

        Raises ValueError on empty text. Completion errors from the client
        propagate unchanged; unparseable completions degrade to
        :func:`fallback_templates`.
        """
        if not text or not text.strip():
            raise ValueError("Text is required")

        platform_id = resolve_platform(platform)
        logger.info("Optimizing prompt for %s", platform_id)

        response = await self.llm.generate(
            prompt=USER_PROMPT.format(text=text.strip()),
            system=PLATFORM_PROMPTS[platform_id],
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        prompts = self._parse_templates(response.text)
        logger.info("Generated %d optimized prompts for %s", len(prompts), platform_id)
        return prompts

    @staticmethod
    def _parse_templates(content: str) -> list[PromptTemplate]:
        """Parse the completion into exactly three templates, or fall back."""
        try:
            data = extract_json_array(content)
        except ValueError:
            logger.warning("Failed to parse AI response, using fallback templates")
            return fallback_templates(content)

        result: list[PromptTemplate] = []
        for item in data:
            if not isinstance(item, dict):
                continue
            try:
                result.append(PromptTemplate(**item))
            except (ValidationError, TypeError):
                continue
            if len(result) == VARIANT_COUNT:
                break

        if len(result) < VARIANT_COUNT:
            logger.warning("AI response had %d usable prompts, using fallback templates", len(result))
            return fallback_templates(content)
        return result
