"""Template Generator - builds three prompt variants per target modality."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Iterable

from prompt_forge.engine.analyzer import analyze_input
from prompt_forge.models.profile import InputProfile, Intent, Specificity
from prompt_forge.models.template import Modality, PromptTemplate

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "the requested subject"

# Title sets, in output order. Index 0 is the recommended variant.
MODALITY_TITLES = MappingProxyType({
    Modality.TEXT: ("Quick & Simple", "Detailed & Professional", "Creative & Engaging"),
    Modality.IMAGE: ("Photorealistic", "Artistic & Creative", "Commercial & Clean"),
    Modality.CODE: ("Production Ready", "Learning & Educational", "Quick Solution"),
    Modality.AUDIO: ("Professional Narration", "Conversational & Friendly", "Formal & Authoritative"),
    Modality.VIDEO: ("Cinematic & Professional", "Social Media Ready", "Educational & Clear"),
})


def _lowered(keywords: Iterable[str]) -> list[str]:
    return [k.lower() for k in keywords]


def _has_any(profile: InputProfile, words: frozenset[str]) -> bool:
    return any(k in words for k in _lowered(profile.keywords))


def _find(profile: InputProfile, words: frozenset[str]) -> str | None:
    for keyword in profile.keywords:
        if keyword.lower() in words:
            return keyword
    return None


def _subject(profile: InputProfile, count: int, sep: str) -> str:
    return sep.join(profile.keywords[:count]) or DEFAULT_SUBJECT


def _choose(profile: InputProfile, branches: tuple[tuple[frozenset[str], str], ...], default: str) -> str:
    """First branch whose trigger words intersect the keywords wins."""
    for words, sentence in branches:
        if _has_any(profile, words):
            return sentence
    return default


# --- text ------------------------------------------------------------------

CREATIVE_WORDS = frozenset({"creative", "innovative", "unique", "original"})
TECHNICAL_WORDS = frozenset({"technical", "code", "algorithm", "process", "method"})
ANALYTICAL_WORDS = frozenset({"analyze", "compare", "evaluate", "assess"})
BUSINESS_WORDS = frozenset({"business", "marketing", "strategy"})


def _text_instructions(text: str, profile: InputProfile) -> str:
    if _has_any(profile, CREATIVE_WORDS):
        return "Present your response with creative flair, using vivid examples and innovative perspectives that inspire action."
    if _has_any(profile, TECHNICAL_WORDS):
        return "Provide precise, technical details with step-by-step explanations and practical implementation guidance."
    if _has_any(profile, ANALYTICAL_WORDS):
        return "Include thorough analysis with data-driven insights, comparisons, and evidence-based conclusions."
    if "?" in text or profile.intent is Intent.EXPLAIN:
        return "Answer directly and comprehensively, anticipating follow-up questions and providing actionable next steps."
    if profile.specificity is Specificity.DETAILED:
        return "Deliver comprehensive coverage with multiple perspectives, detailed examples, and strategic recommendations."
    return "Focus on clarity and actionable insights that can be immediately understood and applied."


TEXT_DETAILED_APPROACH = MappingProxyType({
    Intent.EXPLAIN: "Provide comprehensive education covering theory, practical application, and real-world implications with expert-level depth.",
    Intent.IMPROVE: "Deliver strategic improvement framework with measurable outcomes, implementation roadmap, and success metrics.",
    Intent.ANALYZE: "Conduct thorough analysis with multiple methodologies, data interpretation, and actionable strategic recommendations.",
    Intent.CREATE: "Create comprehensive implementation guide with industry best practices, risk mitigation, and scalability considerations.",
})


def _text_creative_approach(profile: InputProfile) -> str:
    if profile.intent is Intent.EXPLAIN:
        themes = _subject(profile, 2, " and ")
        return (
            f"Transform complex concepts into engaging narratives using {themes} as creative anchors "
            "that make learning memorable and fun."
        )
    if any(t.lower() in BUSINESS_WORDS for t in profile.keywords[:2]):
        return "Craft compelling business storytelling that connects emotionally while delivering strategic insights and innovative solutions."
    return "Create inspiring content that sparks curiosity and motivates action through creative examples and fresh perspectives."


def _text_prompts(text: str, profile: InputProfile) -> list[PromptTemplate]:
    quick, detailed, creative = MODALITY_TITLES[Modality.TEXT]
    role = "educator" if profile.intent is Intent.EXPLAIN else "content strategist"
    return [
        PromptTemplate(
            title=quick,
            prompt=f"You are a professional {role}. {text}\n\n{_text_instructions(text, profile)}",
        ),
        PromptTemplate(
            title=detailed,
            prompt=(
                f"Act as a subject matter expert in {_subject(profile, 3, ', ')}. "
                f'Transform this request: "{text}" into a comprehensive guide.\n\n'
                f"{TEXT_DETAILED_APPROACH[profile.intent]}"
            ),
        ),
        PromptTemplate(
            title=creative,
            prompt=(
                f"You are a creative strategist and storyteller specializing in {_subject(profile, 2, ' and ')}. "
                f'Based on "{text}":\n\n{_text_creative_approach(profile)}'
            ),
        ),
    ]


# --- image -----------------------------------------------------------------

IMAGE_CONTEXT = (
    (frozenset({"person", "people", "portrait", "face"}),
     "portrait photography with perfect skin tones and natural expressions"),
    (frozenset({"landscape", "nature", "outdoor", "scenery"}),
     "landscape photography with dramatic natural lighting and atmospheric depth"),
    (frozenset({"product", "object", "commercial", "brand"}),
     "commercial product photography with clean backgrounds and professional presentation"),
)
ART_STYLES = frozenset({"modern", "vintage", "abstract", "realistic", "minimalist", "detailed"})
ART_MOODS = frozenset({"dark", "bright", "colorful", "monochrome", "vibrant", "subtle"})
COMMERCIAL_PURPOSE = (
    (frozenset({"marketing", "advertisement", "promotion"}),
     "marketing campaign ready with strong brand appeal and conversion optimization"),
    (frozenset({"website", "web", "digital"}),
     "web-optimized with fast loading and responsive design considerations"),
    (frozenset({"social", "media", "instagram"}),
     "social media optimized for maximum engagement and shareability"),
)


def _image_prompts(text: str, profile: InputProfile) -> list[PromptTemplate]:
    photo, artistic, commercial = MODALITY_TITLES[Modality.IMAGE]
    context = _choose(profile, IMAGE_CONTEXT, "professional photography with optimal composition and lighting")
    style = _find(profile, ART_STYLES) or "contemporary"
    mood = _find(profile, ART_MOODS) or "balanced"
    purpose = _choose(profile, COMMERCIAL_PURPOSE, "versatile commercial use with professional presentation standards")
    return [
        PromptTemplate(
            title=photo,
            prompt=(
                f"Create a stunning photorealistic image: {text}\n\n"
                f"Focus on {context}, captured with cinema-quality equipment and post-production excellence. "
                "--ar 16:9 --style raw --quality 2"
            ),
        ),
        PromptTemplate(
            title=artistic,
            prompt=(
                f"Generate artistic interpretation of: {text}\n\n"
                f"Create {style} artistic style with {mood} aesthetic, emphasizing "
                f"{_subject(profile, 2, ' and ')} themes that captures the essence of your vision "
                "with masterful artistic execution. --v 6 --stylize 750"
            ),
        ),
        PromptTemplate(
            title=commercial,
            prompt=(
                f"Professional commercial image for: {text}\n\n"
                f"Deliver {purpose} with clean, modern aesthetics that align with current design trends. "
                "--ar 1:1 --quality 2"
            ),
        ),
    ]


# --- code ------------------------------------------------------------------

CODE_TECH = frozenset({"react", "javascript", "python", "java", "api", "database"})
CODE_PURPOSE = frozenset({"app", "website", "system", "algorithm", "function"})
LEARNER_WORDS = frozenset({"beginner", "learn", "tutorial"})
PROTOTYPE_WORDS = frozenset({"prototype", "mvp", "demo"})
BUG_WORDS = frozenset({"fix", "bug", "error", "broken", "crash"})


def _code_context(profile: InputProfile) -> str:
    tech = _find(profile, CODE_TECH)
    purpose = _find(profile, CODE_PURPOSE)
    if tech and purpose:
        return f"optimized {tech} {purpose} with enterprise-grade architecture and comprehensive testing suite"
    if profile.intent is Intent.IMPROVE:
        return "refactored solution with enhanced performance, security, and maintainability standards"
    return "robust, scalable solution following current industry best practices and design patterns"


def _code_learning(profile: InputProfile) -> str:
    if profile.specificity is Specificity.VAGUE:
        return "comprehensive learning guide starting from basics and building up to advanced concepts with interactive examples"
    if _has_any(profile, LEARNER_WORDS):
        return "beginner-friendly tutorial with clear explanations, practical exercises, and common mistake prevention"
    return "structured educational implementation with progressive complexity and hands-on learning opportunities"


def _code_quick(profile: InputProfile) -> str:
    if profile.intent is Intent.IMPROVE and _has_any(profile, BUG_WORDS):
        return "immediate fix with minimal changes that resolves the core issue efficiently and safely"
    if _has_any(profile, PROTOTYPE_WORDS):
        return "rapid prototype demonstrating core functionality with clean, extensible foundation"
    return "streamlined solution focusing on essential features with clear, maintainable code structure"


def _code_prompts(text: str, profile: InputProfile) -> list[PromptTemplate]:
    production, learning, quick = MODALITY_TITLES[Modality.CODE]
    return [
        PromptTemplate(
            title=production,
            prompt=(
                f"Create production-grade code for: {text}\n\n"
                f"Deliver {_code_context(profile)} with complete documentation and deployment readiness."
            ),
        ),
        PromptTemplate(
            title=learning,
            prompt=(
                f"Build educational implementation of: {text}\n\n"
                f"Create {_code_learning(profile)} that maximizes understanding and retention."
            ),
        ),
        PromptTemplate(
            title=quick,
            prompt=(
                f"Rapid implementation for: {text}\n\n"
                f"Provide {_code_quick(profile)} ready for immediate use and future enhancement."
            ),
        ),
    ]


# --- audio -----------------------------------------------------------------

AUDIO_CONTEXT = (
    (frozenset({"podcast", "interview", "conversation"}),
     "engaging podcast-style delivery with natural conversational flow and authentic personality"),
    (frozenset({"presentation", "business", "corporate"}),
     "executive-level professional presentation with authoritative confidence and clarity"),
    (frozenset({"story", "narrative", "book"}),
     "compelling storytelling with dramatic pacing and emotional resonance"),
)
AUDIO_FRIENDLY = (
    (frozenset({"tutorial", "guide", "how-to"}),
     "friendly tutorial style that makes complex topics feel approachable and easy to understand"),
    (frozenset({"story", "personal", "experience"}),
     "intimate storytelling that creates personal connection and emotional engagement"),
)
AUDIO_AUTHORITY = (
    (frozenset({"academic", "research", "scientific"}),
     "scholarly authority with academic precision and evidence-based credibility"),
    (frozenset({"business", "executive", "corporate"}),
     "executive leadership presence with strategic insight and business acumen"),
    (frozenset({"legal", "medical", "technical"}),
     "professional expertise with technical accuracy and regulatory compliance"),
)


def _audio_prompts(text: str, profile: InputProfile) -> list[PromptTemplate]:
    narration, friendly, formal = MODALITY_TITLES[Modality.AUDIO]
    context = _choose(
        profile, AUDIO_CONTEXT,
        "versatile professional narration adapted to content requirements and audience expectations",
    )
    approach = _choose(
        profile, AUDIO_FRIENDLY,
        "warm, relatable conversation that feels like chatting with a knowledgeable friend",
    )
    authority = _choose(
        profile, AUDIO_AUTHORITY,
        "authoritative expertise with confident delivery and subject matter mastery",
    )
    return [
        PromptTemplate(
            title=narration,
            prompt=(
                f"Create professional audio narration for: {text}\n\n"
                f"Deliver {context} with broadcast-quality production standards."
            ),
        ),
        PromptTemplate(
            title=friendly,
            prompt=(
                f"Generate friendly, conversational audio: {text}\n\n"
                f"Create {approach} with authentic personality and natural charm."
            ),
        ),
        PromptTemplate(
            title=formal,
            prompt=(
                f"Produce formal, authoritative audio content: {text}\n\n"
                f"Establish {authority} with impeccable professional presentation standards."
            ),
        ),
    ]


# --- video -----------------------------------------------------------------

VIDEO_CINEMATIC = (
    (frozenset({"commercial", "advertisement", "brand"}),
     "high-end commercial cinematography with brand storytelling and emotional impact"),
    (frozenset({"documentary", "interview", "real"}),
     "documentary-style cinematography with authentic storytelling and compelling visual narrative"),
    (frozenset({"artistic", "creative", "experimental"}),
     "artistic cinematography with creative visual language and innovative filming techniques"),
)
VIDEO_SOCIAL = (
    (frozenset({"tiktok", "viral", "trending"}),
     "viral TikTok content with trending hooks, fast-paced editing, and maximum shareability"),
    (frozenset({"instagram", "reel", "story"}),
     "Instagram-optimized content with aesthetic appeal and engagement-driven storytelling"),
    (frozenset({"educational", "tutorial", "tips"}),
     "educational social content with quick learning value and actionable takeaways"),
)
VIDEO_EDUCATIONAL = (
    (frozenset({"tutorial", "how-to", "guide"}),
     "comprehensive tutorial with step-by-step demonstrations and practical hands-on learning"),
    (frozenset({"explain", "concept", "theory"}),
     "concept explanation with visual aids, examples, and clear knowledge progression"),
    (frozenset({"course", "lesson", "training"}),
     "structured educational content with learning objectives and retention optimization"),
)


def _video_prompts(text: str, profile: InputProfile) -> list[PromptTemplate]:
    cinematic, social, educational = MODALITY_TITLES[Modality.VIDEO]
    style = _choose(
        profile, VIDEO_CINEMATIC,
        "cinematic excellence with professional production values and compelling visual storytelling",
    )
    strategy = _choose(
        profile, VIDEO_SOCIAL,
        "platform-optimized content designed for maximum engagement and organic reach",
    )
    focus = _choose(
        profile, VIDEO_EDUCATIONAL,
        "educational video content designed for effective knowledge transfer and engagement",
    )
    return [
        PromptTemplate(
            title=cinematic,
            prompt=(
                f"Create cinematic video sequence: {text}\n\n"
                f"Produce {style} with 4K broadcast quality. --duration 60s --fps 24"
            ),
        ),
        PromptTemplate(
            title=social,
            prompt=(
                f"Generate social media video for: {text}\n\n"
                f"Create {strategy} with mobile-first design. --aspect 9:16 --duration 30s"
            ),
        ),
        PromptTemplate(
            title=educational,
            prompt=(
                f"Produce educational video content: {text}\n\n"
                f"Deliver {focus} with professional instructional design principles."
            ),
        ),
    ]


BUILDERS: MappingProxyType[Modality, Callable[[str, InputProfile], list[PromptTemplate]]] = MappingProxyType({
    Modality.TEXT: _text_prompts,
    Modality.IMAGE: _image_prompts,
    Modality.CODE: _code_prompts,
    Modality.AUDIO: _audio_prompts,
    Modality.VIDEO: _video_prompts,
})


def generate_prompts(modality: Modality | str, text: str) -> list[PromptTemplate]:
    """Return exactly three prompt variants for ``modality``.

    Unknown modalities fall back to the text branch. Output is a pure
    function of the arguments.
    """
    target = Modality.parse(modality)
    text = text or ""
    profile = analyze_input(text)
    prompts = BUILDERS[target](text, profile)
    logger.debug("Generated %d %s prompts", len(prompts), target.value)
    return prompts
