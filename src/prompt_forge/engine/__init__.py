"""Rule-based prompt analysis, enhancement and generation."""

from prompt_forge.engine.analyzer import analyze_input
from prompt_forge.engine.enhancer import enhance_input
from prompt_forge.engine.generator import generate_prompts

__all__ = ["analyze_input", "enhance_input", "generate_prompts"]
