"""Typed, tab-completing terminal prompts built on prompt_toolkit."""

from __future__ import annotations

from advinput.core import (
    AdvInput,
    FileSelectionResult,
    Promptable,
    PromptableEnum,
    PromptSettings,
)

__all__ = [
    "AdvInput",
    "FileSelectionResult",
    "Promptable",
    "PromptableEnum",
    "PromptSettings",
]
