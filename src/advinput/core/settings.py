"""Configuration values shared by the prompt engine and its helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PromptSettings:
    """Tunable constants for :class:`advinput.core.engine.AdvInput`."""

    wrap_width: int = 100
    default_marker: str = "(*)"
    file_extension: str = "json"
    fallback_filename: str = "JohnDoe.json"
    variant_color: str = "light_magenta"
    file_color: str = "cyan"
    warning_color: str = "yellow"
    error_color: str = "red"

    def __post_init__(self) -> None:
        if self.wrap_width <= 0:
            raise ValueError("wrap_width must be a positive number of characters.")
        if not self.file_extension or self.file_extension.startswith("."):
            raise ValueError("file_extension must be given without a leading dot.")


__all__ = ["PromptSettings"]
