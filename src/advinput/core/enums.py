"""Conversion between enum identifiers and the text shown at the prompt.

Every enumerated type that can be prompted for satisfies :class:`Promptable`:
it lists its members in a stable order, exposes each member's raw identifier
and can rebuild a member from that identifier. Deriving display names,
parsing user text and laying out the candidate list are built on those three
operations only.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Protocol, Sequence, Type, TypeVar

P = TypeVar("P", bound="Promptable")


def add_spaces_before_caps(text: str) -> str:
    """Turn a ``PascalCase`` identifier into space separated words.

    A space is inserted before every uppercase character that is not the
    first one and is directly followed by a lowercase character, so acronyms
    stay together: ``"HTTPServer"`` becomes ``"HTTP Server"``.
    """

    result: List[str] = []
    for index, char in enumerate(text):
        next_char = text[index + 1] if index + 1 < len(text) else ""
        if char.isupper() and result and next_char.islower():
            result.append(" ")
        result.append(char)
    return "".join(result)


class Promptable(Protocol):
    """Capability required from types used with the enum prompt."""

    @classmethod
    def variants(cls: Type[P]) -> Sequence[P]:
        """Return every member in declaration order."""

    @property
    def raw_name(self) -> str:
        """Return the identifier the member was declared with."""

    @classmethod
    def from_raw(cls: Type[P], raw: str) -> P:
        """Return the member declared as ``raw``; raise ``KeyError`` otherwise."""


def raw_name(variant: Promptable) -> str:
    return variant.raw_name


def display_name(variant: Promptable) -> str:
    """Human readable label for ``variant``."""

    return add_spaces_before_caps(raw_name(variant))


def variants_as_strings(enum_type: Type[P]) -> List[str]:
    """Display names of every member of ``enum_type`` in declaration order."""

    return [display_name(variant) for variant in enum_type.variants()]


def from_input_str(enum_type: Type[P], text: str) -> Optional[P]:
    """Parse user text into a member of ``enum_type``.

    The comparison is case-insensitive and accepts both the display name and
    the raw identifier. Members are tried in declaration order and the first
    match wins. The matched member is rebuilt through ``from_raw``.
    """

    wanted = text.lower()
    for variant in enum_type.variants():
        name = raw_name(variant)
        if display_name(variant).lower() == wanted or name.lower() == wanted:
            return enum_type.from_raw(name)
    return None


def render_variant_list(
    names: Iterable[str],
    *,
    default_name: Optional[str] = None,
    marker: str = "(*)",
) -> str:
    """Join ``names`` with commas, tagging ``default_name`` with ``marker``."""

    rendered = []
    for name in names:
        if default_name is not None and name == default_name:
            rendered.append(f"{name}{marker}")
        else:
            rendered.append(name)
    return ", ".join(rendered)


def wrap_variants(text: str, width: int = 100) -> List[str]:
    """Split ``text`` into lines of at most ``width`` characters.

    Each line is cut at the last space inside the window and that space is
    dropped. When the window holds no space at all, the remaining text is
    emitted unchanged as the final line, even if it exceeds ``width``.
    """

    lines: List[str] = []
    remaining = text
    while True:
        if len(remaining) <= width:
            lines.append(remaining)
            break
        cut = remaining.rfind(" ", 0, width)
        if cut == -1:
            lines.append(remaining)
            break
        lines.append(remaining[:cut])
        remaining = remaining[cut + 1:]
    return lines


class PromptableEnum(Enum):
    """:class:`enum.Enum` base that satisfies :class:`Promptable`.

    Subclass it instead of :class:`enum.Enum`::

        class Direction(PromptableEnum):
            North = auto()
            South = auto()
    """

    @classmethod
    def variants(cls):
        return list(cls)

    @property
    def raw_name(self) -> str:
        return self.name

    @classmethod
    def from_raw(cls, raw: str):
        return cls[raw]

    @property
    def display_name(self) -> str:
        return display_name(self)

    @classmethod
    def variants_as_strings(cls) -> List[str]:
        return variants_as_strings(cls)

    @classmethod
    def from_input_str(cls, text: str):
        return from_input_str(cls, text)


__all__ = [
    "Promptable",
    "PromptableEnum",
    "add_spaces_before_caps",
    "display_name",
    "from_input_str",
    "raw_name",
    "render_variant_list",
    "variants_as_strings",
    "wrap_variants",
]
