"""Tab-completion strategies for the prompt engine.

Exactly one :class:`CompletionStrategy` is active per engine. The engine swaps
it before every read and the prompt_toolkit session consults it through
:class:`StrategyCompleter` whenever the user asks for completions.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Tuple

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document


class StrategyKind(enum.Enum):
    NONE = "none"
    ENUM = "enum"
    FILE = "file"


@dataclass(frozen=True)
class CompletionPair:
    """A completion candidate: what is listed and what gets inserted."""

    display: str
    replacement: str


def _token_start(line: str, pos: int) -> int:
    for index in range(pos - 1, -1, -1):
        char = line[index]
        if char.isspace() or char == "/":
            return index + 1
    return 0


@dataclass(frozen=True)
class CompletionStrategy:
    """Tagged completion behaviour: no completions, enum names or file names."""

    kind: StrategyKind = StrategyKind.NONE
    candidates: Tuple[str, ...] = ()

    @classmethod
    def none(cls) -> "CompletionStrategy":
        return cls()

    @classmethod
    def enum_match(cls, variants: Iterable[str]) -> "CompletionStrategy":
        return cls(StrategyKind.ENUM, tuple(variants))

    @classmethod
    def file_match(cls, files: Iterable[str]) -> "CompletionStrategy":
        return cls(StrategyKind.FILE, tuple(files))

    def complete(self, line: str, pos: int) -> Tuple[int, List[CompletionPair]]:
        """Return the anchor position and candidates for ``line`` at ``pos``.

        Enum names are matched case-insensitively against the whole line up to
        the cursor and always anchor at 0. File names are matched
        case-sensitively against the token that starts after the last
        whitespace or ``/`` before the cursor.
        """

        if self.kind is StrategyKind.NONE:
            return pos, []
        if self.kind is StrategyKind.ENUM:
            word = line[:pos].lower()
            return 0, self._pairs(name for name in self.candidates if name.lower().startswith(word))
        if self.kind is StrategyKind.FILE:
            start = _token_start(line, pos)
            word = line[start:pos]
            return start, self._pairs(name for name in self.candidates if name.startswith(word))
        raise ValueError(f"Unknown completion strategy: {self.kind!r}")

    @staticmethod
    def _pairs(names: Iterable[str]) -> List[CompletionPair]:
        return [CompletionPair(display=name, replacement=name) for name in names]


class StrategyCompleter(Completer):
    """prompt_toolkit completer that delegates to the currently active strategy."""

    def __init__(self, strategy_source: Callable[[], CompletionStrategy]) -> None:
        self._strategy_source = strategy_source

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterator[Completion]:
        pos = document.cursor_position
        anchor, pairs = self._strategy_source().complete(document.text, pos)
        for pair in pairs:
            yield Completion(pair.replacement, start_position=anchor - pos, display=pair.display)


__all__ = [
    "CompletionPair",
    "CompletionStrategy",
    "StrategyCompleter",
    "StrategyKind",
]
