"""Line editing boundary between the engine and the terminal."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.history import InMemoryHistory

logger = logging.getLogger(__name__)


class ReadAborted(Exception):
    """Raised when a read ends without a submitted line."""


class LineEditor(Protocol):
    """Protocol describing a blocking single line reader."""

    def read_line(self, prompt: str, *, initial: str = "") -> str:
        """Return the submitted line; raise :class:`ReadAborted` otherwise."""


class PromptToolkitLineEditor:
    """:class:`LineEditor` backed by a single :class:`prompt_toolkit.PromptSession`.

    The prompt label may carry ANSI colour codes. The session keeps no lexer,
    auto-suggestion or validator so input is shown verbatim and every line is
    accepted. Its history lives in memory only.
    """

    def __init__(self, completer: Optional[Completer] = None, *, session: Optional[PromptSession] = None) -> None:
        self.session = session or PromptSession(
            completer=completer,
            history=InMemoryHistory(),
            complete_while_typing=False,
        )

    def read_line(self, prompt: str, *, initial: str = "") -> str:
        try:
            return self.session.prompt(ANSI(prompt), default=initial)
        except (KeyboardInterrupt, EOFError) as exc:
            raise ReadAborted(type(exc).__name__) from exc
        except OSError as exc:
            logger.warning("Reading from the terminal failed: %s", exc)
            raise ReadAborted(str(exc)) from exc


__all__ = ["LineEditor", "PromptToolkitLineEditor", "ReadAborted"]
