"""Text output abstractions used by the prompt engine."""

from __future__ import annotations

from typing import Protocol

import click


class UserInterface(Protocol):
    """Protocol describing the console output operations the engine needs."""

    def echo(self, message: str = "", *, nl: bool = True, err: bool = False) -> None:
        """Write a message to the console using Click semantics."""


class ClickUserInterface:
    """Default :mod:`click`-backed implementation of :class:`UserInterface`."""

    def echo(self, message: str = "", *, nl: bool = True, err: bool = False) -> None:
        click.echo(message, nl=nl, err=err)


__all__ = ["UserInterface", "ClickUserInterface"]
