"""Presentation helpers used by :mod:`advinput.cli.app`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pyfiglet
from tabulate import tabulate
from termcolor import colored


@dataclass
class BannerSections:
    """Structured representation of the demo banner content."""

    heading: str
    footer_lines: list[str]


class CLIUIHelpers:
    """Utility helpers for rendering the demo banner."""

    def render_banner(self, table_width: int = 75) -> BannerSections:
        """Return the banner text to display to the user."""

        banner_text = pyfiglet.figlet_format("AdvInput", font="slant")
        colored_banner = colored(banner_text, color="green")
        heading = tabulate([[colored_banner]], tablefmt="plain")
        footer_lines = [
            "=" * table_width,
            ("Typed prompts with tab completion").center(table_width),
            ("Press <Tab> to complete, <Ctrl-C> to skip a prompt").center(table_width),
            "=" * table_width,
        ]
        return BannerSections(heading=heading, footer_lines=footer_lines)

    def display_banner(self, echo: Callable[[str], None], *, table_width: int = 75) -> None:
        """Display the banner using the provided echo callback."""

        sections = self.render_banner(table_width=table_width)
        echo("")
        echo(sections.heading)
        for line in sections.footer_lines:
            echo(line)


__all__ = ["CLIUIHelpers", "BannerSections"]
