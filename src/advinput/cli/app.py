"""Demonstration of the prompt engine."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import auto
from pathlib import Path
from typing import Optional

from termcolor import colored

from advinput.cli.ui_helpers import CLIUIHelpers
from advinput.core.engine import AdvInput
from advinput.core.enums import PromptableEnum
from advinput.core.settings import PromptSettings
from advinput.core.ui import ClickUserInterface, UserInterface

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Direction(PromptableEnum):
    North = auto()
    South = auto()
    West = auto()
    East = auto()
    Up = auto()
    Down = auto()


@dataclass
class RunConfiguration:
    """Configuration flags for a demo run."""

    directory: Optional[Path] = None
    wrap_width: Optional[int] = None
    log_dir: str = "./log"
    show_banner: bool = True


def configure_logging(log_dir: str) -> None:
    os.makedirs(log_dir, exist_ok=True)
    logging.basicConfig(
        level=logging.DEBUG,
        format=LOG_FORMAT,
        filename=os.path.join(log_dir, "app.log"),
    )


class DemoCLI:
    """Walks through the prompt types offered by :class:`AdvInput`."""

    def __init__(self, *, ui: Optional[UserInterface] = None, adv_input: Optional[AdvInput] = None, settings=None):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.ui = ui or ClickUserInterface()
        self.adv_input = adv_input or AdvInput(ui=self.ui, settings=settings)
        self.helpers = CLIUIHelpers()

    def echo(self, message: str = "") -> None:
        self.ui.echo(message)

    def display_banner(self) -> None:
        self.helpers.display_banner(self.echo)

    def ranged_index(self) -> Optional[int]:
        self.echo("---- Testing input for ranged index ---")
        number = self.adv_input.get_index_range(colored("Enter a number (1 - 6): ", "green"), 1, 6)
        if number is None:
            self.echo("No valid number")
        else:
            self.echo(f"You chose : {colored(str(number), 'blue', attrs=['bold'])}")
        return number

    def direction(self) -> Optional[Direction]:
        self.echo("---- Testing get_enum_input function ---")
        direction = self.adv_input.get_enum_input(Direction, "Enter a direction: ", True)
        if direction is None:
            self.echo("No direction selected.")
        else:
            self.echo(f"You chose: {colored(direction.display_name, 'blue', attrs=['bold'])}")
        return direction

    def json_file(self, directory: Path):
        self.echo("---- Testing get_json_file_input function ---")
        result = self.adv_input.get_json_file_input("Enter a file name: ", directory)
        if result.exists:
            self.echo(f"Using existing file {result.path}")
        else:
            self.echo(f"{result.path} does not exist yet and can be created")
        return result


def main(
    config: Optional[RunConfiguration] = None,
    *,
    ui: Optional[UserInterface] = None,
    cli: Optional[DemoCLI] = None,
) -> None:
    """Entrypoint of the ``advinput-demo`` command."""

    configuration = config or RunConfiguration()
    configure_logging(configuration.log_dir)

    if cli is None:
        settings = PromptSettings()
        if configuration.wrap_width is not None:
            settings = PromptSettings(wrap_width=configuration.wrap_width)
        cli = DemoCLI(ui=ui, settings=settings)

    if configuration.show_banner:
        cli.display_banner()
    cli.ranged_index()
    cli.direction()
    if configuration.directory is not None:
        cli.json_file(configuration.directory)


__all__ = ["DemoCLI", "Direction", "RunConfiguration", "configure_logging", "main"]
