"""Discovery of candidate files for the file-selection prompt."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, List, Optional, Union

from termcolor import colored

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]
EchoFunc = Callable[[str], None]


class FileCatalog:
    """Lists the files of a single directory that carry a given extension."""

    def __init__(self, extension: str = "json", *, error_color: str = "red") -> None:
        self.extension = extension
        self.error_color = error_color

    def matches(self, path: Path) -> bool:
        """Return ``True`` for regular files whose extension equals the filter."""

        if path.suffix != f".{self.extension}":
            return False
        try:
            return path.is_file()
        except OSError:
            return False

    def scan(self, directory: PathLike, *, echo: Optional[EchoFunc] = None) -> List[str]:
        """Return the matching file names directly inside ``directory``.

        A directory that cannot be read is reported and yields an empty list.
        """

        directory = Path(directory)
        names: List[str] = []
        try:
            for entry in directory.iterdir():
                if not self.matches(entry):
                    continue
                try:
                    entry.name.encode("utf-8")
                except UnicodeEncodeError:
                    logger.debug("Skipping undecodable file name in %s", directory)
                    continue
                names.append(entry.name)
        except OSError as exc:
            logger.error("Failed to read directory %s: %s", directory, exc)
            if echo is not None:
                echo(f"{colored('Error', self.error_color)}: Failed to read directory: {exc}")
            return []
        return sorted(names)


def read_json_files_in_dir(directory: PathLike, *, echo: Optional[EchoFunc] = None) -> List[str]:
    """Return the ``.json`` file names directly inside ``directory``."""

    return FileCatalog("json").scan(directory, echo=echo)


def default_file(directory: PathLike, filename: str = "JohnDoe.json") -> Path:
    return Path(directory) / filename


__all__ = ["FileCatalog", "default_file", "read_json_files_in_dir"]
