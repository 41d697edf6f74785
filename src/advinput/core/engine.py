"""Interactive prompts that read one typed value per call."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Type

from termcolor import colored

from advinput.core import enums as enum_codec
from advinput.core import parsers
from advinput.core.completion import CompletionStrategy, StrategyCompleter
from advinput.core.editor import LineEditor, PromptToolkitLineEditor, ReadAborted
from advinput.core.enums import P
from advinput.core.files import FileCatalog, default_file
from advinput.core.settings import PromptSettings
from advinput.core.ui import ClickUserInterface, UserInterface


@dataclass
class FileSelectionResult:
    """Outcome of :meth:`AdvInput.get_json_file_input`.

    ``path`` is always usable. ``exists`` tells whether it names an existing
    file; when it does not, the caller may create the file there.
    """

    path: Path
    exists: bool

    @property
    def is_ok(self) -> bool:
        return self.exists


class AdvInput:
    """Owns one line editing session and offers typed prompts on top of it.

    Not safe for concurrent use: the active completion strategy is swapped
    right before every read.
    """

    def __init__(
        self,
        *,
        editor: Optional[LineEditor] = None,
        ui: Optional[UserInterface] = None,
        settings: Optional[PromptSettings] = None,
        catalog: Optional[FileCatalog] = None,
    ) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)
        self.settings = settings or PromptSettings()
        self.ui = ui or ClickUserInterface()
        self.catalog = catalog or FileCatalog(
            self.settings.file_extension, error_color=self.settings.error_color
        )
        self._strategy = CompletionStrategy.none()
        self.editor = editor or PromptToolkitLineEditor(StrategyCompleter(lambda: self._strategy))

    @property
    def strategy(self) -> CompletionStrategy:
        return self._strategy

    def reset_helper(self) -> None:
        self._strategy = CompletionStrategy.none()

    def install_helper(self, strategy: CompletionStrategy) -> None:
        self._strategy = strategy

    def _readline(self, prompt: Any, initial: str = "") -> Optional[str]:
        try:
            return self.editor.read_line(str(prompt), initial=initial)
        except ReadAborted as exc:
            self.logger.debug("Read aborted: %s", exc)
        except (KeyboardInterrupt, EOFError) as exc:
            self.logger.debug("Read aborted: %s", type(exc).__name__)
        return None

    def _warn(self, message: str) -> None:
        self.ui.echo(colored(message, self.settings.warning_color), err=True)

    ###-------------------------------------------------------------###
    ###                     Numbers and text                        ###
    ###-------------------------------------------------------------###

    def get_index(self, prompt: Any) -> Optional[int]:
        """Return a non-negative integer, or ``None``."""

        return self.get_index_initial(prompt, 0)

    def get_index_initial(self, prompt: Any, initial: int) -> Optional[int]:
        """Like :meth:`get_index`, with the input pre-filled with ``initial``."""

        self.reset_helper()
        line = self._readline(prompt, str(initial))
        if line is None:
            return None
        return parsers.parse_index(line.strip())

    def get_index_range(self, prompt: Any, low: int, high: int) -> Optional[int]:
        """Return an integer in ``[low, high]``; anything else yields ``None``."""

        self.reset_helper()
        line = self._readline(prompt, "0")
        if line is None:
            return None
        return parsers.parse_index_range(line.strip(), low, high)

    def get_f64(self, prompt: Any) -> Optional[float]:
        return self.get_f64_initial(prompt, 0.0)

    def get_f64_initial(self, prompt: Any, initial: float) -> Optional[float]:
        self.reset_helper()
        line = self._readline(prompt, parsers.format_float(initial))
        if line is None:
            return None
        return parsers.parse_float(line.strip())

    def get_f64_range(self, prompt: Any, low: float, high: float) -> Optional[float]:
        self.reset_helper()
        line = self._readline(prompt, parsers.format_float(0.0))
        if line is None:
            return None
        return parsers.parse_float_range(line.strip(), low, high)

    def get_string(self, prompt: Any) -> Optional[str]:
        return self.get_string_initial(prompt, "")

    def get_string_initial(self, prompt: Any, initial: str) -> Optional[str]:
        """Return the trimmed line, or ``None`` if the read was aborted."""

        self.reset_helper()
        line = self._readline(prompt, initial)
        if line is None:
            return None
        return line.strip()

    ###-------------------------------------------------------------###
    ###                     Enumerations                            ###
    ###-------------------------------------------------------------###

    def get_enum_input(self, enum_type: Type[P], prompt: Any, print_variants: bool = False) -> Optional[P]:
        return self.get_enum_input_initial_default(enum_type, prompt, None, print_variants, None)

    def get_enum_input_default(
        self,
        enum_type: Type[P],
        prompt: Any,
        print_variants: bool,
        default: Optional[P],
    ) -> Optional[P]:
        return self.get_enum_input_initial_default(enum_type, prompt, None, print_variants, default)

    def get_enum_input_initial(
        self,
        enum_type: Type[P],
        prompt: Any,
        initial: Optional[P],
        print_variants: bool,
    ) -> Optional[P]:
        return self.get_enum_input_initial_default(enum_type, prompt, initial, print_variants, None)

    def get_enum_input_initial_default(
        self,
        enum_type: Type[P],
        prompt: Any,
        initial: Optional[P],
        print_variants: bool,
        default: Optional[P],
    ) -> Optional[P]:
        """Prompt for a member of ``enum_type`` with tab completion.

        With ``print_variants`` the display names are listed first and the
        default, if any, is tagged. Empty input and aborted reads return
        ``default``; text that matches no member returns ``None``.
        """

        variants = enum_codec.variants_as_strings(enum_type)
        if print_variants:
            self.print_variants(variants, default)
        self.install_helper(CompletionStrategy.enum_match(variants))

        init = enum_codec.display_name(initial) if initial is not None else ""
        line = self._readline(prompt, init)
        if line is None:
            return default
        trimmed = line.strip()
        if not trimmed:
            return default
        value = enum_codec.from_input_str(enum_type, trimmed)
        if value is None:
            self.logger.debug("No %s matches %r", getattr(enum_type, "__name__", enum_type), trimmed)
        return value

    def print_variants(self, variants, default: Optional[Any] = None) -> None:
        default_name = enum_codec.display_name(default) if default is not None else None
        text = enum_codec.render_variant_list(
            variants, default_name=default_name, marker=self.settings.default_marker
        )
        lines = enum_codec.wrap_variants(text, self.settings.wrap_width)
        self.ui.echo(colored("\n".join(lines), self.settings.variant_color))

    ###-------------------------------------------------------------###
    ###                     Files                                   ###
    ###-------------------------------------------------------------###

    def get_json_file_input(self, prompt: Any, directory) -> FileSelectionResult:
        """Prompt for a file name, offering the matching files of ``directory``.

        Returns the typed path with ``exists`` set accordingly. Empty input or
        an aborted read falls back to the configured default file inside
        ``directory``.
        """

        directory = Path(directory)
        files = self.catalog.scan(directory, echo=lambda message: self.ui.echo(message, err=True))
        if not files:
            self._warn(f"No .{self.catalog.extension} files found, just enter name for a new one")
        self.install_helper(CompletionStrategy.file_match(files))
        if files:
            self.ui.echo(f"available files: {colored(', '.join(files), self.settings.file_color)}")

        line = self._readline(prompt)
        if line is None:
            return self._default_file(directory)
        trimmed = line.strip()
        if not trimmed:
            return self._default_file(directory)
        path = Path(trimmed)
        return FileSelectionResult(path=path, exists=path.exists())

    def _default_file(self, directory: Path) -> FileSelectionResult:
        self._warn("Problem with given filename. John Doe will be used.")
        path = default_file(directory, self.settings.fallback_filename)
        self.logger.info("Falling back to %s", path)
        return FileSelectionResult(path=path, exists=False)


__all__ = ["AdvInput", "FileSelectionResult"]
