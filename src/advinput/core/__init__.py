"""Prompt engine, completion strategies and the codecs they rely on."""

from .completion import CompletionPair, CompletionStrategy, StrategyCompleter, StrategyKind
from .editor import LineEditor, PromptToolkitLineEditor, ReadAborted
from .engine import AdvInput, FileSelectionResult
from .enums import Promptable, PromptableEnum
from .files import FileCatalog
from .settings import PromptSettings
from .ui import ClickUserInterface, UserInterface

__all__ = [
    "AdvInput",
    "ClickUserInterface",
    "CompletionPair",
    "CompletionStrategy",
    "FileCatalog",
    "FileSelectionResult",
    "LineEditor",
    "Promptable",
    "PromptableEnum",
    "PromptSettings",
    "PromptToolkitLineEditor",
    "ReadAborted",
    "StrategyCompleter",
    "StrategyKind",
    "UserInterface",
]
