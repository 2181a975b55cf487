"""
エラー表示

automenu固有のエラーと予期しないエラーをRichパネルで表示します。
"""

from __future__ import annotations

import traceback

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .exceptions import (
    AutoMenuError,
    CardinalityMismatchError,
    ConfigurationError,
    ConstructionError,
    DuplicateLabelError,
    LabelNotFoundError,
    NoConstructorError,
    ParseError,
)


class ErrorHandler:
    """エラーハンドリングクラス"""

    @staticmethod
    def handle_error(error: Exception, console: Console | None = None, verbose: bool = False) -> None:
        """エラーを分類し、パネルで表示"""
        console = console or Console(stderr=True)
        if isinstance(error, AutoMenuError):
            ErrorHandler._handle_automenu_error(error, console, verbose)
        else:
            ErrorHandler._handle_unexpected_error(error, console, verbose)

    @staticmethod
    def _title_for(error: AutoMenuError) -> tuple[str, str]:
        """エラー種別ごとの (タイトル, 色)"""
        if isinstance(error, ConfigurationError):
            return "Configuration error", "yellow"
        if isinstance(error, ParseError):
            return "Input error", "yellow"
        if isinstance(error, NoConstructorError | ConstructionError):
            return "Construction error", "red"
        if isinstance(error, LabelNotFoundError | CardinalityMismatchError | DuplicateLabelError):
            return "Menu label error", "red"
        return "Error", "red"

    @staticmethod
    def _handle_automenu_error(error: AutoMenuError, console: Console, verbose: bool) -> None:
        title, color = ErrorHandler._title_for(error)

        message = Text(error.message)
        if verbose and error.details:
            message.append(f"\nDetails: {error.details}", style="dim")
        if error.suggestion:
            message.append("\nSuggestion: ", style="bold green")
            message.append(error.suggestion)

        console.print(Panel(message, title=f"[bold {color}]{title}[/bold {color}]", border_style=color, expand=False))

    @staticmethod
    def _handle_unexpected_error(error: Exception, console: Console, verbose: bool) -> None:
        message = Text(f"Unexpected error: {type(error).__name__}\nMessage: {error!s}")
        if verbose:
            trace = "".join(traceback.format_exception(type(error), error, error.__traceback__))
            message.append(f"\n{trace}", style="dim")
        else:
            message.append("\nRun again with --verbose for details", style="bold green")

        console.print(Panel(message, title="[bold red]Unexpected error[/bold red]", border_style="red", expand=False))
