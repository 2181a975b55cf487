"""メインメニュー

複数のサブ対象（``run(input_stream)`` を持つオブジェクト）を番号付きで表示し、
終了番号が選択されるまで選択された対象の ``run`` を呼び出します。
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol, TextIO, runtime_checkable

from rich.console import Console

from ..core.exceptions import CardinalityMismatchError, DuplicateLabelError, LabelNotFoundError
from ..input.scalar_prompt import ScalarPrompt
from ..ui.screen import SEPARATOR, clear_screen, emit, print_framed_title
from ..utils.config import Config

logger = logging.getLogger(__name__)


@runtime_checkable
class Runnable(Protocol):
    """メインメニューから起動できるオブジェクト"""

    def run(self, input_stream: TextIO) -> Any: ...


@dataclass
class RootMenuEntry:
    """メインメニュー項目"""

    label: str
    target: Any


class MainMenu:
    """サブ対象を選択するメインメニュー"""

    def __init__(
        self,
        targets: Sequence[Any],
        name: str = "Main menu",
        pattern: str = "Option ",
        handle_title: bool | None = None,
        *,
        console: Console | None = None,
        config: Config | None = None,
    ):
        """メインメニューを初期化

        Args:
            targets: ``run(input_stream)`` を持つオブジェクトのリスト
            name: メニュータイトル
            pattern: 項目の表示名パターン（末尾に1始まりの番号が付く）
            handle_title: タイトルを表示するか（Noneの場合は設定値）
            console: Rich Console インスタンス
            config: 設定
        """
        self.config = config or Config()
        self.console = console or Console()
        self.messages = self.config.messages()
        self.name = name
        self.pattern = pattern
        self.width = self.config.get_int("title_width")
        self.height = self.config.get_int("title_height")
        self.handle_title = self.config.get_bool("handle_title") if handle_title is None else handle_title
        self.entries: list[RootMenuEntry] = []
        self.targets = targets

    @property
    def targets(self) -> list[Any]:
        return [entry.target for entry in self.entries]

    @targets.setter
    def targets(self, targets: Sequence[Any]) -> None:
        self.entries = [RootMenuEntry(f"{self.pattern}{i}", target) for i, target in enumerate(targets, start=1)]

    @property
    def labels(self) -> list[str]:
        return [entry.label for entry in self.entries]

    @property
    def exit_index(self) -> int:
        return len(self.entries) + 1

    # 表示名の変更

    def rename_option(self, index: int, new_name: str) -> None:
        """項目の表示名を変更（index は0始まり）

        Raises:
            LabelNotFoundError: index が範囲外の場合
        """
        if not 0 <= index < len(self.entries):
            raise LabelNotFoundError.option_index(index)
        if new_name in self.labels and self.entries[index].label != new_name:
            raise DuplicateLabelError.already_used(new_name)
        self.entries[index].label = new_name

    def rename_options(self, new_names: Sequence[str]) -> None:
        """全項目の表示名を表示順に一括変更

        Raises:
            CardinalityMismatchError: 件数が項目数と異なる場合
        """
        if len(new_names) != len(self.entries):
            raise CardinalityMismatchError.mismatch(len(self.entries), len(new_names))
        if len(set(new_names)) != len(new_names):
            duplicate = next(name for name in new_names if list(new_names).count(name) > 1)
            raise DuplicateLabelError.already_used(duplicate)
        for entry, name in zip(self.entries, new_names, strict=True):
            entry.label = name

    # 実行

    def show_menu(self) -> None:
        if self.handle_title:
            print_framed_title(self.console, self.name, self.width, self.height)
        for i, entry in enumerate(self.entries, start=1):
            emit(self.console, f"{i}- {entry.label}.")
        emit(self.console, f"{self.exit_index}- {self.messages.get('exit_label')}")
        emit(self.console, SEPARATOR)

    def _run_target(self, index: int, input_stream: TextIO) -> None:
        entry = self.entries[index]
        try:
            entry.target.run(input_stream)
        except EOFError:
            raise
        except Exception:
            logger.exception("'%s' の実行に失敗しました", entry.label)
            emit(self.console, self.messages.get("failure"))

    def run(self, input_stream: TextIO | None = None) -> int:
        """終了番号が選択されるまでメニューを繰り返す

        Returns:
            常に 0
        """
        stream = input_stream or sys.stdin
        prompt = ScalarPrompt(stream, self.console, self.messages)
        while True:
            self.show_menu()
            option = prompt.next_int(self.messages.get("select_option"))
            clear_screen(
                self.console,
                self.config.get_bool("clear_screen"),
                self.config.get_int("clear_fallback_lines"),
            )
            if 0 < option < self.exit_index:
                self._run_target(option - 1, stream)
            elif option == self.exit_index:
                emit(self.console, self.messages.get("closing"))
                return 0
            else:
                emit(self.console, self.messages.get("invalid_option"))
