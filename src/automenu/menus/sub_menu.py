"""サブメニュー

1つの対象オブジェクトの公開メソッドを番号付きメニューとして表示し、
選択されたメソッドを引数を入力させてから呼び出します。
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable
from typing import Any, TextIO

from rich.console import Console

from ..core.operations import Operation
from ..input.value_builder import ValueBuilder
from ..ui.screen import SEPARATOR, clear_screen, emit, print_framed_title
from ..utils.config import Config
from .options import MenuOptionSet

logger = logging.getLogger(__name__)

CustomHandler = Callable[[str, int], Any]

KEEP_GOING = 1
STEP_BACK = 2


class SubMenu:
    """対象オブジェクトのメソッドメニュー

    ``run`` は1回の選択ごとに戻り、選択番号を返します。
    カスタムオプションの番号は呼び出し側で処理します。
    """

    def __init__(
        self,
        target: Any,
        name: str = "SubMenu",
        custom_options: Iterable[str] | None = None,
        hidden_options: Iterable[str] | None = None,
        handle_title: bool | None = None,
        *,
        console: Console | None = None,
        config: Config | None = None,
    ):
        """サブメニューを初期化

        Args:
            target: メソッドを公開するオブジェクト
            name: メニュータイトル
            custom_options: カスタムオプション名
            hidden_options: 表示しないメソッド名
            handle_title: タイトルを表示するか（Noneの場合は設定値）
            console: Rich Console インスタンス（省略時は新規作成）
            config: 設定（省略時は既定の読み込み）
        """
        self.config = config or Config()
        self.console = console or Console()
        self.messages = self.config.messages()
        self.name = name
        self.width = self.config.get_int("title_width")
        self.height = self.config.get_int("title_height")
        self.handle_title = self.config.get_bool("handle_title") if handle_title is None else handle_title
        self.options = MenuOptionSet()
        self.options.set_custom_options(custom_options)
        self._hidden_options = list(hidden_options or ())
        self.options.discover(target, self._hidden_options)
        self.factories: dict[type, list[Callable[..., Any]]] = {}

    # 対象・オプションの再設定

    @property
    def target(self) -> Any:
        return self.options.target

    @target.setter
    def target(self, value: Any) -> None:
        self.options.discover(value, self._hidden_options)

    @property
    def custom_options(self) -> dict[str, str]:
        return self.options.custom_options

    @custom_options.setter
    def custom_options(self, names: Iterable[str] | None) -> None:
        """カスタムオプションを置き換え、同名のメソッドが消えるようメソッドを再検出"""
        self.options.set_custom_options(names)
        self.refresh()

    @property
    def exit_index(self) -> int:
        return self.options.exit_index

    def refresh(self) -> None:
        """対象オブジェクトのメソッドを再検出（カスタムオプションとの衝突も再判定）"""
        self.options.discover(self.options.target, self._hidden_options)

    def register_factory(self, target_type: type, factory: Callable[..., Any]) -> None:
        """引数入力時に使用するファクトリを登録"""
        self.factories.setdefault(target_type, []).append(factory)

    # 表示名の変更

    def rename_method_label(self, current: str, new: str) -> None:
        self.options.rename_method_label(current, new)

    def rename_custom_label(self, current: str, new: str) -> None:
        self.options.rename_custom_label(current, new)

    def rename_method_labels(self, new_labels: dict[str, str]) -> None:
        self.options.rename_method_labels(new_labels)

    def rename_custom_labels(self, new_labels: list[str]) -> None:
        self.options.rename_custom_labels(new_labels)

    # 実行

    def _new_builder(self, input_stream: TextIO) -> ValueBuilder:
        builder = ValueBuilder(input_stream, self.console, self.messages)
        for target_type, factories in self.factories.items():
            for factory in factories:
                builder.register_factory(target_type, factory)
        return builder

    def show_menu(self) -> None:
        """タイトルとメニュー項目を表示"""
        if self.handle_title:
            print_framed_title(self.console, self.name, self.width, self.height)
        for entry in self.options.entries():
            emit(self.console, f"{entry.index}- {entry.label}.")
        emit(self.console, f"{self.exit_index}- {self.messages.get('exit_label')}")
        emit(self.console, SEPARATOR)

    def _print_argument_banner(self, index: int) -> None:
        emit(self.console, SEPARATOR)
        emit(self.console, self.messages.get("argument_number", index=index))
        emit(self.console, SEPARATOR)
        emit(self.console, self.messages.get("auto_fill"))
        emit(self.console, self.messages.get("keep_going"))
        emit(self.console, self.messages.get("step_back_option"))
        emit(self.console, SEPARATOR)

    def ask_parameters(self, operation: Operation, builder: ValueBuilder) -> list[Any]:
        """操作の引数を順番に入力させる

        各引数で「入力を続ける」か「1つ前に戻る」を選択できます。
        入力を続ける前の確認で取り消しキーワードを入力すると1つ前に戻ります。

        Returns:
            引数の順序どおりの値リスト
        """
        parameters = operation.parameters
        values: list[Any] = [None] * len(parameters)
        cancel_keyword = self.messages.cancel_keyword
        select_prompt = self.messages.get("select_option")

        i = 0
        while i < len(parameters):
            self._print_argument_banner(i + 1)
            choice = builder.next_int(select_prompt)

            if choice == KEEP_GOING:
                answer = builder.next_line(self.messages.get("cancel_prompt", keyword=cancel_keyword))
                if answer.strip() == cancel_keyword:
                    emit(self.console, self.messages.get("stepping_back"))
                    i = max(i - 1, 0)
                    continue
                param = parameters[i]
                values[i] = builder.build_value(param.annotation, param.name)
                i += 1
            elif choice == STEP_BACK:
                emit(self.console, self.messages.get("stepping_back"))
                i = max(i - 1, 0)
            else:
                emit(self.console, self.messages.get("invalid_choice"))
        return values

    def invoke(self, entry_index: int, builder: ValueBuilder) -> Any:
        """番号のメソッドを引数入力後に呼び出す"""
        entry = self.options.resolve(entry_index)
        if entry is None or entry.is_custom:
            raise IndexError(f"not a method option: {entry_index}")
        values = self.ask_parameters(entry.operation, builder)
        return entry.operation.call(values)

    def run(self, input_stream: TextIO | None = None) -> int:
        """メニューを1回表示して選択を処理

        Args:
            input_stream: 入力ストリーム（省略時は標準入力）

        Returns:
            入力された選択番号（カスタムオプションの判定は呼び出し側）
        """
        builder = self._new_builder(input_stream or sys.stdin)
        self.show_menu()

        option = builder.next_int(self.messages.get("select_option"))
        clear_screen(
            self.console,
            self.config.get_bool("clear_screen"),
            self.config.get_int("clear_fallback_lines"),
        )

        if option == self.exit_index:
            emit(self.console, self.messages.get("closing"))
        elif self.options.is_method_index(option):
            try:
                self.invoke(option, builder)
            except EOFError:
                raise
            except Exception:
                logger.exception("メニュー項目 %d の実行に失敗しました (%s)", option, self.name)
                emit(self.console, self.messages.get("failure"))
        elif option < 1 or option > self.exit_index:
            emit(self.console, self.messages.get("invalid_option"))
        return option

    def run_loop(self, input_stream: TextIO | None = None, on_custom: CustomHandler | None = None) -> int:
        """終了番号が選択されるまで ``run`` を繰り返す

        Args:
            input_stream: 入力ストリーム
            on_custom: カスタムオプション選択時に (ラベル, 番号) で呼ばれる関数

        Returns:
            終了番号
        """
        stream = input_stream or sys.stdin
        while True:
            option = self.run(stream)
            if option == self.exit_index:
                return option
            label = self.options.custom_label_for(option)
            if label is not None and on_custom is not None:
                on_custom(label, option)
