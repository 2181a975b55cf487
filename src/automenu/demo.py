"""デモ用のアプリケーションオブジェクト

``automenu-demo`` コマンドで使用するサンプルの対象オブジェクトです。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TextIO

from rich.console import Console
from rich.table import Table

from .core.types import Int16
from .menus.main_menu import MainMenu
from .menus.sub_menu import SubMenu
from .utils.config import Config


class Calculator:
    """四則演算を行うデモ対象"""

    def __init__(self, console: Console):
        self.console = console
        self.history: list[str] = []

    def _record(self, line: str) -> None:
        self.history.append(line)
        self.console.print(line, markup=False, highlight=False)

    def add(self, a: float, b: float) -> float:
        result = a + b
        self._record(f"{a} + {b} = {result}")
        return result

    def divide(self, dividend: float, divisor: float) -> float:
        result = dividend / divisor
        self._record(f"{dividend} / {divisor} = {result}")
        return result

    def average(self, values: list[float]) -> float:
        result = sum(values) / len(values)
        self._record(f"avg({', '.join(map(str, values))}) = {result}")
        return result

    def get_history(self) -> list[str]:
        return list(self.history)

    def clear_history(self) -> None:
        self.history.clear()


@dataclass
class Book:
    title: str
    author: str
    year: Int16


@dataclass
class Library:
    """蔵書管理のデモ対象（書籍はコンストラクタ経由で入力）"""

    console: Console
    books: list[Book] = field(default_factory=list)

    def add_book(self, book: Book) -> None:
        self.books.append(book)
        self.console.print(f"Added: {book.title}", markup=False)

    def remove_book(self, title: str) -> None:
        for book in self.books:
            if book.title == title:
                self.books.remove(book)
                return
        raise KeyError(title)

    def list_books(self) -> None:
        table = Table("Title", "Author", "Year")
        for book in self.books:
            table.add_row(book.title, book.author, str(book.year))
        self.console.print(table)


class LoopingMenu:
    """サブメニューを終了番号まで繰り返し表示するメインメニュー項目"""

    def __init__(self, menu: SubMenu, handlers: dict[str, Any] | None = None):
        self.menu = menu
        self.handlers = handlers or {}

    def _on_custom(self, label: str, index: int) -> None:
        handler = self.handlers.get(self.menu.custom_options.get(label, label))
        if handler is not None:
            handler()

    def run(self, input_stream: TextIO) -> int:
        return self.menu.run_loop(input_stream, on_custom=self._on_custom)


def build_demo_menu(console: Console, config: Config, handle_title: bool | None = None) -> MainMenu:
    """デモのメインメニューを構築"""
    calculator = Calculator(console)
    library = Library(console)

    calculator_menu = SubMenu(
        calculator,
        "Calculator",
        custom_options=["clear_history"],
        handle_title=handle_title,
        console=console,
        config=config,
    )
    calculator_menu.rename_custom_label("clear_history", "Clear history")
    library_menu = SubMenu(
        library,
        "Library",
        custom_options=["count"],
        handle_title=handle_title,
        console=console,
        config=config,
    )
    library_menu.rename_custom_label("count", "Count books")

    def count_books() -> None:
        console.print(f"{len(library.books)} book(s)", markup=False)

    menu = MainMenu(
        [
            LoopingMenu(calculator_menu, {"clear_history": calculator.clear_history}),
            LoopingMenu(library_menu, {"count": count_books}),
        ],
        "automenu demo",
        handle_title=handle_title,
        console=console,
        config=config,
    )
    menu.rename_options(["Calculator", "Library"])
    return menu
