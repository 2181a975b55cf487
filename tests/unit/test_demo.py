"""
デモ対象のテスト
"""

import pytest
from automenu.demo import Book, Calculator, Library, build_demo_menu

from tests.utils.input_helpers import make_input


class TestDemoObjects:
    def test_calculator_records_history(self, console, output):
        calculator = Calculator(console)

        calculator.divide(1.0, 4.0)
        calculator.average([1.0, 2.0])

        assert calculator.get_history() == ["1.0 / 4.0 = 0.25", "avg(1.0, 2.0) = 1.5"]
        assert "1.0 / 4.0 = 0.25" in output.getvalue()

    def test_library_remove_missing_book(self, console):
        library = Library(console)

        with pytest.raises(KeyError):
            library.remove_book("Missing")

    def test_library_list_books(self, console, output):
        library = Library(console, [Book("Dune", "Herbert", 1965)])

        library.list_books()

        assert "Dune" in output.getvalue()
        assert "1965" in output.getvalue()


class TestDemoMenu:
    """デモメニューの構成テスト"""

    def test_structure(self, console, config):
        menu = build_demo_menu(console, config)

        assert menu.labels == ["Calculator", "Library"]
        calculator_menu, library_menu = (target.menu for target in menu.targets)
        assert list(calculator_menu.options.methods) == ["add", "average", "divide"]
        assert calculator_menu.exit_index == 5
        assert list(library_menu.options.methods) == ["add_book", "list_books", "remove_book"]
        assert library_menu.custom_options == {"Count books": "count"}

    def test_add_book_then_count(self, console, config, output):
        """書籍をコンストラクタ経由で追加して件数を表示することをテスト"""
        menu = build_demo_menu(console, config, handle_title=False)
        lines = [
            "2",  # Library
            "1",  # add_book
            "1",
            "ok",
            "Dune",
            "s",
            "Frank Herbert",
            "s",
            "1965",
            "s",
            "4",  # Count books
            "5",  # 終了
            "3",
        ]

        assert menu.run(make_input(*lines)) == 0

        assert "Creando instancia del tipo personalizado: Book" in output.getvalue()
        assert "Added: Dune" in output.getvalue()
        assert "1 book(s)" in output.getvalue()

    def test_clear_history_custom_option(self, console, config):
        menu = build_demo_menu(console, config, handle_title=False)
        calculator = menu.targets[0].menu.target
        calculator.history.append("x")

        menu.run(make_input("1", "4", "5", "3"))

        assert calculator.get_history() == []

    def test_division_by_zero_is_reported(self, console, config, output):
        menu = build_demo_menu(console, config, handle_title=False)
        lines = ["1", "3", "1", "ok", "1", "s", "1", "ok", "0", "s", "5", "3"]

        menu.run(make_input(*lines))

        assert "Algo salió mal..." in output.getvalue()
