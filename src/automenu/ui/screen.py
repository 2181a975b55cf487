"""画面出力ユーティリティ

タイトル枠の描画と画面クリアを提供します。
"""

from __future__ import annotations

from rich.console import Console

DEFAULT_TITLE_WIDTH = 22
DEFAULT_TITLE_HEIGHT = 7
SEPARATOR = "=" * 26


def emit(console: Console, text: str = "", end: str = "\n") -> None:
    """マークアップ・折り返しなしでそのまま出力"""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True, end=end)


def format_framed_title(name: str, width: int = DEFAULT_TITLE_WIDTH, height: int = DEFAULT_TITLE_HEIGHT) -> list[str]:
    """タイトル枠の行リストを作成

    Args:
        name: タイトル文字列
        width: タイトル文字列を除いた枠の幅
        height: 枠内の空行数

    Returns:
        出力する行のリスト
    """
    total_width = width + len(name)
    if total_width % 2 != 0:
        total_width += 1
    border = "=" * total_width
    blank = "|" + " " * (total_width - 2) + "|"
    center_y = height // 2

    padding, extra = divmod(total_width - len(name) - 2, 2)
    lines = [border]
    for y in range(height):
        if y == center_y:
            lines.append("|" + " " * padding + name + " " * (padding + extra) + "|")
        lines.append(blank)
    lines.append(border)
    return lines


def print_framed_title(
    console: Console, name: str, width: int = DEFAULT_TITLE_WIDTH, height: int = DEFAULT_TITLE_HEIGHT
) -> None:
    """タイトル枠を出力"""
    for line in format_framed_title(name, width, height):
        emit(console, line)


def clear_screen(console: Console, enabled: bool = True, fallback_lines: int = 5) -> None:
    """画面をクリア

    端末ではANSIエスケープでクリアし、IDEやファイル出力では空行で代用します。
    """
    if not enabled:
        return
    if console.is_terminal:
        console.clear()
        return
    emit(console, "\n" * fallback_lines)
