"""
UI コンポーネント

タイトル枠の描画と画面クリアを提供します。
"""

from .screen import clear_screen, format_framed_title, print_framed_title

__all__ = ["clear_screen", "format_framed_title", "print_framed_title"]
