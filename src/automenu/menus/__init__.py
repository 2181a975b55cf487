"""
メニュー

サブメニュー（メソッド一覧）とメインメニュー（サブ対象一覧）を提供します。
"""

from .main_menu import MainMenu, RootMenuEntry
from .options import MenuEntry, MenuOptionSet
from .sub_menu import SubMenu

__all__ = ["MainMenu", "MenuEntry", "MenuOptionSet", "RootMenuEntry", "SubMenu"]
