"""
automenu: オブジェクトの公開メソッドから対話的なコンソールメニューを自動生成するライブラリ

対象オブジェクトのメソッドとコンストラクタを実行時に調べ、番号付きのASCIIメニューを作成し、
型に応じた引数入力を行ってから選択された操作を呼び出します。
"""

__version__ = "0.1.0"

# パッケージレベルのエクスポート
from .core.exceptions import (
    AutoMenuError,
    CardinalityMismatchError,
    ConfigurationError,
    ConstructionError,
    DuplicateLabelError,
    LabelNotFoundError,
    NoConstructorError,
    ParseError,
)
from .core.operations import Operation, ParameterSpec
from .input.scalar_prompt import ScalarPrompt
from .input.value_builder import ValueBuilder
from .menus.main_menu import MainMenu
from .menus.options import MenuOptionSet
from .menus.sub_menu import SubMenu
from .utils.config import Config

__all__ = [
    "AutoMenuError",
    "CardinalityMismatchError",
    "Config",
    "ConfigurationError",
    "ConstructionError",
    "DuplicateLabelError",
    "LabelNotFoundError",
    "MainMenu",
    "MenuOptionSet",
    "NoConstructorError",
    "Operation",
    "ParameterSpec",
    "ParseError",
    "ScalarPrompt",
    "SubMenu",
    "ValueBuilder",
]
