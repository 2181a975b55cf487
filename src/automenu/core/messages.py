"""
多言語メッセージシステム

プロンプト・メニュー表示・エラーメッセージなど、オペレーター向けの文言を提供します。
"""

from __future__ import annotations

from typing import ClassVar

from .exceptions import ConfigurationError

DEFAULT_LANGUAGE = "es"


class MessageProvider:
    """言語別メッセージプロバイダー"""

    CATALOGUES: ClassVar[dict[str, dict[str, str]]] = {
        "es": {
            # 入力
            "invalid_value": "Valor inválido. Por favor, intente de nuevo...",
            "confirm": "¿Estás seguro? (S/N)...",
            "confirm_value": "¿Estás seguro? Valor introducido: {value} (S/N)...",
            "affirmative": "s",
            "value_prompt": "Introduzca un valor para: {name} ({type_name}): ",
            "array_size_prompt": "Introduzca el tamaño del array para: {name} ({type_name}): ",
            "negative_size": "El tamaño no puede ser negativo.",
            "creating_instance": "Creando instancia del tipo personalizado: {type_name}",
            # メニュー
            "select_option": "Selecciona una opción.",
            "exit_label": "Salir.",
            "closing": "Cerrando el programa.",
            "invalid_option": "Opción inválida.",
            "failure": "Algo salió mal...",
            # 引数入力
            "argument_number": "ARGUMENTO NÚMERO: {index}",
            "auto_fill": "Introducción automatica de parametros.",
            "keep_going": "1- Seguir introduciendo.",
            "step_back_option": "2- Retroceder.",
            "cancel_prompt": "Estas seguro?. Si no es así escribe {keyword}",
            "cancel_keyword": "DESHACER",
            "stepping_back": "Retrocediendo...",
            "invalid_choice": "Opción invalida. Vuelve a ingresarla.",
        },
        "en": {
            "invalid_value": "Invalid value. Please try again...",
            "confirm": "Are you sure? (Y/N)...",
            "confirm_value": "Are you sure? Value entered: {value} (Y/N)...",
            "affirmative": "y",
            "value_prompt": "Enter a value for: {name} ({type_name}): ",
            "array_size_prompt": "Enter the array size for: {name} ({type_name}): ",
            "negative_size": "The size cannot be negative.",
            "creating_instance": "Creating instance of custom type: {type_name}",
            "select_option": "Select an option.",
            "exit_label": "Exit.",
            "closing": "Closing the program.",
            "invalid_option": "Invalid option.",
            "failure": "Something went wrong...",
            "argument_number": "ARGUMENT NUMBER: {index}",
            "auto_fill": "Automatic parameter input.",
            "keep_going": "1- Keep entering.",
            "step_back_option": "2- Step back.",
            "cancel_prompt": "Are you sure? If not, type {keyword}",
            "cancel_keyword": "UNDO",
            "stepping_back": "Stepping back...",
            "invalid_choice": "Invalid option. Enter it again.",
        },
        "ja": {
            "invalid_value": "無効な値です。もう一度入力してください...",
            "confirm": "よろしいですか？ (Y/N)...",
            "confirm_value": "よろしいですか？ 入力値: {value} (Y/N)...",
            "affirmative": "y",
            "value_prompt": "値を入力してください: {name} ({type_name}): ",
            "array_size_prompt": "配列のサイズを入力してください: {name} ({type_name}): ",
            "negative_size": "サイズに負の値は指定できません。",
            "creating_instance": "カスタム型のインスタンスを作成中: {type_name}",
            "select_option": "オプションを選択してください。",
            "exit_label": "終了。",
            "closing": "プログラムを終了します。",
            "invalid_option": "無効なオプションです。",
            "failure": "エラーが発生しました...",
            "argument_number": "引数番号: {index}",
            "auto_fill": "パラメータの自動入力。",
            "keep_going": "1- 入力を続ける。",
            "step_back_option": "2- 戻る。",
            "cancel_prompt": "よろしいですか？ 取り消す場合は {keyword} と入力してください",
            "cancel_keyword": "UNDO",
            "stepping_back": "戻ります...",
            "invalid_choice": "無効なオプションです。もう一度入力してください。",
        },
    }

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        if language not in self.CATALOGUES:
            raise ConfigurationError.unknown_language(language, sorted(self.CATALOGUES))
        self.language = language
        self.messages = self.CATALOGUES[language]

    def get(self, key: str, **kwargs: object) -> str:
        """メッセージを取得してフォーマット

        Args:
            key: メッセージキー
            **kwargs: フォーマット引数

        Returns:
            フォーマット済みメッセージ（未知のキーはキー自体を返す）
        """
        template = self.messages.get(key, key)
        if kwargs:
            try:
                return template.format(**kwargs)
            except (KeyError, ValueError):
                return template
        return template

    @property
    def affirmative(self) -> str:
        return self.messages["affirmative"]

    @property
    def cancel_keyword(self) -> str:
        return self.messages["cancel_keyword"]


_providers: dict[str, MessageProvider] = {}


def get_message_provider(language: str = DEFAULT_LANGUAGE) -> MessageProvider:
    """言語ごとに共有されるメッセージプロバイダーを取得"""
    if language not in _providers:
        _providers[language] = MessageProvider(language)
    return _providers[language]
