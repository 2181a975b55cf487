"""
automenu カスタム例外クラス

メニュー構築・入力処理のための例外階層を定義します。
"""

from __future__ import annotations

from typing import Any


class AutoMenuError(Exception):
    """automenuの基底例外クラス"""

    def __init__(self, message: str, suggestion: str | None = None, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion
        self.details = details

    def __str__(self) -> str:
        result = self.message
        if self.details:
            result += f"\nDetails: {self.details}"
        if self.suggestion:
            result += f"\n\nSuggestion: {self.suggestion}"
        return result

    def get_user_friendly_message(self) -> str:
        """ユーザーフレンドリーなエラーメッセージを取得"""
        return str(self)


class ParseError(AutoMenuError):
    """スカラー入力の解析エラー（再入力で回復可能）"""

    def __init__(self, message: str, suggestion: str | None = None, raw_value: str | None = None):
        super().__init__(message, suggestion)
        self.raw_value = raw_value

    @classmethod
    def invalid_literal(cls, raw_value: str, type_name: str) -> ParseError:
        """型に合わない文字列が入力された場合のエラー"""
        return cls(f"'{raw_value}' is not a valid {type_name}", raw_value=raw_value)

    @classmethod
    def out_of_range(cls, raw_value: str, type_name: str, minimum: int, maximum: int) -> ParseError:
        """整数幅の範囲外の値が入力された場合のエラー"""
        return cls(
            f"'{raw_value}' is out of range for {type_name}",
            f"Enter a value between {minimum} and {maximum}",
            raw_value=raw_value,
        )


class NoConstructorError(AutoMenuError):
    """公開コンストラクタが見つからない型"""

    def __init__(self, message: str, suggestion: str | None = None, target_type: Any = None):
        super().__init__(message, suggestion)
        self.target_type = target_type

    @classmethod
    def for_type(cls, target_type: Any, reason: str | None = None) -> NoConstructorError:
        """指定された型のエラーを作成"""
        name = getattr(target_type, "__qualname__", repr(target_type))
        error = cls(
            f"No public constructor found for type: {name}",
            "Register a factory with ValueBuilder.register_factory()",
            target_type=target_type,
        )
        error.details = reason
        return error


class ConstructionError(AutoMenuError):
    """コンストラクタ・ファクトリ呼び出し中の例外"""

    def __init__(self, message: str, suggestion: str | None = None, target_type: Any = None):
        super().__init__(message, suggestion)
        self.target_type = target_type

    @classmethod
    def from_exception(cls, target_type: Any, error: BaseException) -> ConstructionError:
        """元の例外から作成（原因は呼び出し側で連鎖させる）"""
        name = getattr(target_type, "__qualname__", repr(target_type))
        result = cls(f"Failed to create instance of {name}", target_type=target_type)
        result.details = f"{type(error).__name__}: {error}"
        return result


class LabelNotFoundError(AutoMenuError):
    """名前変更の対象ラベルが存在しない"""

    def __init__(self, message: str, suggestion: str | None = None, label: Any = None):
        super().__init__(message, suggestion)
        self.label = label

    @classmethod
    def method_label(cls, label: str) -> LabelNotFoundError:
        return cls(f"Method display name not found: {label}", label=label)

    @classmethod
    def custom_label(cls, label: str) -> LabelNotFoundError:
        return cls(f"Custom option display name not found: {label}", label=label)

    @classmethod
    def option_index(cls, index: int) -> LabelNotFoundError:
        return cls(
            f"Option index out of bounds: {index}",
            "Option indexes start from zero",
            label=index,
        )


class CardinalityMismatchError(AutoMenuError):
    """一括名前変更の件数不一致"""

    def __init__(self, message: str, suggestion: str | None = None, expected: int = 0, actual: int = 0):
        super().__init__(message, suggestion)
        self.expected = expected
        self.actual = actual

    @classmethod
    def mismatch(cls, expected: int, actual: int) -> CardinalityMismatchError:
        return cls(
            "Mismatch in the number of new keys provided",
            f"Provide exactly {expected} names (got {actual})",
            expected=expected,
            actual=actual,
        )


class DuplicateLabelError(AutoMenuError):
    """ラベルの重複"""

    def __init__(self, message: str, suggestion: str | None = None, label: str | None = None):
        super().__init__(message, suggestion)
        self.label = label

    @classmethod
    def already_used(cls, label: str) -> DuplicateLabelError:
        return cls(f"Display name already in use: {label}", "Choose a unique display name", label=label)


class ConfigurationError(AutoMenuError):
    """設定エラー"""

    def __init__(self, message: str, suggestion: str | None = None, config_file: str | None = None):
        super().__init__(message, suggestion)
        self.config_file = config_file

    @classmethod
    def invalid_config(cls, config_file: str, error_details: str) -> ConfigurationError:
        """設定ファイルが無効な場合のエラー"""
        return cls(
            f"Invalid configuration file '{config_file}': {error_details}",
            "Check the [automenu] table of the configuration file",
            config_file=config_file,
        )

    @classmethod
    def invalid_value(cls, key: str, value: Any) -> ConfigurationError:
        """設定値の型が正しくない場合のエラー"""
        return cls(f"Invalid value for '{key}': {value!r}")

    @classmethod
    def unknown_language(cls, language: str, available: list[str]) -> ConfigurationError:
        return cls(
            f"Unsupported language: {language}",
            f"Available languages: {', '.join(available)}",
        )
