"""
設定管理ユーティリティ

TOML設定ファイル、環境変数、デフォルト値の管理を行います。
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, ClassVar

from ..core.exceptions import ConfigurationError
from ..core.messages import MessageProvider, get_message_provider

CONFIG_FILE_NAME = "automenu.toml"
ENV_PREFIX = "AUTOMENU_"


class Config:
    """設定管理クラス

    優先順位:
    1. 呼び出し側の引数（コンストラクタ引数など）
    2. 環境変数 (AUTOMENU_*)
    3. プロジェクト設定ファイル (automenu.toml の [automenu] テーブル)
    4. デフォルト値
    """

    DEFAULT_CONFIG: ClassVar[dict[str, Any]] = {
        "language": "es",
        "title_width": 22,
        "title_height": 7,
        "handle_title": True,
        "clear_screen": True,
        "clear_fallback_lines": 5,
        "log_level": "WARNING",
        "log_file": "",
    }

    def __init__(
        self,
        project_root: Path | None = None,
        config_file: Path | None = None,
        overrides: dict[str, Any] | None = None,
    ):
        """設定を初期化

        Args:
            project_root: プロジェクトルートディレクトリ（Noneの場合は現在のディレクトリ）
            config_file: 設定ファイルのパス（Noneの場合は project_root/automenu.toml）
            overrides: 最優先で適用する設定値
        """
        self.project_root = project_root or Path.cwd()
        self.config_file = config_file or self.project_root / CONFIG_FILE_NAME
        self._config = self._load_config()
        self._config.update(overrides or {})
        self.validate()

    def _load_config(self) -> dict[str, Any]:
        """設定を読み込み、優先順位に従ってマージ"""
        config = self.DEFAULT_CONFIG.copy()

        if self.config_file.exists():
            try:
                with open(self.config_file, "rb") as f:
                    project_config = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigurationError.invalid_config(str(self.config_file), str(e)) from e

            section = project_config.get("automenu", {})
            if not isinstance(section, dict):
                raise ConfigurationError.invalid_config(str(self.config_file), "[automenu] must be a table")
            config.update(section)

        config.update(self._load_env_config())
        return config

    def _load_env_config(self) -> dict[str, Any]:
        """環境変数から設定を読み込み"""
        env_config: dict[str, Any] = {}

        for key, default_value in self.DEFAULT_CONFIG.items():
            env_key = f"{ENV_PREFIX}{key.upper()}"
            env_value = os.getenv(env_key)
            if env_value is None:
                continue

            # 型変換（bool は int より先に判定）
            if isinstance(default_value, bool):
                env_config[key] = env_value.lower() in ("true", "1", "yes", "on")
            elif isinstance(default_value, int):
                try:
                    env_config[key] = int(env_value)
                except ValueError as e:
                    raise ConfigurationError(
                        f"Invalid value for environment variable {env_key}: {env_value}", "Use an integer value"
                    ) from e
            else:
                env_config[key] = env_value

        return env_config

    def validate(self) -> None:
        """設定の妥当性をチェック"""
        for key in ("title_width", "title_height", "clear_fallback_lines"):
            value = self._config.get(key)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigurationError.invalid_value(key, value)

        for key in ("handle_title", "clear_screen"):
            if not isinstance(self._config.get(key), bool):
                raise ConfigurationError.invalid_value(key, self._config.get(key))

        language = self._config.get("language")
        if language not in MessageProvider.CATALOGUES:
            raise ConfigurationError.unknown_language(str(language), sorted(MessageProvider.CATALOGUES))

    def get(self, key: str, default: Any = None) -> Any:
        """設定値を取得

        Args:
            key: 設定キー
            default: デフォルト値

        Returns:
            設定値
        """
        return self._config.get(key, default)

    def get_int(self, key: str) -> int:
        return int(self._config[key])

    def get_bool(self, key: str) -> bool:
        return bool(self._config[key])

    def get_log_file(self) -> Path | None:
        """ログファイルのパスを取得（未設定ならNone）"""
        value = self.get("log_file")
        if not value:
            return None
        path = Path(value)
        if not path.is_absolute():
            path = self.project_root / path
        return path

    def messages(self) -> MessageProvider:
        """設定言語のメッセージプロバイダーを取得"""
        return get_message_provider(self.get("language"))

    def __getitem__(self, key: str) -> Any:
        """辞書風アクセスをサポート"""
        return self.get(key)

    def __contains__(self, key: str) -> bool:
        """in演算子をサポート"""
        return key in self._config
