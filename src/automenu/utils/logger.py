"""
ログ設定ユーティリティ

Richを使用したログ出力を提供します。
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

# 診断用の出力はメニュー出力と分けて標準エラーへ
console = Console(stderr=True)

LOGGER_NAME = "automenu"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    verbose: bool = False,
    console_handler_console: Optional[Console] = None,
) -> logging.Logger:
    """ログ設定をセットアップ

    Args:
        level: ログレベル
        log_file: ログファイルパス（Noneの場合はファイル出力なし）
        verbose: 詳細ログを有効にするか
        console_handler_console: ログ出力先のコンソール（省略時は標準エラー）

    Returns:
        設定されたロガー
    """
    if verbose:
        level = "DEBUG"
        # Rich tracebackを有効化
        install(show_locals=True, console=console)

    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    # 既存のハンドラーをクリア
    logger.handlers.clear()

    # コンソールハンドラー（Rich使用）
    console_handler = RichHandler(
        console=console_handler_console or console,
        show_time=True,
        show_path=verbose,
        markup=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(console_handler)

    # ファイルハンドラー（指定された場合）
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # ファイルには詳細ログを出力
        file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """ロガーを取得

    Args:
        name: ロガー名

    Returns:
        ロガーインスタンス
    """
    return logging.getLogger(name)
