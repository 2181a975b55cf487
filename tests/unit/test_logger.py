"""
ログ設定ユーティリティのユニットテスト
"""

import logging
from io import StringIO
from pathlib import Path

import pytest
from automenu.utils.logger import LOGGER_NAME, get_logger, setup_logging
from rich.console import Console
from rich.logging import RichHandler


@pytest.fixture(autouse=True)
def reset_logger():
    """テストごとに automenu ロガーのハンドラーを元に戻す"""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestSetupLogging:
    """setup_logging 関数のテスト"""

    def test_setup_logging_default(self):
        """デフォルト設定でのログセットアップテスト"""
        logger = setup_logging()

        assert logger.name == "automenu"
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_setup_logging_warning_level(self):
        logger = setup_logging(level="warning")

        assert logger.level == logging.WARNING
        assert logger.handlers[0].level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logging(level="LOUD")

        assert logger.level == logging.INFO

    def test_setup_logging_verbose_mode(self):
        """詳細モードでのログセットアップテスト"""
        logger = setup_logging(level="ERROR", verbose=True)

        assert logger.level == logging.DEBUG

    def test_repeated_setup_replaces_handlers(self):
        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1

    def test_setup_logging_with_log_file(self, temp_dir: Path):
        """ログファイル付きセットアップテスト"""
        log_file = temp_dir / "logs" / "automenu.log"

        logger = setup_logging(level="WARNING", log_file=log_file)
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]

        assert len(logger.handlers) == 2
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        assert log_file.parent.exists()

    def test_child_logger_records_reach_file(self, temp_dir: Path):
        """モジュールロガーのメッセージがファイルに書き込まれることをテスト"""
        log_file = temp_dir / "automenu.log"
        setup_logging(level="INFO", log_file=log_file)

        logging.getLogger("automenu.menus.sub_menu").warning("menu failure")
        for handler in logging.getLogger(LOGGER_NAME).handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "automenu.menus.sub_menu - WARNING - menu failure" in content

    def test_custom_console(self):
        stream = StringIO()
        logger = setup_logging(console_handler_console=Console(file=stream, width=200))

        logger.info("hola")

        assert "hola" in stream.getvalue()


class TestGetLogger:
    def test_get_logger_default(self):
        assert get_logger() is logging.getLogger("automenu")

    def test_get_logger_named(self):
        assert get_logger("automenu.demo").name == "automenu.demo"
