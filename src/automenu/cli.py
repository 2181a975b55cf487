"""automenu デモCLIエントリーポイント

Clickを使用してデモのメインメニューを起動します。
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console

from . import __version__
from .core.error_handler import ErrorHandler
from .core.exceptions import AutoMenuError
from .core.messages import MessageProvider
from .demo import build_demo_menu
from .utils.config import Config
from .utils.logger import setup_logging

console = Console()


@click.command()
@click.version_option(version=__version__, prog_name="automenu-demo")
@click.option("--verbose", "-v", is_flag=True, help="詳細なログを表示します")
@click.option(
    "--config-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="設定ファイルのパスを指定します",
)
@click.option(
    "--language",
    type=click.Choice(sorted(MessageProvider.CATALOGUES)),
    help="表示言語を指定します（設定ファイルより優先）",
)
@click.option("--no-title", is_flag=True, help="タイトル枠を表示しません")
def cli(verbose: bool, config_file: Path | None, language: str | None, no_title: bool) -> None:
    """automenu: オブジェクトのメソッドから対話メニューを自動生成するデモ

    \b
    使用例:
      automenu-demo
      automenu-demo --language en --no-title
    """
    try:
        overrides = {"language": language} if language else None
        config = Config(config_file=config_file, overrides=overrides)
        setup_logging(level=config.get("log_level"), log_file=config.get_log_file(), verbose=verbose)

        menu = build_demo_menu(console, config, handle_title=False if no_title else None)
        menu.run(sys.stdin)
    except KeyboardInterrupt:
        console.print()
        sys.exit(130)
    except EOFError:
        console.print()
    except AutoMenuError as e:
        ErrorHandler.handle_error(e, verbose=verbose)
        sys.exit(1)


def main() -> None:
    """メインエントリーポイント"""
    cli()


if __name__ == "__main__":
    main()
