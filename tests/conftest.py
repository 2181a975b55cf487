"""
pytest設定と共有フィクスチャ

このファイルは全テストで共有されるフィクスチャとpytest設定を提供します。
テストの独立性と再現性を確保するため、環境変数と作業ディレクトリを分離します。
"""

import os
from collections.abc import Generator
from io import StringIO
from pathlib import Path

import pytest
from automenu.utils.config import Config
from rich.console import Console


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """
    テスト環境の分離

    AUTOMENU_* 環境変数を取り除き、作業ディレクトリを一時ディレクトリに変更します。
    カレントディレクトリの automenu.toml がテストに影響しないようにします。
    """
    for key in list(os.environ):
        if key.startswith("AUTOMENU_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """一時ディレクトリを提供するフィクスチャ"""
    return tmp_path


@pytest.fixture
def output() -> StringIO:
    """コンソール出力のキャプチャ先"""
    return StringIO()


@pytest.fixture
def console(output: StringIO) -> Console:
    """StringIO に出力する Rich Console"""
    return Console(file=output, width=120, legacy_windows=False, color_system=None)


@pytest.fixture
def config(temp_dir: Path) -> Config:
    """デフォルト設定（スペイン語、タイトル表示あり）"""
    return Config(project_root=temp_dir)
