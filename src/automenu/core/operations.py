"""操作テーブル

対象オブジェクトの公開メソッドを ``Operation`` の一覧として記述します。
``describe_operations()`` を実装したオブジェクトは自前の一覧を返せます。
それ以外は実行時の型情報から一覧を組み立てます。
"""

from __future__ import annotations

import inspect
import logging
import sys
import typing
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

EMPTY = inspect.Parameter.empty

# プロトコル用のメソッドは操作として公開しない
PROTOCOL_NAMES = frozenset({"describe_operations"})

_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclass(frozen=True)
class ParameterSpec:
    """操作・コンストラクタの引数記述"""

    name: str
    annotation: Any = str
    keyword_only: bool = False
    default: Any = EMPTY

    @property
    def has_default(self) -> bool:
        return self.default is not EMPTY


@dataclass(frozen=True)
class Operation:
    """メニューから呼び出せる操作"""

    name: str
    invoke: Callable[..., Any]
    parameters: tuple[ParameterSpec, ...] = field(default_factory=tuple)

    def call(self, values: Sequence[Any]) -> Any:
        """引数の値リストで操作を呼び出す

        Args:
            values: ``parameters`` と同じ順序の値

        Returns:
            操作の戻り値
        """
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for spec, value in zip(self.parameters, values, strict=True):
            if spec.keyword_only:
                kwargs[spec.name] = value
            else:
                args.append(value)
        return self.invoke(*args, **kwargs)


@runtime_checkable
class Describable(Protocol):
    """操作一覧を明示的に提供するオブジェクト"""

    def describe_operations(self) -> Sequence[Operation]: ...


def _resolve_hints(func: Any, owner: type | None = None) -> dict[str, Any]:
    """型ヒントを解決（文字列注釈も評価する）"""
    target = func
    globalns = None
    if owner is not None:
        module = sys.modules.get(owner.__module__)
        globalns = vars(module) if module is not None else None
        target = owner.__init__
    try:
        return typing.get_type_hints(target, globalns=globalns, include_extras=True)
    except Exception as e:
        logger.debug("型ヒントの解決に失敗しました: %r (%s)", func, e)
        return {}


def signature_parameters(func: Callable[..., Any], owner: type | None = None) -> tuple[ParameterSpec, ...]:
    """呼び出し可能オブジェクトの引数記述を取得

    ``*args`` / ``**kwargs`` はプロンプトできないため除外します。

    Args:
        func: 対象の関数・バウンドメソッド・クラス
        owner: ``func`` がクラスの場合はそのクラス（型ヒント解決に使用）

    Raises:
        ValueError, TypeError: シグネチャを取得できない場合
    """
    signature = inspect.signature(func)
    hints = _resolve_hints(func, owner)
    specs: list[ParameterSpec] = []
    for param in signature.parameters.values():
        if param.kind in _SKIPPED_KINDS:
            continue
        annotation = hints.get(param.name, param.annotation)
        if annotation is EMPTY or isinstance(annotation, str):
            # 注釈なし: 既定値の型、なければ文字列
            annotation = type(param.default) if param.default not in (EMPTY, None) else str
        specs.append(
            ParameterSpec(
                name=param.name,
                annotation=annotation,
                keyword_only=param.kind is inspect.Parameter.KEYWORD_ONLY,
                default=param.default,
            )
        )
    return tuple(specs)


def _is_public_routine(target: Any, name: str) -> bool:
    if name.startswith("_") or name in PROTOCOL_NAMES:
        return False
    # プロパティを評価しないよう静的に取得
    try:
        static = inspect.getattr_static(target, name)
    except AttributeError:
        return False
    if isinstance(static, property):
        return False
    if isinstance(target, type) and inspect.isfunction(static):
        # クラス自体が対象の場合、インスタンスメソッドは呼び出せない
        return False
    return inspect.isroutine(getattr(target, name, None))


def describe_operations(target: Any) -> list[Operation]:
    """対象オブジェクトの操作一覧を取得

    クラス自体を渡した場合は静的メソッドとクラスメソッドだけが対象です。

    Args:
        target: メニューに紐付けるオブジェクト

    Returns:
        操作一覧（フィルタリング前）
    """
    if isinstance(target, Describable) and not isinstance(target, type):
        return list(target.describe_operations())

    operations: list[Operation] = []
    for name in dir(target):
        if not _is_public_routine(target, name):
            continue
        method = getattr(target, name)
        try:
            parameters = signature_parameters(method)
        except (TypeError, ValueError):
            logger.debug("シグネチャを取得できないメソッドをスキップ: %s", name)
            continue
        operations.append(Operation(name=name, invoke=method, parameters=parameters))
    return operations
