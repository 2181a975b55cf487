"""型マーカー定義

整数幅・浮動小数点精度・ストリームなど、Python の型注釈だけでは
区別できない入力種別を ``typing.Annotated`` で表現します。
"""

from __future__ import annotations

import io
import types
import typing
from collections.abc import Sequence as AbcSequence
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, TextIO


class ScalarKind(Enum):
    """プロンプトで直接読み取れるスカラー型の種類"""

    WORD = "word"
    TEXT = "text"
    INT8 = "byte"
    INT16 = "short"
    INT32 = "int"
    INT64 = "long"
    FLOAT32 = "float"
    FLOAT64 = "double"
    BOOLEAN = "boolean"
    BIG_INTEGER = "BigInteger"
    BIG_DECIMAL = "BigDecimal"


class StreamKind(Enum):
    """プロンプトせずにそのまま渡されるストリーム"""

    INPUT = "input"
    OUTPUT = "output"


Word = Annotated[str, ScalarKind.WORD]
Text = Annotated[str, ScalarKind.TEXT]
Int8 = Annotated[int, ScalarKind.INT8]
Int16 = Annotated[int, ScalarKind.INT16]
Int32 = Annotated[int, ScalarKind.INT32]
Int64 = Annotated[int, ScalarKind.INT64]
Float32 = Annotated[float, ScalarKind.FLOAT32]
Float64 = Annotated[float, ScalarKind.FLOAT64]
BigInteger = Annotated[int, ScalarKind.BIG_INTEGER]
BigDecimal = Annotated[Decimal, ScalarKind.BIG_DECIMAL]

InputStream = Annotated[TextIO, StreamKind.INPUT]
OutputStream = Annotated[TextIO, StreamKind.OUTPUT]

# 注釈なしの組み込み型の既定マッピング
DEFAULT_SCALAR_KINDS: dict[Any, ScalarKind] = {
    str: ScalarKind.TEXT,
    int: ScalarKind.BIG_INTEGER,
    float: ScalarKind.FLOAT64,
    bool: ScalarKind.BOOLEAN,
    Decimal: ScalarKind.BIG_DECIMAL,
}

SEQUENCE_ORIGINS = (list, tuple, AbcSequence)


def unwrap_optional(annotation: Any) -> Any:
    """``Optional[T]`` を ``T`` に変換（それ以外はそのまま）"""
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def scalar_kind_of(annotation: Any) -> ScalarKind | None:
    """注釈からスカラー種別を判定"""
    if typing.get_origin(annotation) is Annotated:
        for extra in annotation.__metadata__:
            if isinstance(extra, ScalarKind):
                return extra
        annotation = typing.get_args(annotation)[0]
    return DEFAULT_SCALAR_KINDS.get(annotation)


def stream_kind_of(annotation: Any) -> StreamKind | None:
    """注釈からストリーム種別を判定

    ``TextIO`` や ``io.TextIOBase`` のサブクラスはマーカーなしでも入力ストリーム扱い。
    """
    if typing.get_origin(annotation) is Annotated:
        for extra in annotation.__metadata__:
            if isinstance(extra, StreamKind):
                return extra
        annotation = typing.get_args(annotation)[0]
    if annotation is TextIO or annotation is typing.IO:
        return StreamKind.INPUT
    if isinstance(annotation, type) and issubclass(annotation, io.TextIOBase):
        return StreamKind.INPUT
    return None


def sequence_element_of(annotation: Any) -> tuple[type, Any] | None:
    """シーケンス型なら (コンテナ型, 要素型) を返す"""
    if annotation in (list, tuple):
        return annotation, str
    origin = typing.get_origin(annotation)
    if origin not in SEQUENCE_ORIGINS:
        return None
    args = typing.get_args(annotation)
    element: Any = args[0] if args else str
    if origin is tuple:
        # tuple[T, ...] のみ可変長シーケンスとして扱う
        if len(args) != 2 or args[1] is not Ellipsis:
            return None
        return tuple, element
    return list, element


def short_name(annotation: Any) -> str:
    """プロンプト表示用の短い型名"""
    kind = scalar_kind_of(annotation)
    if kind is not None and typing.get_origin(annotation) is Annotated:
        return kind.value
    if typing.get_origin(annotation) is Annotated:
        annotation = typing.get_args(annotation)[0]
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation).replace("typing.", "")
