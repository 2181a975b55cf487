"""型情報に基づく値の構築

スカラー値・配列・任意のオブジェクト（コンストラクタ引数を再帰的に入力）を
対話的に構築します。
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, MutableSequence
from typing import Any

from ..core.exceptions import ConstructionError, NoConstructorError
from ..core.operations import ParameterSpec, signature_parameters
from ..core.types import (
    ScalarKind,
    StreamKind,
    scalar_kind_of,
    sequence_element_of,
    short_name,
    stream_kind_of,
    unwrap_optional,
)
from ..ui.screen import emit
from .scalar_prompt import ScalarPrompt

logger = logging.getLogger(__name__)

Factory = Callable[..., Any]


class ValueBuilder(ScalarPrompt):
    """対話的な値ビルダー

    ``ScalarPrompt`` を拡張し、配列と任意オブジェクトの構築を提供します。
    オブジェクトは登録済みファクトリ、なければクラス自身のコンストラクタで作成します。
    """

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.factories: dict[type, list[Factory]] = {}

    def register_factory(self, target_type: type, factory: Factory) -> None:
        """型に対するファクトリを登録

        Args:
            target_type: 構築対象の型
            factory: 値を返す呼び出し可能オブジェクト（引数はプロンプトで入力）
        """
        self.factories.setdefault(target_type, []).append(factory)

    def _candidates(self, target_type: type) -> list[tuple[Factory, tuple[ParameterSpec, ...]]]:
        """コンストラクタ候補と引数記述の一覧"""
        if target_type in self.factories:
            return [(factory, signature_parameters(factory)) for factory in self.factories[target_type]]

        if not isinstance(target_type, type) or inspect.isabstract(target_type):
            return []
        try:
            return [(target_type, signature_parameters(target_type, owner=target_type))]
        except (TypeError, ValueError) as e:
            logger.debug("コンストラクタのシグネチャを取得できません: %r (%s)", target_type, e)
            return []

    def select_constructor(self, target_type: type) -> tuple[Factory, tuple[ParameterSpec, ...]]:
        """引数が最も多いコンストラクタを選択（同数なら最初の候補）

        Raises:
            NoConstructorError: 候補がない場合
        """
        candidates = self._candidates(target_type)
        if not candidates:
            raise NoConstructorError.for_type(target_type)
        selected = candidates[0]
        for candidate in candidates[1:]:
            if len(candidate[1]) > len(selected[1]):
                selected = candidate
        return selected

    def create_instance(self, target_type: type) -> Any:
        """コンストラクタ引数を入力してインスタンスを作成

        Raises:
            NoConstructorError: 公開コンストラクタがない場合
            ConstructionError: コンストラクタが例外を送出した場合
        """
        constructor, parameters = self.select_constructor(target_type)
        values = [self.build_value(param.annotation, param.name) for param in parameters]

        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for param, value in zip(parameters, values, strict=True):
            if param.keyword_only:
                kwargs[param.name] = value
            else:
                args.append(value)
        try:
            return constructor(*args, **kwargs)
        except Exception as e:
            raise ConstructionError.from_exception(target_type, e) from e

    def build_value(self, target_type: Any, display_name: str) -> Any:
        """型に応じて値を入力・構築

        Args:
            target_type: 型注釈
            display_name: プロンプトに表示する名前

        Returns:
            入力された値
        """
        target_type = unwrap_optional(target_type)

        sequence = sequence_element_of(target_type)
        if sequence is not None:
            container, element_type = sequence
            values = self.create_array(element_type, display_name)
            return tuple(values) if container is tuple else values

        kind = scalar_kind_of(target_type)
        if kind is not None:
            prompt = self.messages.get("value_prompt", name=display_name, type_name=short_name(target_type))
            return self.read(kind, prompt, confirm=True)

        stream = stream_kind_of(target_type)
        if stream is StreamKind.INPUT:
            return self.input_stream
        if stream is StreamKind.OUTPUT:
            return self.console.file

        emit(self.console, self.messages.get("creating_instance", type_name=short_name(target_type)))
        return self.create_instance(target_type)

    def create_array(self, element_type: Any, display_name: str) -> list[Any]:
        """サイズを入力して配列を作成し、各要素を入力"""
        prompt = self.messages.get("array_size_prompt", name=display_name, type_name=short_name(element_type))
        while True:
            size = self.read(ScalarKind.INT32, prompt, confirm=True)
            if size >= 0:
                break
            emit(self.console, self.messages.get("negative_size"))

        values: list[Any] = [None] * size
        for i in range(size):
            values[i] = self.build_value(element_type, f"{display_name}[{i}]")
        return values

    def fill_array(self, elements_name: str, array: MutableSequence[Any], element_type: Any) -> MutableSequence[Any]:
        """既存の配列の各要素を入力で置き換える"""
        for i in range(len(array)):
            array[i] = self.build_value(element_type, f"{elements_name}[{i}]")
        return array
