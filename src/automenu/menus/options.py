"""メニュー項目セット

対象オブジェクトの公開メソッドとカスタムオプションから番号付きの項目一覧を作成します。
番号と終了番号は常に現在の状態から算出されます。
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from ..core.exceptions import CardinalityMismatchError, DuplicateLabelError, LabelNotFoundError
from ..core.operations import Operation, describe_operations

logger = logging.getLogger(__name__)

FIXED_BLOCKLIST = frozenset({"run", "wait", "equals", "toString", "hashCode", "getClass", "notify", "notifyAll"})
ACCESSOR_PREFIXES = ("get", "set")


@dataclass(frozen=True)
class MenuEntry:
    """メニュー項目"""

    index: int
    label: str
    operation: Operation | str  # カスタムオプションはマーカー文字列

    @property
    def is_custom(self) -> bool:
        return isinstance(self.operation, str)


class MenuOptionSet:
    """メソッド項目とカスタムオプションの集合"""

    def __init__(self) -> None:
        self.target: Any = None
        self.hidden_names: frozenset[str] = frozenset()
        self._methods: dict[str, Operation] = {}
        self._custom: dict[str, str] = {}

    # 検出

    def excluded_names(self) -> frozenset[str]:
        """除外される名前（固定ブロックリスト ∪ 非表示 ∪ カスタムオプション）"""
        return FIXED_BLOCKLIST | self.hidden_names | frozenset(self._custom.values())

    def discover(self, target: Any, hidden_names: Iterable[str] | None = None) -> None:
        """対象オブジェクトのメソッドを検出してメソッド項目を置き換える

        Args:
            target: メニューに紐付けるオブジェクト
            hidden_names: 表示しないメソッド名
        """
        self.target = target
        self.hidden_names = frozenset(hidden_names or ())
        excluded = self.excluded_names()

        methods: dict[str, Operation] = {}
        for operation in describe_operations(target):
            name = operation.name
            if name.startswith(ACCESSOR_PREFIXES) or name in excluded:
                continue
            methods[name] = operation
        self._methods = dict(sorted(methods.items()))
        logger.debug("%d 件のメソッドを検出しました: %s", len(self._methods), list(self._methods))

    def set_custom_options(self, names: Iterable[str] | None) -> None:
        """カスタムオプションを置き換える（メソッド項目は再フィルタしない）"""
        self._custom = {name: name for name in sorted(set(names or ()))}

    # 参照

    @property
    def methods(self) -> dict[str, Operation]:
        return dict(self._methods)

    @property
    def custom_options(self) -> dict[str, str]:
        return dict(self._custom)

    @property
    def method_count(self) -> int:
        return len(self._methods)

    @property
    def custom_count(self) -> int:
        return len(self._custom)

    @property
    def has_custom_options(self) -> bool:
        return bool(self._custom)

    @property
    def exit_index(self) -> int:
        """終了番号（カスタムオプションがある場合のみ末尾に+1）"""
        if self.has_custom_options:
            return self.method_count + self.custom_count + 1
        return self.method_count

    def entries(self) -> list[MenuEntry]:
        """表示順の全項目（メソッド、カスタムの順）"""
        result = [MenuEntry(i, label, op) for i, (label, op) in enumerate(self._methods.items(), start=1)]
        start = len(result) + 1
        result.extend(MenuEntry(i, label, marker) for i, (label, marker) in enumerate(self._custom.items(), start))
        return result

    def is_method_index(self, index: int) -> bool:
        return 1 <= index <= self.method_count

    def is_custom_index(self, index: int) -> bool:
        return self.has_custom_options and self.method_count < index < self.exit_index

    def resolve(self, index: int) -> MenuEntry | None:
        """番号から項目を取得（範囲外・終了番号はNone）"""
        if not (self.is_method_index(index) or self.is_custom_index(index)):
            return None
        return self.entries()[index - 1]

    def custom_label_for(self, index: int) -> str | None:
        """カスタム範囲の番号に対応するラベル"""
        if not self.is_custom_index(index):
            return None
        return list(self._custom)[index - self.method_count - 1]

    # 表示名の変更

    def _check_new_labels(self, labels: Sequence[str], replaced: Iterable[str]) -> None:
        remaining = (set(self._methods) | set(self._custom)) - set(replaced)
        seen: set[str] = set()
        for label in labels:
            if label in remaining or label in seen:
                raise DuplicateLabelError.already_used(label)
            seen.add(label)

    def rename_method_label(self, current: str, new: str) -> None:
        if current not in self._methods:
            raise LabelNotFoundError.method_label(current)
        self._check_new_labels([new], [current])
        methods = dict(self._methods)
        methods[new] = methods.pop(current)
        self._methods = dict(sorted(methods.items()))

    def rename_custom_label(self, current: str, new: str) -> None:
        if current not in self._custom:
            raise LabelNotFoundError.custom_label(current)
        self._check_new_labels([new], [current])
        custom = dict(self._custom)
        custom[new] = custom.pop(current)
        self._custom = dict(sorted(custom.items()))

    def rename_method_labels(self, new_labels: Mapping[str, str]) -> None:
        """メソッド項目の表示名を一括変更（現在のラベル → 新しいラベル）

        Raises:
            CardinalityMismatchError: 件数が現在のメソッド項目数と異なる場合
            LabelNotFoundError: 存在しないラベルが含まれる場合
        """
        if len(new_labels) != len(self._methods):
            raise CardinalityMismatchError.mismatch(len(self._methods), len(new_labels))
        for current in new_labels:
            if current not in self._methods:
                raise LabelNotFoundError.method_label(current)
        self._check_new_labels(list(new_labels.values()), new_labels.keys())
        self._methods = dict(sorted((new, self._methods[current]) for current, new in new_labels.items()))

    def rename_custom_labels(self, new_labels: Sequence[str]) -> None:
        """カスタムオプションの表示名を現在の表示順で一括変更

        Raises:
            CardinalityMismatchError: 件数が現在のカスタムオプション数と異なる場合
        """
        if len(new_labels) != len(self._custom):
            raise CardinalityMismatchError.mismatch(len(self._custom), len(new_labels))
        self._check_new_labels(new_labels, self._custom.keys())
        markers = list(self._custom.values())
        self._custom = dict(sorted(zip(new_labels, markers, strict=True)))
