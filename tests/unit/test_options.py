"""
メニュー項目セットのテスト

メソッド検出・カスタムオプション・終了番号・表示名変更をテストします。
"""

import pytest
from automenu.core.exceptions import CardinalityMismatchError, DuplicateLabelError, LabelNotFoundError
from automenu.core.operations import Operation, ParameterSpec, describe_operations, signature_parameters
from automenu.menus.options import FIXED_BLOCKLIST, MenuOptionSet


class Target:
    def alpha(self):
        return "alpha"

    def beta(self, value: int):
        return value

    def getFoo(self):
        return "foo"

    def setFoo(self, value):
        pass

    def run(self):
        pass


class ThreeMethods:
    def one(self):
        pass

    def two(self):
        pass

    def three(self):
        pass


class ObjectProtocolNames:
    def toString(self):
        return ""

    def hashCode(self):
        return 0

    def equals(self, other):
        return False

    def notify(self):
        pass

    def visible(self):
        pass


class WithNonMethods:
    counter = 0

    def __init__(self):
        self.data = []

    @property
    def broken(self):
        raise RuntimeError("must not be evaluated")

    def _private(self):
        pass

    def public(self, *values, flag: bool = False):
        pass


class Toolbox:
    def instance_only(self, value: int):
        return value

    @staticmethod
    def add(a: int, b: int) -> int:
        return a + b

    @classmethod
    def build(cls, name: str):
        return f"{cls.__name__}:{name}"


class Described:
    """操作一覧を明示的に提供する対象"""

    def __init__(self):
        self.calls = []

    def describe_operations(self):
        return [
            Operation("greet", lambda name: self.calls.append(name), (ParameterSpec("name", str),)),
            Operation("getSecret", lambda: None),
        ]

    def hidden_method(self):
        pass


def discovered(target, hidden=None, custom=None) -> MenuOptionSet:
    options = MenuOptionSet()
    options.set_custom_options(custom)
    options.discover(target, hidden)
    return options


class TestOperations:
    """操作テーブルのテスト"""

    def test_describe_operations_uses_public_routines(self):
        names = [op.name for op in describe_operations(WithNonMethods())]

        assert names == ["public"]

    def test_signature_parameters_skip_var_arguments(self):
        parameters = signature_parameters(WithNonMethods().public)

        assert parameters == (ParameterSpec("flag", bool, keyword_only=True, default=False),)

    def test_unannotated_parameter_defaults_to_str(self):
        (parameter,) = signature_parameters(Target().setFoo)

        assert parameter.annotation is str
        assert not parameter.has_default

    def test_operation_call_splits_keyword_only(self):
        received = {}

        def action(a: int, *, b: int):
            received.update(a=a, b=b)

        operation = Operation("action", action, signature_parameters(action))
        operation.call([1, 2])

        assert received == {"a": 1, "b": 2}

    def test_class_target_skips_instance_methods(self):
        """クラスが対象の場合、self を要求するメソッドは含まれないことをテスト"""
        operations = {op.name: op for op in describe_operations(Toolbox)}

        assert sorted(operations) == ["add", "build"]
        assert [spec.name for spec in operations["add"].parameters] == ["a", "b"]
        assert [spec.name for spec in operations["build"].parameters] == ["name"]
        assert operations["add"].call([2, 3]) == 5
        assert operations["build"].call(["x"]) == "Toolbox:x"

    def test_instance_target_keeps_instance_methods(self):
        names = [op.name for op in describe_operations(Toolbox())]

        assert names == ["add", "build", "instance_only"]

    def test_describable_target(self):
        target = Described()

        operations = describe_operations(target)

        assert [op.name for op in operations] == ["greet", "getSecret"]


class TestDiscovery:
    """メソッド検出のテスト"""

    def test_accessors_blocklist_and_hidden_are_excluded(self):
        """アクセサ・ブロックリスト・非表示名が除外されることをテスト"""
        options = discovered(Target(), hidden=["beta"])

        assert list(options.methods) == ["alpha"]

    def test_fixed_blocklist(self):
        options = discovered(ObjectProtocolNames())

        assert list(options.methods) == ["visible"]
        assert {"toString", "hashCode", "equals", "notify", "run"} <= FIXED_BLOCKLIST

    def test_private_and_properties_are_excluded(self):
        options = discovered(WithNonMethods())

        assert list(options.methods) == ["public"]

    def test_methods_are_sorted(self):
        options = discovered(ThreeMethods())

        assert list(options.methods) == ["one", "three", "two"]
        assert [entry.index for entry in options.entries()] == [1, 2, 3]

    def test_custom_option_name_hides_method(self):
        """カスタムオプションと同名のメソッドは検出されないことをテスト"""
        options = discovered(Target(), custom=["alpha"])

        assert list(options.methods) == ["beta"]
        assert list(options.custom_options) == ["alpha"]

    def test_describable_target_is_filtered(self):
        options = discovered(Described())

        assert list(options.methods) == ["greet"]

    def test_rediscover_with_new_target(self):
        options = discovered(Target())

        options.discover(ThreeMethods())

        assert options.target.__class__ is ThreeMethods
        assert options.method_count == 3


class TestExitIndex:
    """終了番号の算出テスト"""

    def test_exit_with_custom_options(self):
        options = discovered(ThreeMethods(), custom=["x", "y"])

        assert options.exit_index == 6
        assert options.is_custom_index(4)
        assert options.is_custom_index(5)
        assert not options.is_custom_index(6)

    def test_exit_without_custom_options(self):
        options = discovered(Target())

        assert options.method_count == 2
        assert options.exit_index == 2
        assert not options.has_custom_options

    def test_exit_follows_custom_option_changes(self):
        """カスタムオプション変更後に終了番号が即座に再計算されることをテスト"""
        options = discovered(ThreeMethods())
        assert options.exit_index == 3

        options.set_custom_options(["x"])
        assert options.exit_index == 5

        options.set_custom_options([])
        assert options.exit_index == 3

    def test_set_custom_options_does_not_refilter_methods(self):
        options = discovered(ThreeMethods())

        options.set_custom_options(["one"])

        assert "one" in options.methods
        assert options.exit_index == 5

    def test_entries_and_resolve(self):
        options = discovered(ThreeMethods(), custom=["y", "x"])

        entries = options.entries()

        assert [(e.index, e.label, e.is_custom) for e in entries] == [
            (1, "one", False),
            (2, "three", False),
            (3, "two", False),
            (4, "x", True),
            (5, "y", True),
        ]
        assert options.resolve(2).label == "three"
        assert options.resolve(5).operation == "y"
        assert options.resolve(6) is None
        assert options.resolve(0) is None
        assert options.custom_label_for(4) == "x"
        assert options.custom_label_for(2) is None


class TestRename:
    """表示名変更のテスト"""

    def test_rename_method_label_reorders(self):
        options = discovered(ThreeMethods())

        options.rename_method_label("one", "zeta")

        assert list(options.methods) == ["three", "two", "zeta"]
        assert options.resolve(3).operation.name == "one"

    def test_rename_missing_method_label(self):
        options = discovered(ThreeMethods())

        with pytest.raises(LabelNotFoundError):
            options.rename_method_label("four", "cuatro")

        assert list(options.methods) == ["one", "three", "two"]

    def test_rename_to_existing_label(self):
        options = discovered(ThreeMethods(), custom=["x"])

        with pytest.raises(DuplicateLabelError):
            options.rename_method_label("one", "x")

        assert list(options.methods) == ["one", "three", "two"]

    def test_rename_custom_label(self):
        options = discovered(ThreeMethods(), custom=["x"])

        options.rename_custom_label("x", "Extra")

        assert options.custom_options == {"Extra": "x"}
        with pytest.raises(LabelNotFoundError):
            options.rename_custom_label("x", "again")

    def test_bulk_rename_methods(self):
        options = discovered(ThreeMethods())

        options.rename_method_labels({"one": "Uno", "two": "Dos", "three": "Tres"})

        assert list(options.methods) == ["Dos", "Tres", "Uno"]
        assert options.exit_index == 3

    def test_bulk_rename_cardinality_mismatch_leaves_labels(self):
        """件数不一致の一括変更で表示名が変わらないことをテスト"""
        options = discovered(ThreeMethods())

        with pytest.raises(CardinalityMismatchError) as exc_info:
            options.rename_method_labels({"one": "Uno", "two": "Dos"})

        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2
        assert list(options.methods) == ["one", "three", "two"]

    def test_bulk_rename_unknown_key_leaves_labels(self):
        options = discovered(ThreeMethods())

        with pytest.raises(LabelNotFoundError):
            options.rename_method_labels({"one": "Uno", "two": "Dos", "four": "Cuatro"})

        assert list(options.methods) == ["one", "three", "two"]

    def test_bulk_rename_custom_in_display_order(self):
        options = discovered(ThreeMethods(), custom=["b", "a"])

        options.rename_custom_labels(["Primero", "Segundo"])

        assert options.custom_options == {"Primero": "a", "Segundo": "b"}

    def test_bulk_rename_custom_mismatch(self):
        options = discovered(ThreeMethods(), custom=["a"])

        with pytest.raises(CardinalityMismatchError):
            options.rename_custom_labels(["uno", "dos"])

        assert options.custom_options == {"a": "a"}
