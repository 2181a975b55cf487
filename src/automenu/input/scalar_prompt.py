"""スカラー値の対話入力

型ごとの解析・不正入力時の再入力・入力値の確認を提供します。
入力は ``rich.prompt`` のプロンプトクラスで1行ずつ読み取ります。
"""

from __future__ import annotations

import logging
import re
import struct
import sys
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import Any, TextIO, TypeVar

from rich.console import Console
from rich.prompt import Confirm, InvalidResponse, PromptBase
from rich.text import Text, TextType

from ..core.exceptions import ParseError
from ..core.messages import MessageProvider, get_message_provider
from ..core.types import ScalarKind

logger = logging.getLogger(__name__)

T = TypeVar("T")

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")

INTEGER_RANGES: dict[ScalarKind, tuple[int, int]] = {
    ScalarKind.INT8: (-(2**7), 2**7 - 1),
    ScalarKind.INT16: (-(2**15), 2**15 - 1),
    ScalarKind.INT32: (-(2**31), 2**31 - 1),
    ScalarKind.INT64: (-(2**63), 2**63 - 1),
}


# 解析関数


def _parse_integer(raw: str, kind: ScalarKind) -> int:
    if not _INTEGER_PATTERN.fullmatch(raw):
        raise ParseError.invalid_literal(raw, kind.value)
    value = int(raw)
    if kind in INTEGER_RANGES:
        minimum, maximum = INTEGER_RANGES[kind]
        if not minimum <= value <= maximum:
            raise ParseError.out_of_range(raw, kind.value, minimum, maximum)
    return value


def parse_byte(raw: str) -> int:
    return _parse_integer(raw, ScalarKind.INT8)


def parse_short(raw: str) -> int:
    return _parse_integer(raw, ScalarKind.INT16)


def parse_int(raw: str) -> int:
    return _parse_integer(raw, ScalarKind.INT32)


def parse_long(raw: str) -> int:
    return _parse_integer(raw, ScalarKind.INT64)


def parse_big_integer(raw: str) -> int:
    return _parse_integer(raw, ScalarKind.BIG_INTEGER)


def parse_double(raw: str) -> float:
    if "_" in raw:
        raise ParseError.invalid_literal(raw, ScalarKind.FLOAT64.value)
    try:
        return float(raw)
    except ValueError as e:
        raise ParseError.invalid_literal(raw, ScalarKind.FLOAT64.value) from e


def parse_float(raw: str) -> float:
    """単精度に丸めた値を返す"""
    value = parse_double(raw)
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except (OverflowError, struct.error) as e:
        raise ParseError.invalid_literal(raw, ScalarKind.FLOAT32.value) from e


def parse_boolean(raw: str) -> bool:
    lowered = raw.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ParseError.invalid_literal(raw, ScalarKind.BOOLEAN.value)


def parse_big_decimal(raw: str) -> Decimal:
    try:
        value = Decimal(raw)
    except InvalidOperation as e:
        raise ParseError.invalid_literal(raw, ScalarKind.BIG_DECIMAL.value) from e
    if "_" in raw or not value.is_finite():
        raise ParseError.invalid_literal(raw, ScalarKind.BIG_DECIMAL.value)
    return value


def parse_text(raw: str) -> str:
    return raw


# プロンプトクラス


class StreamInputMixin:
    """入力ストリームから1行を読み取る ``get_input``

    ストリームの終端（空文字列）は ``EOFError`` として送出します。
    """

    @classmethod
    def get_input(
        cls,
        console: Console,
        prompt: TextType,
        password: bool,
        stream: TextIO | None = None,
    ) -> str:
        line = console.input(prompt, password=password, stream=stream)
        if stream is not None and line == "":
            raise EOFError("end of input stream")
        return line.rstrip("\r\n")


class ScalarInput(StreamInputMixin, PromptBase[Any]):
    """スカラー値の入力プロンプト

    ``parser`` が ``ParseError`` / ``ValueError`` を送出した入力は
    ``InvalidResponse`` として扱い、エラーメッセージの後に再入力を求めます。
    トークン単位の種別は行の最初の語だけを解析し、行の残りは破棄します。
    """

    kind = ScalarKind.WORD
    response_type = str
    parser: Callable[[str], Any] = staticmethod(parse_text)
    token = True
    prompt_suffix = ""

    def process_response(self, value: str) -> Any:
        if self.token:
            words = value.split()
            if not words:
                raise InvalidResponse(self.validate_error_message)
            raw = words[0]
        else:
            raw = value
        try:
            return self.parser(raw)
        except (ParseError, ValueError) as e:
            logger.debug("入力の解析に失敗しました: %r (%s)", raw, e)
            raise InvalidResponse(self.validate_error_message) from e


class WordInput(ScalarInput):
    kind = ScalarKind.WORD


class LineInput(ScalarInput):
    kind = ScalarKind.TEXT
    token = False


class ByteInput(ScalarInput):
    kind = ScalarKind.INT8
    response_type = int
    parser = staticmethod(parse_byte)


class ShortInput(ScalarInput):
    kind = ScalarKind.INT16
    response_type = int
    parser = staticmethod(parse_short)


class IntInput(ScalarInput):
    kind = ScalarKind.INT32
    response_type = int
    parser = staticmethod(parse_int)


class LongInput(ScalarInput):
    kind = ScalarKind.INT64
    response_type = int
    parser = staticmethod(parse_long)


class FloatInput(ScalarInput):
    kind = ScalarKind.FLOAT32
    response_type = float
    parser = staticmethod(parse_float)


class DoubleInput(ScalarInput):
    kind = ScalarKind.FLOAT64
    response_type = float
    parser = staticmethod(parse_double)


class BooleanInput(ScalarInput):
    kind = ScalarKind.BOOLEAN
    response_type = bool
    parser = staticmethod(parse_boolean)


class BigIntegerInput(ScalarInput):
    kind = ScalarKind.BIG_INTEGER
    response_type = int
    parser = staticmethod(parse_big_integer)


class BigDecimalInput(ScalarInput):
    kind = ScalarKind.BIG_DECIMAL
    response_type = Decimal
    parser = staticmethod(parse_big_decimal)


PROMPTS: dict[ScalarKind, type[ScalarInput]] = {
    prompt_class.kind: prompt_class
    for prompt_class in (
        WordInput,
        LineInput,
        ByteInput,
        ShortInput,
        IntInput,
        LongInput,
        FloatInput,
        DoubleInput,
        BooleanInput,
        BigIntegerInput,
        BigDecimalInput,
    )
}


class AffirmativeConfirm(StreamInputMixin, Confirm):
    """回答の先頭文字で判定する確認プロンプト

    先頭文字（小文字化）が肯定文字なら True、それ以外の回答は False です。
    空の回答では質問を再表示します。
    """

    prompt_suffix = ""

    def __init__(self, prompt: TextType = "", *, affirmative: str = "s", **kwargs: Any):
        super().__init__(prompt, **kwargs)
        self.show_choices = False
        self.affirmative = affirmative.lower()

    def process_response(self, value: str) -> bool:
        answer = value.strip().lower()
        if not answer:
            raise InvalidResponse(self.validate_error_message)
        return answer[0] == self.affirmative

    def on_validate_error(self, value: str, error: InvalidResponse) -> None:
        """空の回答ではエラーを表示せずに質問だけを再表示する"""


class ScalarPrompt:
    """スカラー値の対話入力クラス

    不正な入力は再入力を求め、必要に応じて入力値の確認を行います。
    """

    def __init__(
        self,
        input_stream: TextIO | None = None,
        console: Console | None = None,
        messages: MessageProvider | None = None,
    ):
        """初期化

        Args:
            input_stream: 入力ストリーム（省略時は標準入力）
            console: Rich Console インスタンス（省略時は新規作成）
            messages: メッセージプロバイダー（省略時はスペイン語）
        """
        self.input_stream = input_stream or sys.stdin
        self.console = console or Console()
        self.messages = messages or get_message_provider()

    def _question(self, prompt_class: type[ScalarInput], prompt: str) -> ScalarInput:
        question = prompt_class(Text(prompt), console=self.console)
        question.validate_error_message = Text(self.messages.get("invalid_value"))
        return question

    def _ask(self, question: ScalarInput, confirm: bool) -> Any:
        while True:
            value = question(stream=self.input_stream)
            if not confirm or self.ask_confirmation(value):
                return value

    def ask(
        self,
        prompt: str,
        parse: Callable[[str], T],
        confirm: bool = False,
        *,
        token: bool = True,
    ) -> T:
        """値を解析できるまで入力を求める

        Args:
            prompt: 表示するプロンプト
            parse: 解析関数（失敗時は ParseError / ValueError）
            confirm: 解析後に入力値の確認を行うか
            token: 行の最初の語だけを解析するか（False なら行全体）

        Returns:
            解析された値
        """
        question = self._question(WordInput if token else LineInput, prompt)
        question.parser = parse
        return self._ask(question, confirm)

    def read(self, kind: ScalarKind, prompt: str, confirm: bool = False) -> Any:
        """スカラー種別に応じた入力"""
        return self._ask(self._question(PROMPTS[kind], prompt), confirm)

    # 確認

    def ask_something(self, message: str, affirmative: str) -> bool:
        """質問を表示し、回答の先頭文字が肯定文字かどうかを返す"""
        question = AffirmativeConfirm(Text(message), affirmative=affirmative, console=self.console)
        return question(stream=self.input_stream)

    def ask_confirmation(self, value: Any = None) -> bool:
        """入力値の確認（value 省略時は一般的な確認）"""
        if value is None:
            message = self.messages.get("confirm")
        else:
            message = self.messages.get("confirm_value", value=value)
        return self.ask_something(message, self.messages.affirmative)

    # 型別の入力

    def next_word(self, prompt: str, confirm: bool = False) -> str:
        return self.read(ScalarKind.WORD, prompt, confirm)

    def next_line(self, prompt: str, confirm: bool = False) -> str:
        return self.read(ScalarKind.TEXT, prompt, confirm)

    def next_byte(self, prompt: str, confirm: bool = False) -> int:
        return self.read(ScalarKind.INT8, prompt, confirm)

    def next_short(self, prompt: str, confirm: bool = False) -> int:
        return self.read(ScalarKind.INT16, prompt, confirm)

    def next_int(self, prompt: str, confirm: bool = False) -> int:
        return self.read(ScalarKind.INT32, prompt, confirm)

    def next_long(self, prompt: str, confirm: bool = False) -> int:
        return self.read(ScalarKind.INT64, prompt, confirm)

    def next_float(self, prompt: str, confirm: bool = False) -> float:
        return self.read(ScalarKind.FLOAT32, prompt, confirm)

    def next_double(self, prompt: str, confirm: bool = False) -> float:
        return self.read(ScalarKind.FLOAT64, prompt, confirm)

    def next_boolean(self, prompt: str, confirm: bool = False) -> bool:
        return self.read(ScalarKind.BOOLEAN, prompt, confirm)

    def next_big_integer(self, prompt: str, confirm: bool = False) -> int:
        return self.read(ScalarKind.BIG_INTEGER, prompt, confirm)

    def next_big_decimal(self, prompt: str, confirm: bool = False) -> Decimal:
        return self.read(ScalarKind.BIG_DECIMAL, prompt, confirm)
