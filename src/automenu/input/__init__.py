"""
対話入力

スカラー値の入力と型情報に基づく値の構築を提供します。
"""

from .scalar_prompt import AffirmativeConfirm, ScalarInput, ScalarPrompt
from .value_builder import ValueBuilder

__all__ = ["AffirmativeConfirm", "ScalarInput", "ScalarPrompt", "ValueBuilder"]
