"""tweaks データモデル"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .exceptions import TweaksError, TweaksErrorCodes

RawTweakValue = Union[bool, str, int, float]


class TweakValueKind(str, Enum):
    """TweakValue のバリアント種別。"""

    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "number"


@dataclass(frozen=True)
class TweakValue:
    """Boolean / String / Number のいずれか 1 つを保持するタグ付き値。"""

    kind: TweakValueKind
    value: RawTweakValue

    def __post_init__(self) -> None:
        if not _matches_kind(self.kind, self.value):
            raise TweaksError(
                code=TweaksErrorCodes.UNSUPPORTED_VALUE,
                message=f"Value {self.value!r} does not match kind {self.kind.value}",
            )

    @classmethod
    def boolean(cls, value: bool) -> TweakValue:
        return cls(TweakValueKind.BOOLEAN, value)

    @classmethod
    def string(cls, value: str) -> TweakValue:
        return cls(TweakValueKind.STRING, value)

    @classmethod
    def number(cls, value: int | float) -> TweakValue:
        return cls(TweakValueKind.NUMBER, value)

    @classmethod
    def of(cls, value: TweakValue | RawTweakValue) -> TweakValue:
        """Python の値を TweakValue に変換する。

        Raises:
            TweaksError: bool / str / int / float 以外の値が渡された場合
        """
        if isinstance(value, TweakValue):
            return value
        converted = cls.from_stored(value)
        if converted is None:
            raise TweaksError(
                code=TweaksErrorCodes.UNSUPPORTED_VALUE,
                message=f"Unsupported tweak value type: {type(value).__name__}",
            )
        return converted

    @classmethod
    def from_stored(cls, stored: Any) -> TweakValue | None:
        """ストアに格納された値を変換する。解決できない型は None。

        bool は int のサブクラスなので数値より先に判定する。
        """
        if isinstance(stored, str):
            return cls.string(stored)
        if isinstance(stored, bool):
            return cls.boolean(stored)
        if isinstance(stored, (int, float)):
            return cls.number(stored)
        return None

    @property
    def bool_value(self) -> bool | None:
        return self.value if self.kind is TweakValueKind.BOOLEAN else None  # type: ignore[return-value]

    @property
    def string_value(self) -> str | None:
        return self.value if self.kind is TweakValueKind.STRING else None  # type: ignore[return-value]

    @property
    def number_value(self) -> int | float | None:
        return self.value if self.kind is TweakValueKind.NUMBER else None


def _matches_kind(kind: TweakValueKind, value: Any) -> bool:
    if kind is TweakValueKind.BOOLEAN:
        return isinstance(value, bool)
    if kind is TweakValueKind.STRING:
        return isinstance(value, str)
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class Tweak:
    """解決済みのフィーチャーフラグ値。"""

    feature: str
    variable: str
    value: TweakValue
    title: str | None = None
    description: str | None = None
    group: str | None = None

    @property
    def raw_value(self) -> RawTweakValue:
        """保持している Python の値を返す。"""
        return self.value.value


class LogLevel(str, Enum):
    """ログクロージャに渡すログレベル。"""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


TweaksLogClosure = Callable[[str, LogLevel], None]
