"""TweaksConfiguration プロトコル"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import RawTweakValue, Tweak, TweakValue, TweaksLogClosure


@runtime_checkable
class TweaksConfiguration(Protocol):
    """読み取り専用の設定プロバイダープロトコル。"""

    @property
    def log_closure(self) -> TweaksLogClosure | None: ...

    @log_closure.setter
    def log_closure(self, closure: TweaksLogClosure | None) -> None: ...

    def is_feature_enabled(self, feature: str) -> bool: ...

    def tweak_with(self, feature: str, variable: str) -> Tweak | None: ...

    def active_variation(self, experiment: str) -> str | None: ...


@runtime_checkable
class MutableTweaksConfiguration(TweaksConfiguration, Protocol):
    """書き込み可能な設定プロバイダープロトコル。"""

    def delete_value(self, feature: str, variable: str) -> None: ...

    def set(
        self, value: TweakValue | RawTweakValue, feature: str, variable: str
    ) -> None: ...
