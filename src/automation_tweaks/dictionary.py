"""DictionaryTweaksConfiguration 実装"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from .models import RawTweakValue, Tweak, TweakValue, TweaksLogClosure


class DictionaryTweaksConfiguration:
    """任意の可変マッピングを設定プロバイダーとして公開するアダプター。

    ストアの所有者は呼び出し側。アダプターは参照を保持するだけで状態を持たない。
    複数スレッドから共有する場合の排他制御はストアの所有者が行う。
    """

    def __init__(self, store: MutableMapping[str, Any]) -> None:
        self._store = store

    @property
    def store(self) -> MutableMapping[str, Any]:
        return self._store

    @property
    def log_closure(self) -> TweaksLogClosure | None:
        return None

    @log_closure.setter
    def log_closure(self, closure: TweaksLogClosure | None) -> None:
        pass

    def is_feature_enabled(self, feature: str) -> bool:
        """feature に bool の True が格納されている場合のみ True。"""
        stored = self._store.get(feature)
        return isinstance(stored, bool) and stored

    def tweak_with(self, feature: str, variable: str) -> Tweak | None:
        """variable をキーに値を検索する。見つからないか変換できなければ None。"""
        if variable not in self._store:
            return None
        value = TweakValue.from_stored(self._store[variable])
        if value is None:
            return None
        return Tweak(feature=feature, variable=variable, value=value)

    def active_variation(self, experiment: str) -> str | None:
        return None

    def delete_value(self, feature: str, variable: str) -> None:
        self._store.pop(variable, None)

    def set(self, value: TweakValue | RawTweakValue, feature: str, variable: str) -> None:
        """variable をキーに値を上書き保存する。"""
        self._store[variable] = TweakValue.of(value).value
