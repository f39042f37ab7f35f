"""YAML ファイルに永続化するユーザー設定プロバイダー"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .dictionary import DictionaryTweaksConfiguration
from .loader import read_yaml, write_yaml
from .models import LogLevel, RawTweakValue, Tweak, TweakValue, TweaksLogClosure

logger = logging.getLogger(__name__)


class UserSettingsTweaksConfiguration:
    """ユーザー設定をフラットな YAML マッピングとして保存するプロバイダー。

    参照は DictionaryTweaksConfiguration と同じ規則で解決し、
    set / delete_value のたびにファイルへ書き戻す。
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._values: dict[str, Any] = read_yaml(path) if path.exists() else {}
        self._dictionary = DictionaryTweaksConfiguration(self._values)
        self._log_closure: TweaksLogClosure | None = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def log_closure(self) -> TweaksLogClosure | None:
        return self._log_closure

    @log_closure.setter
    def log_closure(self, closure: TweaksLogClosure | None) -> None:
        self._log_closure = closure

    def is_feature_enabled(self, feature: str) -> bool:
        return self._dictionary.is_feature_enabled(feature)

    def tweak_with(self, feature: str, variable: str) -> Tweak | None:
        return self._dictionary.tweak_with(feature, variable)

    def active_variation(self, experiment: str) -> str | None:
        return self._dictionary.active_variation(experiment)

    def delete_value(self, feature: str, variable: str) -> None:
        if variable not in self._values:
            return
        updated = dict(self._values)
        DictionaryTweaksConfiguration(updated).delete_value(feature, variable)
        self._save(updated)

    def set(self, value: TweakValue | RawTweakValue, feature: str, variable: str) -> None:
        updated = dict(self._values)
        DictionaryTweaksConfiguration(updated).set(value, feature, variable)
        self._save(updated)

    def _save(self, updated: dict[str, Any]) -> None:
        """ファイルへの書き込みに成功した場合のみメモリ上の値を置き換える。"""
        write_yaml(self._path, updated)
        self._values.clear()
        self._values.update(updated)
        logger.debug("User settings saved", extra={"path": str(self._path)})
        if self._log_closure is not None:
            self._log_closure(f"User settings saved to {self._path}", LogLevel.DEBUG)
