"""優先順位付き設定スタック"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .configuration import MutableTweaksConfiguration, TweaksConfiguration
from .exceptions import TweaksError, TweaksErrorCodes
from .models import LogLevel, RawTweakValue, Tweak, TweakValue, TweaksLogClosure

logger = logging.getLogger(__name__)


class TweaksConfigurationsCoordinator:
    """複数の設定プロバイダーを優先順に問い合わせるコーディネーター。

    configurations は優先度の高い順に並べる。最初に応答したプロバイダーが勝つ。
    """

    def __init__(self, configurations: Sequence[TweaksConfiguration]) -> None:
        if not configurations:
            raise TweaksError(
                code=TweaksErrorCodes.NO_CONFIGURATION,
                message="At least one configuration must be specified",
            )
        self._configurations = list(configurations)
        self._log_closure: TweaksLogClosure | None = None

    @property
    def configurations(self) -> list[TweaksConfiguration]:
        return list(self._configurations)

    @property
    def log_closure(self) -> TweaksLogClosure | None:
        return self._log_closure

    @log_closure.setter
    def log_closure(self, closure: TweaksLogClosure | None) -> None:
        """全プロバイダーにログクロージャを伝播する。"""
        self._log_closure = closure
        for configuration in self._configurations:
            configuration.log_closure = closure

    def is_feature_enabled(self, feature: str) -> bool:
        for configuration in self._configurations:
            if configuration.is_feature_enabled(feature):
                self._log(
                    f"Feature '{feature}' enabled by {type(configuration).__name__}",
                    LogLevel.DEBUG,
                )
                return True
        return False

    def tweak_with(self, feature: str, variable: str) -> Tweak | None:
        for configuration in self._configurations:
            tweak = configuration.tweak_with(feature, variable)
            if tweak is not None:
                self._log(
                    f"Tweak '{feature}.{variable}' resolved by {type(configuration).__name__}",
                    LogLevel.DEBUG,
                )
                return tweak
        return None

    def active_variation(self, experiment: str) -> str | None:
        for configuration in self._configurations:
            variation = configuration.active_variation(experiment)
            if variation is not None:
                return variation
        return None

    def value_for(self, feature: str, variable: str, default: Any = None) -> Any:
        """解決した値を返す。どのプロバイダーも応答しなければ default。"""
        tweak = self.tweak_with(feature, variable)
        return tweak.raw_value if tweak is not None else default

    def set(self, value: TweakValue | RawTweakValue, feature: str, variable: str) -> None:
        """最上位の書き込み可能プロバイダーに値を書き込む。"""
        configuration = self._top_mutable_configuration()
        if configuration is None:
            self._log(
                f"No mutable configuration to set '{feature}.{variable}'",
                LogLevel.WARNING,
            )
            return
        configuration.set(value, feature, variable)

    def delete_value(self, feature: str, variable: str) -> None:
        """最上位の書き込み可能プロバイダーから値を削除する。"""
        configuration = self._top_mutable_configuration()
        if configuration is None:
            self._log(
                f"No mutable configuration to delete '{feature}.{variable}'",
                LogLevel.WARNING,
            )
            return
        configuration.delete_value(feature, variable)

    def _top_mutable_configuration(self) -> MutableTweaksConfiguration | None:
        for configuration in self._configurations:
            if isinstance(configuration, MutableTweaksConfiguration):
                return configuration
        return None

    def _log(self, message: str, level: LogLevel) -> None:
        logger.log(_STDLIB_LEVELS[level], message)
        if self._log_closure is not None:
            self._log_closure(message, level)


_STDLIB_LEVELS: dict[LogLevel, int] = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}
