"""設定スタックの組み立て"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from .configuration import TweaksConfiguration
from .coordinator import TweaksConfigurationsCoordinator
from .dictionary import DictionaryTweaksConfiguration
from .local import LocalTweaksConfiguration
from .logger import new_logger, structlog_log_closure
from .settings import TweaksSettings
from .user_settings import UserSettingsTweaksConfiguration


def build_coordinator(
    settings: TweaksSettings,
    ephemeral_store: MutableMapping[str, Any] | None = None,
) -> TweaksConfigurationsCoordinator:
    """起動時フラグ、ユーザー設定、同梱デフォルト値の順でスタックを組み立てる。

    ログクロージャは settings.log で構成した structlog ロガーに接続する。

    Args:
        settings: スタック構成
        ephemeral_store: テストプロセスから渡された起動時フラグのストア

    Raises:
        TweaksError: どのプロバイダーも構成されない場合、またはファイルの読み込みに失敗した場合
    """
    configurations: list[TweaksConfiguration] = []
    if ephemeral_store is not None:
        configurations.append(DictionaryTweaksConfiguration(ephemeral_store))
    if settings.user_settings_path is not None:
        configurations.append(UserSettingsTweaksConfiguration(settings.user_settings_path))
    if settings.defaults_path is not None:
        configurations.append(LocalTweaksConfiguration.from_file(settings.defaults_path))
    coordinator = TweaksConfigurationsCoordinator(configurations)
    coordinator.log_closure = structlog_log_closure(
        new_logger(level=settings.log.level, format=settings.log.format)
    )
    return coordinator
