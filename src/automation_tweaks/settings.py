"""ライブラリ設定（pydantic BaseModel）"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from .loader import read_yaml, validate


class LogSettings(BaseModel):
    """ログ設定。"""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "text"] = "json"


class TweaksSettings(BaseModel):
    """設定スタックの構成。"""

    defaults_path: Path | None = None
    user_settings_path: Path | None = None
    log: LogSettings = Field(default_factory=LogSettings)


def load_settings(path: Path) -> TweaksSettings:
    """設定ファイルを読み込んで TweaksSettings を返す。

    相対パスは設定ファイルのディレクトリを基準に解決する。
    """
    settings = validate(TweaksSettings, read_yaml(path))
    base = path.parent
    if settings.defaults_path is not None and not settings.defaults_path.is_absolute():
        settings.defaults_path = base / settings.defaults_path
    if (
        settings.user_settings_path is not None
        and not settings.user_settings_path.is_absolute()
    ):
        settings.user_settings_path = base / settings.user_settings_path
    return settings
