"""automation tweaks library."""

from .builder import build_coordinator
from .configuration import MutableTweaksConfiguration, TweaksConfiguration
from .coordinator import TweaksConfigurationsCoordinator
from .dictionary import DictionaryTweaksConfiguration
from .exceptions import TweaksError, TweaksErrorCodes
from .local import LocalTweaksConfiguration, LocalTweaksDocument
from .logger import new_logger, structlog_log_closure
from .models import LogLevel, Tweak, TweaksLogClosure, TweakValue, TweakValueKind
from .settings import LogSettings, TweaksSettings, load_settings
from .user_settings import UserSettingsTweaksConfiguration

__all__ = [
    "DictionaryTweaksConfiguration",
    "LocalTweaksConfiguration",
    "LocalTweaksDocument",
    "LogLevel",
    "LogSettings",
    "MutableTweaksConfiguration",
    "Tweak",
    "TweakValue",
    "TweakValueKind",
    "TweaksConfiguration",
    "TweaksConfigurationsCoordinator",
    "TweaksError",
    "TweaksErrorCodes",
    "TweaksLogClosure",
    "TweaksSettings",
    "UserSettingsTweaksConfiguration",
    "build_coordinator",
    "load_settings",
    "new_logger",
    "structlog_log_closure",
]
