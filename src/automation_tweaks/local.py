"""同梱デフォルト値の読み取り専用プロバイダー"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from .loader import read_yaml, validate
from .models import Tweak, TweakValue, TweaksLogClosure


class LocalVariable(BaseModel):
    """変数定義。"""

    value: Union[StrictBool, StrictInt, StrictFloat, StrictStr]
    title: str | None = None
    description: str | None = None
    group: str | None = None


class LocalFeature(BaseModel):
    """フィーチャー定義。"""

    enabled: StrictBool = False
    variables: dict[str, LocalVariable] = Field(default_factory=dict)


class LocalTweaksDocument(BaseModel):
    """同梱デフォルト値ファイル全体。"""

    features: dict[str, LocalFeature] = Field(default_factory=dict)
    experiments: dict[str, str] = Field(default_factory=dict)


class LocalTweaksConfiguration:
    """YAML ファイルから読み込んだデフォルト値を返すプロバイダー。"""

    def __init__(self, document: LocalTweaksDocument) -> None:
        self._document = document

    @classmethod
    def from_file(cls, path: Path) -> LocalTweaksConfiguration:
        """YAML ファイルから生成する。

        Raises:
            TweaksError: 読み込み、パース、検証のいずれかに失敗した場合
        """
        return cls(validate(LocalTweaksDocument, read_yaml(path)))

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> LocalTweaksConfiguration:
        return cls(validate(LocalTweaksDocument, data))

    @property
    def log_closure(self) -> TweaksLogClosure | None:
        return None

    @log_closure.setter
    def log_closure(self, closure: TweaksLogClosure | None) -> None:
        pass

    def is_feature_enabled(self, feature: str) -> bool:
        definition = self._document.features.get(feature)
        return definition is not None and definition.enabled

    def tweak_with(self, feature: str, variable: str) -> Tweak | None:
        definition = self._document.features.get(feature)
        if definition is None:
            return None
        entry = definition.variables.get(variable)
        if entry is None:
            return None
        return Tweak(
            feature=feature,
            variable=variable,
            value=TweakValue.of(entry.value),
            title=entry.title,
            description=entry.description,
            group=entry.group,
        )

    def active_variation(self, experiment: str) -> str | None:
        return self._document.experiments.get(experiment)
