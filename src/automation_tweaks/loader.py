"""YAML ファイル読み込み"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from .exceptions import TweaksError, TweaksErrorCodes

ModelT = TypeVar("ModelT", bound=BaseModel)


def read_yaml(path: Path) -> dict[str, Any]:
    """YAML ファイルを読み込む。空ファイルは空の辞書。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise TweaksError(
            code=TweaksErrorCodes.READ_FILE,
            message=f"Failed to read file: {path}",
            cause=e,
        ) from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise TweaksError(
            code=TweaksErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    if not isinstance(data, dict):
        raise TweaksError(
            code=TweaksErrorCodes.VALIDATION,
            message=f"Top level of {path} must be a mapping",
        )
    return data


def validate(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    """pydantic モデルで検証する。失敗時は TweaksError(VALIDATION_ERROR)。"""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise TweaksError(
            code=TweaksErrorCodes.VALIDATION,
            message=f"Validation failed: {e}",
            cause=e,
        ) from e


def write_yaml(path: Path, data: dict[str, Any]) -> None:
    """辞書を YAML ファイルに書き込む。"""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            yaml.safe_dump(data, allow_unicode=True, sort_keys=True),
            encoding="utf-8",
        )
    except OSError as e:
        raise TweaksError(
            code=TweaksErrorCodes.WRITE_FILE,
            message=f"Failed to write file: {path}",
            cause=e,
        ) from e
