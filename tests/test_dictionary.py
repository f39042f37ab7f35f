"""DictionaryTweaksConfiguration のユニットテスト"""

from typing import Any

import pytest
from automation_tweaks import (
    DictionaryTweaksConfiguration,
    MutableTweaksConfiguration,
    Tweak,
    TweaksError,
    TweakValue,
)


@pytest.fixture
def store() -> dict[str, Any]:
    return {}


@pytest.fixture
def configuration(store: dict[str, Any]) -> DictionaryTweaksConfiguration:
    return DictionaryTweaksConfiguration(store)


def test_satisfies_mutable_protocol(configuration: DictionaryTweaksConfiguration) -> None:
    """書き込み可能プロバイダーのプロトコルを満たすこと。"""
    assert isinstance(configuration, MutableTweaksConfiguration)


def test_is_feature_enabled_true_and_false(
    configuration: DictionaryTweaksConfiguration,
) -> None:
    """set した bool がそのまま返ること。"""
    configuration.set(True, feature="k", variable="k")
    assert configuration.is_feature_enabled("k") is True
    configuration.set(False, feature="k", variable="k")
    assert configuration.is_feature_enabled("k") is False


def test_is_feature_enabled_missing(configuration: DictionaryTweaksConfiguration) -> None:
    """未設定のキーは False。"""
    assert configuration.is_feature_enabled("never-set") is False


def test_is_feature_enabled_requires_bool(
    store: dict[str, Any], configuration: DictionaryTweaksConfiguration
) -> None:
    """bool 以外の値は True とみなさないこと。"""
    store["truthy_string"] = "true"
    store["truthy_number"] = 1
    assert configuration.is_feature_enabled("truthy_string") is False
    assert configuration.is_feature_enabled("truthy_number") is False


def test_string_round_trip(configuration: DictionaryTweaksConfiguration) -> None:
    """文字列を set して tweak_with で取得できること。"""
    configuration.set("variantB", feature="exp1", variable="exp1_variant")
    tweak = configuration.tweak_with("exp1", "exp1_variant")
    assert tweak == Tweak(
        feature="exp1", variable="exp1_variant", value=TweakValue.string("variantB")
    )


@pytest.mark.parametrize("number", [0, 7, -3, 2.5])
def test_number_round_trip(configuration: DictionaryTweaksConfiguration, number: float) -> None:
    """数値を set して tweak_with で取得できること。"""
    configuration.set(number, feature="F", variable="V")
    tweak = configuration.tweak_with("F", "V")
    assert tweak is not None
    assert tweak.value.number_value == number


def test_set_accepts_tweak_value(
    store: dict[str, Any], configuration: DictionaryTweaksConfiguration
) -> None:
    """TweakValue を渡すとストアには素の値が保存されること。"""
    configuration.set(TweakValue.number(5), feature="F", variable="V")
    assert store["V"] == 5


def test_set_unsupported_value_raises(configuration: DictionaryTweaksConfiguration) -> None:
    """未対応の型は set できないこと。"""
    with pytest.raises(TweaksError):
        configuration.set([1, 2], feature="F", variable="V")  # type: ignore[arg-type]


def test_tweak_with_uses_variable_key(
    store: dict[str, Any], configuration: DictionaryTweaksConfiguration
) -> None:
    """検索キーは feature ではなく variable であること。"""
    store["shared"] = "value"
    tweak = configuration.tweak_with("any-feature", "shared")
    assert tweak is not None
    assert tweak.feature == "any-feature"
    assert configuration.tweak_with("shared", "other") is None


def test_tweak_with_absent(configuration: DictionaryTweaksConfiguration) -> None:
    """未設定の変数は None。"""
    assert configuration.tweak_with("F", "never-set") is None


def test_tweak_with_unsupported_type(
    store: dict[str, Any], configuration: DictionaryTweaksConfiguration
) -> None:
    """変換できない値は存在していても None。"""
    store["V"] = {"nested": True}
    assert configuration.tweak_with("F", "V") is None


def test_delete_value_is_idempotent(
    store: dict[str, Any], configuration: DictionaryTweaksConfiguration
) -> None:
    """delete_value を 2 回呼んでもエラーにならないこと。"""
    configuration.set("x", feature="F", variable="V")
    configuration.delete_value("F", "V")
    configuration.delete_value("F", "V")
    assert "V" not in store


def test_active_variation_always_none(configuration: DictionaryTweaksConfiguration) -> None:
    """active_variation は常に None。"""
    configuration.set("variantB", feature="exp1", variable="exp1")
    assert configuration.active_variation("exp1") is None


def test_log_closure_is_ignored(configuration: DictionaryTweaksConfiguration) -> None:
    """ログクロージャは保持されないこと。"""
    configuration.log_closure = lambda message, level: None
    assert configuration.log_closure is None


def test_promo_scenario(configuration: DictionaryTweaksConfiguration) -> None:
    """set → 有効化、delete_value → 無効化。"""
    configuration.set(True, "promoA", "enablePromoA")
    assert configuration.is_feature_enabled("enablePromoA") is True
    configuration.delete_value("promoA", "enablePromoA")
    assert configuration.is_feature_enabled("enablePromoA") is False


def test_store_is_borrowed(store: dict[str, Any]) -> None:
    """ストアへの直接の変更がアダプターから見えること。"""
    configuration = DictionaryTweaksConfiguration(store)
    store["flag"] = True
    assert configuration.is_feature_enabled("flag") is True
    assert configuration.store is store
