import logging
import math

import numpy as np
import pandas as pd
import pytest

from balanced_ma import (
    UnknownVariantError,
    Variant,
    moving_average,
    moving_averages,
    resolve_variant,
    supported_variants,
    to_float_array,
    v_size,
)


def test_short_input_returned_unchanged():
    assert moving_average([1, 2, 3], "SMA", 2) == [1, 2, 3]
    assert moving_average(["1", "x"], "BEMA", 2) == ["1", "x"]


def test_short_input_is_a_copy():
    values = [1, 2, 3]
    result = moving_average(values, "SMA", 2)
    assert result is not values


def test_missing_or_empty_input():
    assert moving_average(None, "SMA", 3) == []
    assert moving_average([], "SMA", 3) == []
    assert moving_average(np.array([]), "BSMA", 3) == []


def test_unknown_variant_is_empty():
    assert moving_average([1, 2, 3, 4, 5], "XYZ", 3) == []


@pytest.mark.parametrize("selector", ["xSMA", "SMAWMA", "BSMA ", "B", "", 3, None])
def test_selector_requires_exact_name(selector):
    assert resolve_variant(selector) is None
    assert moving_average([1, 2, 3, 4, 5], selector, 3) == []


@pytest.mark.parametrize("selector,variant", [
    ("sma", Variant.SMA),
    ("Bsma", Variant.BSMA),
    ("wMa", Variant.WMA),
    ("BWMA", Variant.BWMA),
    ("ema", Variant.EMA),
    ("bema", Variant.BEMA),
    ("slope", Variant.SLOPE),
    ("BSlope", Variant.BSLOPE),
    (Variant.BEMA, Variant.BEMA),
])
def test_selector_is_case_insensitive(selector, variant):
    assert resolve_variant(selector) is variant


def test_variant_families():
    assert Variant.BWMA.balanced and Variant.BWMA.family == "wma"
    assert not Variant.SLOPE.balanced and Variant.SLOPE.family == "slope"
    assert Variant.BSLOPE.family == "slope"
    assert [v for v in Variant if v.balanced] == [
        Variant.BSMA, Variant.BWMA, Variant.BEMA, Variant.BSLOPE
    ]


def test_supported_variants():
    assert supported_variants() == ["SMA", "BSMA", "WMA", "BWMA", "EMA", "BEMA", "Slope", "BSlope"]
    assert supported_variants(balanced=True) == ["BSMA", "BWMA", "BEMA", "BSlope"]


def test_enum_and_string_selectors_agree():
    values = [4, 8, 15, 16, 23, 42]
    for variant in Variant:
        assert moving_average(values, variant, 4) == moving_average(values, variant.value, 4)


def test_deterministic():
    rng = np.random.default_rng(3)
    values = rng.normal(size=50).tolist()
    for variant in Variant:
        first = moving_average(values, variant, 7)
        second = moving_average(values, variant, 7)
        np.testing.assert_array_equal(
            np.array(first, dtype=float), np.array(second, dtype=float)
        )


def test_values_are_coerced():
    assert moving_average(["1", "2", 3, "4.5"], "SMA", 1) == [1, 2, 3, 4.5]


def test_non_numeric_becomes_nan():
    result = moving_average([1, "abc", 3, 4, None], "SMA", 1)
    assert result[0] == 1 and result[2:4] == [3, 4]
    assert math.isnan(result[1]) and math.isnan(result[4])


def test_accepts_series_and_arrays():
    values = [2.0, 4.0, 6.0, 8.0, 10.0]
    expected = moving_average(values, "BWMA", 3)
    assert moving_average(np.array(values), "BWMA", 3) == expected
    assert moving_average(pd.Series(values, index=list("abcde")), "BWMA", 3) == expected
    assert moving_average(tuple(values), "BWMA", 3) == expected


def test_non_positive_size_is_raised_to_one():
    values = [3.0, 1.0, 2.0, 5.0]
    assert moving_average(values, "SMA", 0) == values
    assert moving_average(values, "SMA", -4) == values


def test_strict_mode_raises():
    values = [1, 2, 3, 4, 5]
    with pytest.raises(UnknownVariantError):
        moving_average(values, "XYZ", 3, strict=True)
    with pytest.raises(ValueError):
        moving_average(values, "SMA", 0, strict=True)
    with pytest.raises(ValueError):
        moving_average(values, "SMA", 2.5, strict=True)
    with pytest.raises(ValueError):
        moving_average([1, 2, "abc", 4], "SMA", 2, strict=True)


def test_strict_mode_accepts_missing_values():
    result = moving_average([1, None, 3, 4], "SMA", 1, strict=True)
    assert math.isnan(result[1])


def test_unknown_variant_error_is_value_error():
    error = UnknownVariantError("foo")
    assert isinstance(error, ValueError)
    assert "'foo'" in str(error) and "BSlope" in str(error)


def test_size_clamp_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="balanced_ma"):
        assert v_size(50, 6) == 6
    assert "clamped" in caplog.text


def test_v_size():
    assert v_size(3, 10) == 3
    assert v_size(3.9, 10) == 3
    assert v_size("x", 10) == 1
    assert v_size(0, 10) == 1


def test_to_float_array_copies():
    values = np.array([1.0, 2.0, 3.0])
    result = to_float_array(values)
    result[0] = 9.0
    assert values[0] == 1.0


def test_moving_averages_frame():
    values = pd.Series([float(i) for i in range(20)])
    specs = [
        {"kind": "sma", "length": 3},
        {"kind": "BSMA", "length": 6},
        {"kind": "bslope", "length": 6, "prefix": "x"},
        {"kind": "ema"},
        {"kind": "nope", "length": 3},
    ]
    df = moving_averages(values, specs)
    assert list(df.columns) == ["SMA_3", "BSMA_6", "x_BSLOPE_6", "EMA_10"]
    assert len(df) == 20
    assert df["BSMA_6"].tolist() == pytest.approx(values.tolist())
    assert df["x_BSLOPE_6"].isna().sum() == 12
    assert df["SMA_3"].tolist() == moving_average(values, "SMA", 3)


def test_moving_averages_col_names():
    df = moving_averages([1, 2, 3, 4, 5], [{"kind": "wma", "length": 2, "col_names": ("w",)}])
    assert list(df.columns) == ["w"]
    with pytest.raises(UnknownVariantError):
        moving_averages([1, 2, 3, 4, 5], [{"kind": "nope"}], strict=True)


def test_moving_averages_short_input():
    df = moving_averages(["1", "2"], [{"kind": "sma", "length": 2}])
    assert df["SMA_2"].tolist() == [1.0, 2.0]


def test_infinite_size_clamps_to_length():
    values = [1, 2, 3, 4, 5]
    assert moving_average(values, "SMA", float("inf")) == [1.0, 1.5, 2.0, 2.5, 3.0]
    assert moving_average(values, "BSMA", float("inf")) == moving_average(values, "BSMA", 5)
    assert v_size(float("inf"), 5) == 5
    assert v_size(float("-inf"), 5) == 1
    assert v_size(float("nan"), 5) == 1


def test_moving_averages_infinite_length_uses_default():
    df = moving_averages([1, 2, 3, 4, 5], [{"kind": "sma", "length": float("inf")}])
    assert list(df.columns) == ["SMA_10"]


@pytest.mark.parametrize("length", [0, -3, 2.5, "abc", float("inf")])
def test_moving_averages_strict_length(length):
    with pytest.raises(ValueError):
        moving_averages([1, 2, 3, 4, 5], [{"kind": "sma", "length": length}], strict=True)


def test_extended_ignored_outside_bslope(caplog):
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    with caplog.at_level(logging.DEBUG, logger="balanced_ma"):
        result = moving_average(values, "SMA", 3, extended=True)
    assert result == moving_average(values, "SMA", 3)
    assert "extended" in caplog.text


def test_moving_averages_duplicate_column(caplog):
    specs = [{"kind": "sma", "length": 3}, {"kind": "SMA", "length": 3}]
    with caplog.at_level(logging.WARNING, logger="balanced_ma"):
        df = moving_averages([1, 2, 3, 4, 5], specs)
    assert list(df.columns) == ["SMA_3"]
    assert "duplicate" in caplog.text
    with pytest.raises(ValueError):
        moving_averages([1, 2, 3, 4, 5], specs, strict=True)
