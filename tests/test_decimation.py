"""Tests for every-nth decimation of label sequences."""

import numpy as np
import pytest

from axomatic import DecimationMode, InvalidArgumentError, decimate


class TestDefaultMode:
    """Keep every nth value starting with the first, blank the rest."""

    def test_stride_one_is_identity(self):
        values = ["0", "1", "2", "3"]
        assert decimate(values, 1) == values

    def test_every_fifth(self):
        values = [str(i) for i in range(21)]
        result = decimate(values, 5)

        assert len(result) == 21
        kept = [v for v in result if v != ""]
        assert kept == ["0", "5", "10", "15", "20"]
        assert [i for i, v in enumerate(result) if v] == [0, 5, 10, 15, 20]

    def test_first_always_kept(self):
        assert decimate(["a", "b", "c"], 2)[0] == "a"

    def test_shorter_than_stride_keeps_only_first(self):
        assert decimate(["a", "b", "c"], 10) == ["a", "", ""]

    def test_custom_blank_value(self):
        assert decimate([1, 2, 3, 4], 2, blank_value=None) == [1, None, 3, None]

    def test_numpy_input(self):
        result = decimate(np.arange(6), 3)
        assert result[0] == 0
        assert result[3] == 3
        assert result[1] == ""

    def test_empty(self):
        assert decimate([], 3) == []


class TestOtherModes:
    """The remaining combinations of keep_first and mode."""

    def test_blank_selected(self):
        assert decimate(["a", "b", "c", "d"], 2, keep_first=False) == ["", "b", "", "d"]

    def test_drop_unselected(self):
        result = decimate(["a", "b", "c", "d", "e"], 2, mode=DecimationMode.DROP)
        assert result == ["a", "c", "e"]

    def test_drop_selected(self):
        result = decimate(["a", "b", "c", "d", "e"], 2, keep_first=False, mode="drop")
        assert result == ["b", "d"]

    def test_unknown_mode(self):
        with pytest.raises(InvalidArgumentError):
            decimate(["a"], 1, mode="shuffle")


class TestStrideValidation:
    @pytest.mark.parametrize("stride", [0, -1, 2.5, float("nan"), "2", True])
    def test_rejects_bad_stride(self, stride):
        with pytest.raises(InvalidArgumentError):
            decimate(["a", "b"], stride)

    def test_accepts_integral_float(self):
        assert decimate(["a", "b", "c"], 2.0) == ["a", "", "c"]

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            decimate(["a"], 0)
