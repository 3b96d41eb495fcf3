"""Tests for unicode_truncate.width"""
import pytest

from unicode_truncate.width import WidthOracle, make_wcwidth_oracle, resolve_width, wcwidth_oracle


class TestWcwidthOracle:
    def test_ascii(self):
        assert wcwidth_oracle("a") == 1

    def test_cjk_is_wide(self):
        assert wcwidth_oracle("你") == 2

    def test_combining_mark_is_zero(self):
        assert wcwidth_oracle("\u0301") == 0

    def test_cluster_with_combining_mark(self):
        assert wcwidth_oracle("e\u0301") == 1

    def test_control_has_no_width(self):
        assert wcwidth_oracle("\x07") is None
        assert wcwidth_oracle("\t") is None

    def test_empty_unit(self):
        assert wcwidth_oracle("") == 0

    def test_satisfies_protocol(self):
        assert isinstance(wcwidth_oracle, WidthOracle)


class TestMakeWcwidthOracle:
    def test_default_is_narrow(self):
        oracle = make_wcwidth_oracle()
        assert oracle("\u00b1") == 1

    def test_ambiguous_wide(self):
        oracle = make_wcwidth_oracle(2)
        assert oracle("\u00b1") == 2
        assert oracle("a") == 1

    def test_invalid_ambiguous_width(self):
        with pytest.raises(ValueError):
            make_wcwidth_oracle(3)


class TestResolveWidth:
    def test_known_width_passes_through(self):
        assert resolve_width(lambda _u: 2, "x", 1) == 2

    def test_undefined_uses_fallback(self):
        assert resolve_width(lambda _u: None, "x", 1) == 1
        assert resolve_width(lambda _u: None, "x", 0) == 0
