"""Tests for utils.py and settings.py."""

import math

import numpy as np
import pytest

from lcg48.enums import Derivation
from lcg48.settings import Settings
from lcg48.utils import (
    to_i32, to_u32, to_i64, to_u64, is_power_of_two,
    f32_bits, f64_bits, f32_from_bits, f64_from_bits, parse_seed, ieee754_log,
)


class TestWrapping:
    def test_i32(self):
        assert to_i32(0x7FFFFFFF) == 2**31 - 1
        assert to_i32(0x80000000) == -2**31
        assert to_i32(2**32) == 0
        assert to_i32(-1) == -1

    def test_u32(self):
        assert to_u32(-1) == 0xFFFFFFFF
        assert to_u32(2**32 + 5) == 5

    def test_i64_u64(self):
        assert to_i64(2**63) == -2**63
        assert to_u64(-1) == 2**64 - 1
        assert to_i64(to_u64(-4962768465676381896)) == -4962768465676381896

    def test_power_of_two(self):
        assert [n for n in range(-4, 20) if is_power_of_two(n)] == [1, 2, 4, 8, 16]


class TestBitPatterns:
    def test_f64(self):
        assert f64_bits(1.0) == 0x3FF0000000000000
        assert f64_bits(-2.0) == 0xC000000000000000
        assert f64_from_bits(0x3FF0000000000000) == 1.0

    def test_f32(self):
        assert f32_bits(1.0) == 0x3F800000
        assert f32_bits(np.float32(0.5)) == 0x3F000000
        value = f32_from_bits(0x3F800000)
        assert isinstance(value, np.float32)
        assert value == 1.0


class TestParseSeed:
    @pytest.mark.parametrize('text,expected', [
        ('42', 42),
        ('0x2A', 42),
        ('-1', -1),
        ('-0x10', -16),
        ('1_000', 1000),
        (' 7 ', 7),
        (5, 5),
    ])
    def test_valid(self, text, expected):
        assert parse_seed(text) == expected

    @pytest.mark.parametrize('text', ['', 'abc', '1.5'])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_seed(text)


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.get_seed() == 0
        assert settings.get_derivation() == Derivation.U32
        assert settings.get_count() == 10
        assert settings.get_bound() is None
        assert settings.is_show_bits() is False

    def test_derivation_from_string(self):
        settings = Settings()
        settings.set_derivation('gaussian')
        assert settings.get_derivation() == Derivation.GAUSSIAN

    def test_bounded_requires_bound(self):
        settings = Settings()
        settings.set_derivation(Derivation.I32_BOUND)
        with pytest.raises(ValueError):
            settings.validate()
        settings.set_bound(10)
        settings.validate()

    def test_negative_count(self):
        with pytest.raises(ValueError):
            Settings().set_count(-1)

    def test_print(self, capsys):
        settings = Settings()
        settings.set_seed(-1)
        settings.set_derivation('bytes')
        settings.print()
        out = capsys.readouterr().out
        assert 'Seed: -1 (0xffffffffffffffff)' in out
        assert 'Byte length: 16' in out


class TestIeee754Log:
    def test_exact_points(self):
        assert ieee754_log(1.0) == 0.0
        assert ieee754_log(2.0) == 0.6931471805599453
        assert ieee754_log(0.5) == -0.6931471805599453

    def test_special_values(self):
        assert ieee754_log(0.0) == float('-inf')
        assert ieee754_log(-0.0) == float('-inf')
        assert math.isnan(ieee754_log(-1.0))
        assert ieee754_log(float('inf')) == float('inf')
        assert math.isnan(ieee754_log(float('nan')))

    def test_subnormal(self):
        tiny = f64_from_bits(1)
        assert ieee754_log(tiny) == pytest.approx(-744.4400719213812, rel=1e-15)

    @pytest.mark.parametrize('x', [1e-300, 1e-10, 0.1, 0.34142, 0.48266, 0.999999, 1.000001, 3.0, 1e10, 1e300])
    def test_close_to_host_log(self, x):
        assert ieee754_log(x) == pytest.approx(math.log(x), rel=1e-15, abs=0.0)
