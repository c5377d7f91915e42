import random

import pytest

from bitprims.core.widths import BitArgumentError
from bitprims.ops.bits import (
    clear_bit,
    count_set_bits,
    format_binary,
    get_bit_status,
    is_even,
    is_power_of_2,
    set_bit,
    toggle_bit,
)

_RNG = random.Random(1234)
_SAMPLE_BYTES = sorted(
    {0, 1, 0x55, 0xAA, 0x7F, 0x80, 0xFF}
    | {_RNG.randint(0, 255) for _ in range(24)}
)


class TestSingleBit:
    def test_known_values(self) -> None:
        assert set_bit(0b0000, 2) == 0b0100
        assert clear_bit(0b1111, 0) == 0b1110
        assert toggle_bit(0b1010, 1) == 0b1000
        assert get_bit_status(0b1000_0000, 7) == 1
        assert get_bit_status(0b0111_1111, 7) == 0

    @pytest.mark.parametrize("x", _SAMPLE_BYTES)
    def test_set_then_get_is_one_clear_then_get_is_zero(self, x: int) -> None:
        for p in range(8):
            assert get_bit_status(set_bit(x, p), p) == 1
            assert get_bit_status(clear_bit(x, p), p) == 0

    @pytest.mark.parametrize("x", _SAMPLE_BYTES)
    def test_other_bits_untouched(self, x: int) -> None:
        for p in range(8):
            others = 0xFF & ~(1 << p)
            assert set_bit(x, p) & others == x & others
            assert clear_bit(x, p) & others == x & others
            assert toggle_bit(x, p) & others == x & others

    @pytest.mark.parametrize("x", _SAMPLE_BYTES)
    def test_toggle_is_involution(self, x: int) -> None:
        for p in range(8):
            assert toggle_bit(toggle_bit(x, p), p) == x

    def test_results_stay_in_byte(self) -> None:
        assert clear_bit(0xFF, 7) == 0x7F
        assert set_bit(0xFF, 7) == 0xFF
        assert toggle_bit(0x80, 7) == 0

    def test_operands_are_truncated_to_byte(self) -> None:
        assert set_bit(0x100, 0) == 0x01
        assert get_bit_status(-1, 7) == 1

    @pytest.mark.parametrize(
        "fn", [set_bit, clear_bit, toggle_bit, get_bit_status]
    )
    @pytest.mark.parametrize("p", [-1, 8, 32])
    def test_out_of_range_position_raises(self, fn, p: int) -> None:
        with pytest.raises(BitArgumentError):
            fn(0x0F, p)

    def test_bool_operand_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            set_bit(True, 0)


class TestParityAndCounting:
    def test_is_even(self) -> None:
        assert is_even(0) is True
        assert is_even(2) is True
        assert is_even(255) is False

    def test_count_set_bits_known(self) -> None:
        assert count_set_bits(0) == 0
        assert count_set_bits(0b1011) == 3
        assert count_set_bits(0xFF) == 8

    @pytest.mark.parametrize("x", _SAMPLE_BYTES)
    def test_count_with_complement_is_eight(self, x: int) -> None:
        assert count_set_bits(x) + count_set_bits(~x & 0xFF) == 8

    def test_is_power_of_2_known(self) -> None:
        assert is_power_of_2(0) is False
        assert [x for x in range(256) if is_power_of_2(x)] == [
            1,
            2,
            4,
            8,
            16,
            32,
            64,
            128,
        ]

    def test_is_power_of_2_matches_single_bit_count(self) -> None:
        for x in range(1, 256):
            assert is_power_of_2(x) == (count_set_bits(x) == 1)

    @pytest.mark.full
    def test_count_matches_native_popcount_exhaustive(self) -> None:
        for x in range(256):
            assert count_set_bits(x) == bin(x).count("1")


class TestFormatBinary:
    @pytest.mark.parametrize(
        ("x", "expected"),
        [
            (0, "00000000"),
            (255, "11111111"),
            (5, "00000101"),
            (0x80, "10000000"),
        ],
    )
    def test_known_values(self, x: int, expected: str) -> None:
        assert format_binary(x) == expected

    def test_results_are_independent(self) -> None:
        first = format_binary(1)
        second = format_binary(2)
        assert first == "00000001"
        assert second == "00000010"

    def test_matches_native_format(self) -> None:
        for x in range(256):
            assert format_binary(x) == f"{x:08b}"
