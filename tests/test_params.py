"""Tests for parameter validation and mask derivation."""

import pytest
from qrprng.errors import (
    InvalidPrimeForm,
    NotPrime,
    OffsetOutOfRange,
    ValidationError,
)
from qrprng.params import (
    DEFAULT_INTERMEDIATE_OFFSET,
    DEFAULT_PRIME,
    UINT64_MASK,
    Params,
    calculate_mask,
    calculate_max_mask,
    is_probable_prime,
)


class TestParams:
    """Tests for valid parameters."""

    def test_valid_small_prime(self):
        """11 is prime and 3 mod 4."""
        params = Params(11, 0, 0)
        assert params.prime == 11
        assert params.intermediate_offset == 0
        assert params.offset == 0

    def test_offset_defaults_to_zero(self):
        params = Params(19, 3)
        assert params.offset == 0

    def test_offset_may_exceed_prime(self):
        """Offset is unconstrained relative to prime."""
        params = Params(11, 0, 1_000_000)
        assert params.offset == 1_000_000

    def test_default_params(self):
        """Default constants are valid."""
        params = Params.default()
        assert params.prime == DEFAULT_PRIME == 2**64 - 189
        assert params.intermediate_offset == DEFAULT_INTERMEDIATE_OFFSET
        assert params.offset == 0

    def test_immutable(self):
        """Params cannot be modified after construction."""
        params = Params(11, 0, 0)
        with pytest.raises(AttributeError):
            params.prime = 19
        with pytest.raises(AttributeError):
            params.mask = 0

    def test_period(self):
        assert Params(23, 0).period == 23

    def test_contains(self):
        params = Params(11, 0)
        assert params.contains(0)
        assert params.contains(10)
        assert not params.contains(11)
        assert not params.contains(-1)


class TestParamsErrors:
    """Test validation errors and their order."""

    def test_invalid_prime_form(self):
        """Primes that are 1 mod 4 are rejected."""
        with pytest.raises(InvalidPrimeForm):
            Params(13, 0, 0)

    def test_invalid_prime_form_composite(self):
        """21 = 1 mod 4 fails the form check before the primality check."""
        with pytest.raises(InvalidPrimeForm):
            Params(21, 0, 0)

    def test_form_checked_before_offset(self):
        with pytest.raises(InvalidPrimeForm):
            Params(13, 20, 0)

    def test_prime_too_large(self):
        """Prime must fit in 64 bits."""
        with pytest.raises(InvalidPrimeForm):
            Params(2**64 + 3, 0, 0)

    def test_prime_non_positive(self):
        """-1 is 3 mod 4 in Python; still rejected."""
        with pytest.raises(InvalidPrimeForm):
            Params(-1, 0, 0)

    def test_offset_out_of_range(self):
        """Intermediate offset must be less than prime."""
        with pytest.raises(OffsetOutOfRange):
            Params(11, 11, 0)
        with pytest.raises(OffsetOutOfRange):
            Params(11, 15, 0)

    def test_negative_intermediate_offset(self):
        with pytest.raises(OffsetOutOfRange):
            Params(11, -1, 0)

    def test_offset_checked_before_primality(self):
        """15 is 3 mod 4 but composite; the offset check wins."""
        with pytest.raises(OffsetOutOfRange):
            Params(15, 20, 0)

    def test_not_prime(self):
        """Composites that are 3 mod 4 are rejected."""
        for n in [15, 35, 2047, 3_215_031_751]:
            assert n % 4 == 3
            with pytest.raises(NotPrime):
                Params(n, 0, 0)

    def test_output_offset_out_of_range(self):
        with pytest.raises(ValidationError):
            Params(11, 0, -1)
        with pytest.raises(ValidationError):
            Params(11, 0, 2**64)

    def test_errors_are_value_errors(self):
        """Validation errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            Params(13, 0, 0)
        with pytest.raises(ValueError):
            Params(11, 11, 0)
        with pytest.raises(ValueError):
            Params(15, 0, 0)

    def test_error_carries_value(self):
        with pytest.raises(OffsetOutOfRange) as exc_info:
            Params(11, 15, 0)
        assert exc_info.value.intermediate_offset == 15
        assert exc_info.value.prime == 11
        assert "15" in str(exc_info.value)

    def test_non_int_rejected(self):
        with pytest.raises(TypeError):
            Params(11.0, 0, 0)
        with pytest.raises(TypeError):
            Params(11, True, 0)


class TestMask:
    """Tests for max_mask and mask derivation."""

    def test_max_mask(self):
        """max_mask has one fewer bit than prime - 1."""
        assert calculate_max_mask(11) == 7
        assert calculate_max_mask(7) == 3
        assert calculate_max_mask(3) == 1
        assert calculate_max_mask(DEFAULT_PRIME) == 2**63 - 1

    def test_mask_small_prime(self):
        """For 11: lo = 4, span = 3, mask = 4 + (11 + io) % 3."""
        assert Params(11, 0).mask == 6
        assert Params(11, 1).mask == 4
        assert Params(11, 2).mask == 5

    def test_mask_range(self):
        """Mask lies in [lo, max_mask)."""
        for prime in [7, 11, 19, 23, 31, 43, 10007]:
            for io in range(0, min(prime, 50)):
                params = Params(prime, io)
                lo = 1 << (params.max_mask.bit_length() - 1)
                assert lo <= params.mask < params.max_mask or params.mask == lo
                assert params.max_mask < prime

    def test_mask_prime_three(self):
        """The mask range is empty for prime 3; lo is used."""
        params = Params(3, 0)
        assert params.max_mask == 1
        assert params.mask == 1
        assert calculate_mask(3, 2, 1) == 1

    def test_mask_default(self):
        params = Params.default()
        assert 2**62 <= params.mask < 2**63 - 1


class TestIsProbablePrime:
    """Tests for the primality check."""

    def test_small_primes(self):
        for p in [2, 3, 5, 7, 11, 13, 9_021_057_379]:
            assert is_probable_prime(p)

    def test_small_non_primes(self):
        for n in [-7, 0, 1, 4, 9, 15, 21, 561, 2047]:
            assert not is_probable_prime(n)

    def test_default_prime(self):
        assert is_probable_prime(DEFAULT_PRIME)
        assert DEFAULT_PRIME % 4 == 3
        assert DEFAULT_PRIME == UINT64_MASK - 188

    def test_large_composite(self):
        assert not is_probable_prime(DEFAULT_PRIME + 1)
        assert not is_probable_prime((2**31 - 1) * (2**31 - 1))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
