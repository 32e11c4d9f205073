"""
FFT domain tests: FFTSettings, fft_fr, coset_ifft
"""
import pytest
from kzg.errors import BadArgumentsError
from kzg.fft import FFTSettings, fft_fr, coset_ifft
from kzg.field import FR
from kzg.polynomial import Polynomial


class TestFFTSettings:
    def test_max_width(self, fs3):
        assert fs3.max_width == 8

    def test_expanded_roots_length(self, fs3):
        assert len(fs3.expanded_roots_of_unity) == 9

    def test_expanded_roots_endpoints(self, fs3):
        assert fs3.expanded_roots_of_unity[0] == FR(1)
        assert fs3.expanded_roots_of_unity[8] == FR(1)

    def test_reverse_roots(self, fs3):
        assert list(fs3.reverse_roots_of_unity) == list(reversed(fs3.expanded_roots_of_unity))

    def test_root_is_primitive(self, fs3):
        w = fs3.root_of_unity
        assert w ** 8 == FR(1)
        assert w ** 4 != FR(1)

    def test_scale_zero(self):
        fs = FFTSettings(0)
        assert fs.max_width == 1
        assert fs.roots_of_unity(1) == [FR(1)]

    @pytest.mark.parametrize("scale", [-1, 29])
    def test_invalid_scale(self, scale):
        with pytest.raises(BadArgumentsError):
            FFTSettings(scale)

    def test_roots_of_unity_stride(self, fs3):
        roots = fs3.roots_of_unity(4)
        w = fs3.root_of_unity
        assert roots == [FR(1), w ** 2, w ** 4, w ** 6]

    def test_root_of_unity_for(self, fs4):
        w8 = fs4.root_of_unity_for(8)
        assert w8 ** 8 == FR(1)
        assert w8 ** 4 != FR(1)

    def test_roots_of_unity_distinct(self, fs4):
        roots = fs4.roots_of_unity(16)
        assert len(set(int(r) for r in roots)) == 16

    def test_width_checks(self, fs3):
        with pytest.raises(BadArgumentsError):
            fs3.roots_of_unity(3)
        with pytest.raises(BadArgumentsError):
            fs3.roots_of_unity(16)


class TestFFT:
    def test_fft_single(self, fs3):
        assert fft_fr([FR(42)], False, fs3) == [FR(42)]

    def test_fft_evaluates_on_subgroup(self, fs3):
        coeffs = [FR(1), FR(2), FR(3), FR(4)]
        evals = fft_fr(coeffs, False, fs3)
        p = Polynomial(coeffs)
        for w, v in zip(fs3.roots_of_unity(4), evals):
            assert v == p.evaluate(w)

    def test_fft_full_width(self, fs3):
        coeffs = [FR(i * i + 1) for i in range(8)]
        evals = fft_fr(coeffs, False, fs3)
        p = Polynomial(coeffs)
        assert evals == [p.evaluate(w) for w in fs3.roots_of_unity(8)]

    def test_inverse_interpolates(self, fs3):
        evals = [FR(3), FR(1), FR(4), FR(1), FR(5), FR(9), FR(2), FR(6)]
        coeffs = fft_fr(evals, True, fs3)
        p = Polynomial(coeffs)
        for w, v in zip(fs3.roots_of_unity(8), evals):
            assert p.evaluate(w) == v

    def test_roundtrip(self, fs4):
        coeffs = [FR(7 * i + 3) for i in range(16)]
        assert fft_fr(fft_fr(coeffs, False, fs4), True, fs4) == coeffs

    def test_accepts_ints(self, fs3):
        assert fft_fr([1, 0], False, fs3) == [FR(1), FR(1)]

    def test_non_power_of_two_raises(self, fs3):
        with pytest.raises(BadArgumentsError):
            fft_fr([FR(1), FR(2), FR(3)], False, fs3)

    def test_too_wide_raises(self, fs3):
        with pytest.raises(BadArgumentsError):
            fft_fr([FR(1)] * 16, True, fs3)

    def test_empty_raises(self, fs3):
        with pytest.raises(BadArgumentsError):
            fft_fr([], False, fs3)


class TestCosetIFFT:
    def test_recovers_low_degree_polynomial(self, fs3):
        p = Polynomial([FR(c) for c in [9, 8, 7, 6, 5, 4, 3, 2]])
        x = FR(5431)
        ys = [p.evaluate(x * w) for w in fs3.roots_of_unity(8)]
        assert coset_ifft(ys, x, fs3) == p.coeffs

    def test_interpolates_on_coset(self, fs3):
        x = FR(77)
        ys = [FR(2), FR(0), FR(11), FR(5)]
        interp = Polynomial(coset_ifft(ys, x, fs3))
        for w, y in zip(fs3.roots_of_unity(4), ys):
            assert interp.evaluate(x * w) == y

    def test_generator_one_matches_plain_ifft(self, fs3):
        ys = [FR(4), FR(3), FR(2), FR(1)]
        assert coset_ifft(ys, FR(1), fs3) == fft_fr(ys, True, fs3)

    def test_single_value_with_zero_generator(self, fs3):
        assert coset_ifft([FR(13)], FR(0), fs3) == [FR(13)]

    def test_zero_generator_raises(self, fs3):
        with pytest.raises(BadArgumentsError):
            coset_ifft([FR(1), FR(2)], FR(0), fs3)
