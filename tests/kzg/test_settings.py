"""
Tests for the test-only SRS generator and the KZGSettings lifecycle.
"""
import logging

import pytest
from kzg.errors import BadArgumentsError
from kzg.fft import FFTSettings
from kzg.field import FR, G1, G2, ec_mul, pairings_verify
from kzg.polynomial import Polynomial
from kzg.proofs import commit
from kzg.settings import KZGSettings
from kzg.srs import SRS


# ─────────────────────────────────────────────────────────────────────
# SRS Tests
# ─────────────────────────────────────────────────────────────────────

class TestSRS:
    """SRS.generate 테스트."""

    def test_lengths(self, srs):
        assert srs.length == 17
        assert len(srs.g1_powers) == 17
        assert len(srs.g2_powers) == 17

    def test_first_elements_are_generators(self, srs):
        assert srs.g1_powers[0] == G1
        assert srs.g2_powers[0] == G2

    def test_g1_and_g2_share_secret(self, srs):
        """s·G1 과 s·G2 는 같은 s 로 만들어졌다: e(s·G1, G2) == e(G1, s·G2)."""
        assert pairings_verify(srs.g1_powers[1], G2, G1, srs.g2_powers[1])

    def test_consecutive_powers_distinct(self, srs):
        for i in range(len(srs.g1_powers) - 1):
            assert srs.g1_powers[i] != srs.g1_powers[i + 1]

    def test_deterministic_with_same_seed(self):
        srs1 = SRS.generate(length=3, seed=99)
        srs2 = SRS.generate(length=3, seed=99)
        assert srs1.g1_powers == srs2.g1_powers
        assert srs1.g2_powers == srs2.g2_powers

    def test_different_seeds(self):
        srs1 = SRS.generate(length=2, seed=1)
        srs2 = SRS.generate(length=2, seed=2)
        assert srs1.g1_powers[1] != srs2.g1_powers[1]

    def test_without_seed(self):
        srs = SRS.generate(length=2)
        assert srs.length == 2
        assert srs.g1_powers[0] == G1

    def test_zero_length_raises(self):
        with pytest.raises(BadArgumentsError):
            SRS.generate(length=0, seed=1)

    def test_logs_insecure_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="kzg.srs"):
            SRS.generate(length=1, seed=5)
        assert any(r.levelno == logging.WARNING for r in caplog.records)


# ─────────────────────────────────────────────────────────────────────
# KZGSettings Tests
# ─────────────────────────────────────────────────────────────────────

class TestKZGSettings:
    """KZGSettings 생성/해제 테스트."""

    def test_construct(self, srs, fs4):
        ks = KZGSettings(srs.g1_powers, srs.g2_powers, 17, fs4)
        assert ks.length == 17
        assert len(ks.secret_g1) == 17
        assert len(ks.secret_g2) == 17
        assert ks.fs is fs4

    def test_length_equal_to_max_width(self, srs, fs4):
        ks = KZGSettings(srs.g1_powers, srs.g2_powers, 16, fs4)
        assert ks.length == 16
        assert ks.secret_g1 == tuple(srs.g1_powers[:16])

    def test_length_below_max_width_raises(self, srs, fs4):
        with pytest.raises(BadArgumentsError):
            KZGSettings(srs.g1_powers, srs.g2_powers, 15, fs4)

    def test_short_arrays_raise(self, srs):
        fs = FFTSettings(1)
        with pytest.raises(BadArgumentsError):
            KZGSettings(srs.g1_powers[:3], srs.g2_powers, 4, fs)
        with pytest.raises(BadArgumentsError):
            KZGSettings(srs.g1_powers, srs.g2_powers[:3], 4, fs)

    def test_copies_inputs(self, srs):
        g1 = list(srs.g1_powers[:4])
        g2 = list(srs.g2_powers[:4])
        ks = KZGSettings(g1, g2, 4, FFTSettings(2))
        g1[1] = G1
        g2.clear()
        assert ks.secret_g1[1] == srs.g1_powers[1]
        assert len(ks.secret_g2) == 4

    def test_close_is_idempotent(self, srs):
        fs = FFTSettings(2)
        ks = KZGSettings(srs.g1_powers, srs.g2_powers, 4, fs)
        ks.close()
        ks.close()
        assert ks.length == 0
        assert ks.secret_g1 == ()
        assert ks.secret_g2 == ()
        # 참조하던 도메인은 그대로 남는다
        assert fs.max_width == 4

    def test_context_manager(self, srs):
        with KZGSettings(srs.g1_powers, srs.g2_powers, 4, FFTSettings(2)) as ks:
            assert commit(Polynomial([FR(3)]), ks) == ec_mul(G1, 3)
        assert ks.length == 0

    def test_commit_after_close_raises(self, srs):
        ks = KZGSettings(srs.g1_powers, srs.g2_powers, 4, FFTSettings(2))
        ks.close()
        with pytest.raises(BadArgumentsError):
            commit(Polynomial([FR(1)]), ks)
