import sys
import os
import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from kzg.fft import FFTSettings
from kzg.field import FR
from kzg.polynomial import Polynomial
from kzg.settings import KZGSettings
from kzg.srs import SRS


# ── 테스트 상수 ──
# 15차 다항식, 계수 16개
TEST_COEFFS = [1, 2, 3, 4, 7, 7, 7, 7, 13, 13, 13, 13, 13, 13, 13, 13]
SECRETS_LEN = len(TEST_COEFFS) + 1
SRS_SEED = 1927

SINGLE_X = 25
COSET_X = 5431
COSET_SCALE = 3
COSET_LEN = 1 << COSET_SCALE


@pytest.fixture(scope="session")
def srs():
    """길이 17의 테스트용 SRS (G1, G2 모두)."""
    return SRS.generate(length=SECRETS_LEN, seed=SRS_SEED)


@pytest.fixture(scope="session")
def fs4():
    """max_width = 16 (계수 개수의 log₂)."""
    return FFTSettings(4)


@pytest.fixture(scope="session")
def fs3():
    """max_width = 8, 코셋 크기와 같다."""
    return FFTSettings(COSET_SCALE)


@pytest.fixture(scope="session")
def ks(srs, fs4):
    return KZGSettings(srs.g1_powers, srs.g2_powers, SECRETS_LEN, fs4)


@pytest.fixture(scope="session")
def ks_coset(srs, fs3):
    """ks와 같은 SRS를 쓰되 너비 8 도메인에 묶인 키."""
    return KZGSettings(srs.g1_powers, srs.g2_powers, SECRETS_LEN, fs3)


@pytest.fixture
def test_poly():
    return Polynomial([FR(c) for c in TEST_COEFFS])
