"""
KZG 기반 모듈: 유한체(Finite Field) 및 타원곡선 연산
======================================================

KZG 커밋먼트, 열기 증명, 검증 전체에서 사용되는 기본 대수적 도구를 정의한다.

**유한체 FR**:
  bn128 타원곡선의 스칼라 필드 (scalar field). 다항식 계수, 평가 점,
  평가값은 모두 FR 원소이다.
  - 위수(order) r ≈ 2^254, 소수체(prime field)
  - r - 1 = 2^28 × m (m은 홀수) → 최대 2^28차 단위근(root of unity)을 지원

**타원곡선 연산**:
  SRS, 커밋먼트, 증명을 표현하는 G1, G2 그룹 연산과 페어링 검사.
  py_ecc.bn128은 항등원(무한원점)을 None으로 표현한다.

**단위근(Roots of Unity)**:
  FFT 도메인과 코셋 {x·ω^i}를 정의하는 n차 원시 단위근.

사용 예시:
    >>> from kzg.field import FR, G1, ec_mul
    >>> a = FR(3)
    >>> b = FR(7)
    >>> c = a * b        # FR(21)
    >>> P = ec_mul(G1, 5)  # 5·G1
"""

from py_ecc.fields import bn128_FQ as FQ
from py_ecc import bn128

from kzg.errors import BadArgumentsError


# ─────────────────────────────────────────────────────────────────────
# 유한체(Finite Field) FR
# ─────────────────────────────────────────────────────────────────────

class FR(FQ):
    """bn128 스칼라 필드 위의 유한체 원소.

    py_ecc의 FQ 클래스를 상속하여 +, -, *, /, ** 등의 필드 연산을 제공한다.
    FR.zero(), FR.one() 상수 생성자도 FQ에서 물려받는다.

    주의:
        py_ecc의 나눗셈은 0의 역원을 0으로 취급한다.
        호출자 입력의 역원이 필요할 때는 fr_inv()를 사용한다.

    예시:
        >>> x = FR(3)
        >>> x * x          # FR(9)
        >>> x ** 2          # FR(9)
        >>> fr_inv(FR(3))   # 3의 모듈러 역원
    """
    field_modulus = bn128.curve_order


# 곡선 위수 (필드 크기)
CURVE_ORDER = bn128.curve_order

# FR*의 곱셈 생성자. 단위근 ω = 5^((r-1)/n)
PRIMITIVE_ROOT = 5

# r - 1 = 2^28 × m 이므로 FFT 도메인은 최대 2^28
MAX_SCALE = 28


def to_fr(value):
    """정수 또는 FR을 FR로 변환한다."""
    if isinstance(value, FR):
        return value
    return FR(value)


def fr_inv(value):
    """FR 원소의 곱셈 역원.

    Raises:
        ZeroDivisionError: value가 0일 때
    """
    value = to_fr(value)
    if value == FR(0):
        raise ZeroDivisionError("0은 역원이 없습니다")
    return FR(1) / value


def is_power_of_two(n):
    """n이 1, 2, 4, 8, ... 중 하나인지 확인한다."""
    return isinstance(n, int) and n > 0 and (n & (n - 1)) == 0


# ─────────────────────────────────────────────────────────────────────
# 타원곡선 상수 및 연산
# ─────────────────────────────────────────────────────────────────────

# G1 그룹 생성자 (generator)
G1 = bn128.G1

# G2 그룹 생성자 (generator)
G2 = bn128.G2

# 영점 (point at infinity) - G1 항등원
Z1 = None  # bn128에서 G1의 항등원은 None으로 표현


def ec_mul(point, scalar):
    """타원곡선 스칼라 곱셈: scalar · point.

    Args:
        point: G1 또는 G2 위의 점 (None이면 항등원)
        scalar: 정수 또는 FR 원소

    Returns:
        scalar · point (같은 그룹의 점)

    예시:
        >>> P = ec_mul(G1, FR(5))  # 5·G1
        >>> Q = ec_mul(G2, 3)       # 3·G2
    """
    if point is None:
        return None
    if isinstance(scalar, FR):
        scalar = int(scalar)
    return bn128.multiply(point, scalar % CURVE_ORDER)


def ec_add(p1, p2):
    """타원곡선 점 덧셈: p1 + p2."""
    return bn128.add(p1, p2)


def ec_neg(point):
    """타원곡선 점의 역원 (negation): -point."""
    return bn128.neg(point)


def ec_sub(p1, p2):
    """타원곡선 점 뺄셈: p1 - p2."""
    return bn128.add(p1, bn128.neg(p2))


def ec_lincomb(points, scalars):
    """선형결합 Σ scalars[i] · points[i].

    다중 스칼라 곱셈(MSM)의 단순한 구현. 계수가 0인 항은 건너뛴다.
    scalars가 비어 있으면 항등원(None)을 반환한다.

    Args:
        points: 같은 그룹의 점 시퀀스 (len(points) >= len(scalars))
        scalars: FR 원소 시퀀스
    """
    result = None
    for point, scalar in zip(points, scalars):
        if scalar == FR(0):
            continue
        result = ec_add(result, ec_mul(point, scalar))
    return result


def ec_pairing(g2_point, g1_point):
    """쌍선형 페어링 e(G1, G2) → GT.

    주의:
        py_ecc.bn128.pairing의 인자 순서는 (G2, G1)이다.
    """
    return bn128.pairing(g2_point, g1_point)


def pairings_verify(a1, b2, c1, d2):
    """페어링 등식 e(a1, b2) == e(c1, d2)를 검사한다.

    Args:
        a1, c1: G1 위의 점
        b2, d2: G2 위의 점

    Returns:
        bool: 두 페어링 값이 같으면 True
    """
    return bool(ec_pairing(b2, a1) == ec_pairing(d2, c1))


# ─────────────────────────────────────────────────────────────────────
# 단위근 (Roots of Unity)
# ─────────────────────────────────────────────────────────────────────

def get_root_of_unity(n):
    """n차 원시 단위근(primitive n-th root of unity) ω를 반환한다.

    ω = g^((r-1)/n), g = PRIMITIVE_ROOT.
    ω^n = g^(r-1) = 1 (페르마 소정리).

    Args:
        n: 단위근의 차수 (2의 거듭제곱이어야 하며, ≤ 2^28)

    Returns:
        FR: n차 원시 단위근

    Raises:
        BadArgumentsError: n이 2의 거듭제곱이 아니거나 2^28을 초과할 때

    예시:
        >>> omega = get_root_of_unity(4)
        >>> omega ** 4 == FR(1)  # True
        >>> omega ** 2 != FR(1)  # True (원시 단위근)
    """
    if not is_power_of_two(n):
        raise BadArgumentsError(f"n은 2의 거듭제곱이어야 합니다: {n}")
    if n > (1 << MAX_SCALE):
        raise BadArgumentsError(f"n은 2^{MAX_SCALE} 이하여야 합니다: {n}")
    if n == 1:
        return FR(1)

    exponent = (CURVE_ORDER - 1) // n
    return FR(PRIMITIVE_ROOT) ** exponent
