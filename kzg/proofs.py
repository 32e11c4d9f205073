"""
KZG 다항식 커밋먼트 스킴
=========================

Kate-Zaverucha-Goldberg (KZG) 커밋먼트와 단일 점/코셋 열기 증명.

**커밋먼트**:
  C = Σᵢ cᵢ · [sⁱ]₁ = p(s)·G1
  s를 모르는 상태에서 SRS의 선형결합으로 p(s)·G1을 계산한다.

**코셋 열기 증명 (Multi-point Opening)**:
  평가 점 집합이 코셋 {x₀·ωⁱ : 0 ≤ i < n} 이면 소거 다항식은
      Z(x) = Π (x - x₀·ωⁱ) = xⁿ - x₀ⁿ
  로 간단해진다.
  1. q(x) = p(x) // Z(x)  (나머지 = 코셋 위의 보간 다항식, 버린다)
  2. 증명 π = q(s)·G1
  3. 검증자는 주장된 평가값 ys로 보간 다항식 I(x)를 직접 복원하고
     e(C - [I(s)]₁, G2) == e(π, [sⁿ - xⁿ]₂) 를 확인한다.

**단일 점 열기 증명**:
  n = 1인 코셋 증명이다. Z(x) = x - x₀ 이고 검증 방정식은
      e(C - y·G1, G2) == e(π, [s - x]₂)

사용 예시:
    >>> from kzg.proofs import commit, create_witness, verify_opening
    >>> C = commit(poly, ks)
    >>> proof = create_witness(poly, FR(25), ks)
    >>> verify_opening(C, proof, FR(25), poly.evaluate(FR(25)), ks)  # True
"""

import logging

from kzg.errors import BadArgumentsError
from kzg.fft import coset_ifft
from kzg.field import (
    FR, G1, G2, ec_lincomb, ec_mul, ec_sub, is_power_of_two, pairings_verify, to_fr,
)
from kzg.polynomial import Polynomial, poly_div

logger = logging.getLogger(__name__)


def commit(poly, ks):
    """다항식을 KZG 커밋한다.

    C = Σᵢ cᵢ · secret_g1[i]

    Args:
        poly: 커밋할 다항식 (Polynomial)
        ks: KZGSettings

    Returns:
        G1 점: 커밋먼트 C. 길이 0인 다항식은 항등원(None).

    Raises:
        BadArgumentsError: 다항식 계수 개수가 SRS 길이를 초과할 때

    예시:
        >>> p = Polynomial([FR(1), FR(2), FR(3)])  # 1 + 2x + 3x²
        >>> C = commit(p, ks)  # (1 + 2s + 3s²)·G1
    """
    if len(poly) > ks.length:
        raise BadArgumentsError(
            f"다항식 길이 {len(poly)}가 SRS 길이 {ks.length}를 초과합니다"
        )
    return ec_lincomb(ks.secret_g1, poly.coeffs)


def create_witness(poly, x0, ks):
    """단일 점 x0에서의 열기 증명 π = commit((p(x) - p(x0)) / (x - x0)).

    create_coset_witness(poly, x0, 1, ks)와 같다.
    """
    return create_coset_witness(poly, x0, 1, ks)


def verify_opening(commitment, proof, x, y, ks):
    """단일 점 열기 증명을 검증한다.

    검증 방정식 (페어링):
        e(C - y·G1, G2) == e(π, [s]₂ - x·G2)

    Args:
        commitment: 다항식 커밋먼트 C (G1 점)
        proof: 열기 증명 π (G1 점)
        x: 평가 점 (FR 원소)
        y: 주장하는 평가값 p(x) (FR 원소)
        ks: KZGSettings

    Returns:
        bool: 검증 성공 여부. 거짓 주장이면 False (예외 아님)

    Raises:
        BadArgumentsError: [s]₂ 가 없는 키 (length < 2, 해제된 키 포함)
    """
    if ks.length < 2:
        raise BadArgumentsError(
            f"[s]₂가 필요하지만 SRS 길이가 {ks.length}입니다"
        )
    x = to_fr(x)
    y = to_fr(y)

    # [s - x]₂
    x_g2 = ec_mul(G2, x)
    s_minus_x = ec_sub(ks.secret_g2[1], x_g2)

    # [C - y]₁
    y_g1 = ec_mul(G1, y)
    commitment_minus_y = ec_sub(commitment, y_g1)

    result = pairings_verify(commitment_minus_y, G2, proof, s_minus_x)
    logger.debug("단일 점 검증 x=%d: %s", int(x), result)
    return result


def create_coset_witness(poly, x0, n, ks):
    """코셋 {x0·ωⁱ : 0 ≤ i < n} 에서의 열기 증명을 만든다.

    데이터 가용성 샘플 하나(n개의 평가값)에 대한 증명이다.

    Args:
        poly: 다항식 p(x)
        x0: 코셋 생성자
        n: 평가 점 개수 (2의 거듭제곱, ≤ ks.fs.max_width)
        ks: KZGSettings

    Returns:
        G1 점: 증명 π = q(s)·G1, q = p // (xⁿ - x0ⁿ)

    Raises:
        BadArgumentsError: n이 2의 거듭제곱이 아니거나 도메인보다 클 때,
                           몫 다항식이 SRS보다 길 때
    """
    if not is_power_of_two(n):
        raise BadArgumentsError(f"n은 2의 거듭제곱이어야 합니다: {n}")
    if n > ks.fs.max_width:
        raise BadArgumentsError(
            f"n={n}가 FFT 도메인 너비 {ks.fs.max_width}를 초과합니다"
        )
    x0 = to_fr(x0)

    # xⁿ - x0ⁿ = (x - x0·ω⁰)(x - x0·ω¹)...(x - x0·ωⁿ⁻¹)
    divisor = Polynomial.zeros(n + 1)
    divisor[0] = -(x0 ** n)
    divisor[n] = FR(1)

    # 나머지는 코셋 위의 보간 다항식이므로 버린다
    quotient, remainder = poly_div(poly, divisor)
    logger.debug(
        "코셋 증명: n=%d, 다항식 길이 %d, 몫 길이 %d, 나머지 길이 %d",
        n, len(poly), len(quotient), len(remainder),
    )
    return commit(quotient, ks)


def verify_coset_opening(commitment, proof, x, ys, n, ks):
    """코셋 열기 증명을 검증한다: p(x·ωⁱ) = ys[i] (0 ≤ i < n).

    1. ys를 코셋 위에서 보간 → I(x)
    2. [xⁿ]₂, [sⁿ - xⁿ]₂ = secret_g2[n] - [xⁿ]₂
    3. [I(s)]₁ = commit(I)
    4. e(C - [I(s)]₁, G2) == e(π, [sⁿ - xⁿ]₂)

    Args:
        commitment: 다항식 커밋먼트 C (G1 점)
        proof: 코셋 열기 증명 π (G1 점)
        x: 코셋 생성자 (n > 1이면 0이 아니어야 함)
        ys: 주장하는 평가값 리스트 (길이 n)
        n: 평가 점 개수 (2의 거듭제곱, ≤ ks.fs.max_width, < ks.length)
        ks: KZGSettings

    Returns:
        bool: 검증 성공 여부

    Raises:
        BadArgumentsError: 위 전제 조건 위반
    """
    if not is_power_of_two(n):
        raise BadArgumentsError(f"n은 2의 거듭제곱이어야 합니다: {n}")
    if len(ys) != n:
        raise BadArgumentsError(f"평가값 개수 {len(ys)}가 n={n}과 다릅니다")
    if n > ks.fs.max_width:
        raise BadArgumentsError(
            f"n={n}가 FFT 도메인 너비 {ks.fs.max_width}를 초과합니다"
        )
    if n >= ks.length:
        raise BadArgumentsError(
            f"[sⁿ]₂가 필요하지만 SRS 길이가 {ks.length}입니다 (n={n})"
        )
    x = to_fr(x)

    # 코셋 위의 보간 다항식 I(x)
    interp = Polynomial(coset_ifft(ys, x, ks.fs))

    # [sⁿ - xⁿ]₂
    xn_g2 = ec_mul(G2, x ** n)
    s_minus_xn = ec_sub(ks.secret_g2[n], xn_g2)

    # [C - I(s)]₁
    is1 = commit(interp, ks)
    commitment_minus_interp = ec_sub(commitment, is1)

    result = pairings_verify(commitment_minus_interp, G2, proof, s_minus_xn)
    logger.debug("코셋 검증 x=%d, n=%d: %s", int(x), n, result)
    return result
