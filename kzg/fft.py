"""
FFT 도메인 및 변환 (Number Theoretic Transform)
================================================

**FFTSettings**:
  최대 너비 max_width = 2^max_scale 까지의 단위근 표를 미리 계산해 둔다.
  KZGSettings는 이 도메인을 참조만 하며, 생성 후에는 변경되지 않는다.

  expanded_roots_of_unity = [1, ω, ω², ..., ω^(max_width-1), 1]
  reverse_roots_of_unity  = [1, ω^(max_width-1), ..., ω, 1]

  너비 n < max_width 의 변환은 stride = max_width / n 간격으로 표를 읽어
  n차 단위근 ω_n = ω^stride 의 거듭제곱을 얻는다.

**코셋 보간 (coset_ifft)**:
  평가 점이 부분군 {ω_n^i}가 아니라 코셋 {x·ω_n^i}일 때,
  IFFT 결과의 i번째 계수에 x^(-i)를 곱하면 코셋 위의 보간 다항식이 된다.

사용 예시:
    >>> fs = FFTSettings(4)          # max_width = 16
    >>> evals = fft_fr(coeffs, False, fs)
    >>> fft_fr(evals, True, fs) == coeffs  # True
"""

import logging

from kzg.errors import BadArgumentsError, InternalError
from kzg.field import FR, MAX_SCALE, fr_inv, get_root_of_unity, is_power_of_two, to_fr

logger = logging.getLogger(__name__)


class FFTSettings:
    """2의 거듭제곱 너비의 FFT 도메인.

    속성:
        max_width: 지원하는 최대 변환 너비 (2^max_scale)
        root_of_unity: max_width차 원시 단위근 ω
        expanded_roots_of_unity: [ω^0, ..., ω^max_width] (길이 max_width + 1)
        reverse_roots_of_unity: expanded_roots_of_unity의 역순
    """

    def __init__(self, max_scale):
        if not isinstance(max_scale, int) or max_scale < 0 or max_scale > MAX_SCALE:
            raise BadArgumentsError(
                f"max_scale은 0 이상 {MAX_SCALE} 이하여야 합니다: {max_scale}"
            )
        self.max_width = 1 << max_scale
        self.root_of_unity = get_root_of_unity(self.max_width)

        # 원시 단위근이 아니면 표 전체가 잘못된다
        if self.max_width > 1 and self.root_of_unity ** (self.max_width // 2) == FR(1):
            raise InternalError(f"{self.max_width}차 원시 단위근이 아닙니다")

        roots = [FR(1)]
        for _ in range(self.max_width):
            roots.append(roots[-1] * self.root_of_unity)
        if roots[-1] != FR(1):
            raise InternalError("ω^max_width ≠ 1")

        self.expanded_roots_of_unity = tuple(roots)
        self.reverse_roots_of_unity = tuple(reversed(roots))
        logger.debug("FFT 도메인 생성: max_width=%d", self.max_width)

    def check_width(self, n):
        """너비 n을 검사하고 단위근 표를 읽을 간격(stride)을 반환한다."""
        if not is_power_of_two(n):
            raise BadArgumentsError(f"FFT 너비는 2의 거듭제곱이어야 합니다: {n}")
        if n > self.max_width:
            raise BadArgumentsError(
                f"FFT 너비 {n}가 도메인 최대 너비 {self.max_width}를 초과합니다"
            )
        return self.max_width // n

    def root_of_unity_for(self, n):
        """n차 원시 단위근 ω_n = ω^(max_width / n)."""
        return self.expanded_roots_of_unity[self.check_width(n)]

    def roots_of_unity(self, n):
        """[ω_n^0, ω_n^1, ..., ω_n^(n-1)]."""
        stride = self.check_width(n)
        return list(self.expanded_roots_of_unity[:self.max_width:stride])

    def __repr__(self):
        return f"FFTSettings(max_width={self.max_width})"


def _fft(values, roots):
    """재귀적 Cooley-Tukey radix-2 변환.

    roots[k] = ω_n^k (0 ≤ k < n). 부분 문제는 ω_n² 의 거듭제곱인 roots[::2]를 쓴다.
    """
    n = len(values)
    if n == 1:
        return [values[0]]

    half_roots = roots[0::2]
    even_vals = _fft(values[0::2], half_roots)
    odd_vals = _fft(values[1::2], half_roots)

    # 버터플라이 결합
    result = [FR(0)] * n
    half = n // 2
    for k in range(half):
        t = roots[k] * odd_vals[k]
        result[k] = even_vals[k] + t
        result[k + half] = even_vals[k] - t
    return result


def fft_fr(values, inverse, fs):
    """FR 원소 리스트의 FFT / IFFT.

    - inverse=False: 계수 → n개의 단위근 {1, ω_n, ..., ω_n^(n-1)}에서의 평가값
    - inverse=True:  평가값 → 계수. 역 단위근으로 변환한 뒤 1/n을 곱한다.

    Args:
        values: FR 원소 리스트 (길이 n은 2의 거듭제곱, n ≤ fs.max_width)
        inverse: 역변환 여부
        fs: FFTSettings

    Returns:
        list[FR]: 길이 n의 변환 결과

    Raises:
        BadArgumentsError: 길이가 2의 거듭제곱이 아니거나 도메인보다 클 때
    """
    n = len(values)
    stride = fs.check_width(n)
    values = [to_fr(v) for v in values]

    if not inverse:
        return _fft(values, fs.expanded_roots_of_unity[:fs.max_width:stride])

    out = _fft(values, fs.reverse_roots_of_unity[:fs.max_width:stride])
    inv_len = fr_inv(FR(n))
    return [c * inv_len for c in out]


def coset_ifft(ys, x, fs):
    """코셋 {x·ω_n^i} 위의 평가값 ys를 보간하는 다항식의 계수를 구한다.

    1. 일반 IFFT: J(ω_n^i) = ys[i] 인 J의 계수
    2. 코셋 보정: I(z) = J(z / x) 이므로 i번째 계수에 x^(-i)를 곱한다

    Args:
        ys: [p(x), p(x·ω_n), ..., p(x·ω_n^(n-1))]
        x: 코셋 생성자 (n > 1이면 0이 아니어야 함)
        fs: FFTSettings

    Returns:
        list[FR]: I(x·ω_n^i) = ys[i] 를 만족하는 차수 < n 다항식의 계수

    Raises:
        BadArgumentsError: x = 0 이고 n > 1일 때, 또는 n이 유효하지 않을 때
    """
    x = to_fr(x)
    coeffs = fft_fr(ys, True, fs)
    if len(coeffs) == 1:
        return coeffs

    try:
        inv_x = fr_inv(x)
    except ZeroDivisionError as exc:
        raise BadArgumentsError("코셋 생성자는 0이 아니어야 합니다") from exc

    inv_x_pow = inv_x
    for i in range(1, len(coeffs)):
        coeffs[i] = coeffs[i] * inv_x_pow
        inv_x_pow = inv_x_pow * inv_x
    return coeffs
