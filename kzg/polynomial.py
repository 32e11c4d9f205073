"""
KZG 기반 모듈: 다항식(Polynomial) 클래스 및 나눗셈
===================================================

**Polynomial 클래스**:
  계수(coefficient) 표현 기반 다항식. p(x) = c₀ + c₁·x + c₂·x² + ...
  생성자는 주어진 계수 개수를 그대로 유지한다. KZG 커밋은 계수 개수가
  SRS 길이를 넘는지 검사하므로, 최고차 0 계수도 길이에 포함된다.
  길이 0인 다항식은 영 다항식이다.

**다항식 나눗셈 (poly_div)**:
  코셋 증명에서 몫 q(x) = p(x) // (x^n - x₀^n) 계산에 사용된다.
  이때 나머지는 코셋 위의 보간 다항식이며 0이 아닌 것이 정상이다.

사용 예시:
    >>> from kzg.polynomial import Polynomial, poly_div
    >>> p = Polynomial([FR(1), FR(2), FR(3)])  # 1 + 2x + 3x²
    >>> p.evaluate(FR(2))  # 1 + 4 + 12 = FR(17)
"""

from kzg.errors import BadArgumentsError
from kzg.field import FR, fr_inv, to_fr


# ─────────────────────────────────────────────────────────────────────
# Polynomial 클래스
# ─────────────────────────────────────────────────────────────────────

class Polynomial:
    """유한체 FR 위의 다항식.

    계수 리스트로 표현: coeffs = [c₀, c₁, c₂, ...] → c₀ + c₁x + c₂x² + ...

    KZG에서의 역할:
    - 데이터 블롭을 인코딩한 커밋 대상 다항식 p(x)
    - 소거 다항식 x^n - x₀^n 과 몫 다항식 q(x)
    - 코셋 보간 다항식 I(x)

    예시:
        >>> p = Polynomial([FR(1), FR(2)])  # 1 + 2x
        >>> q = Polynomial([FR(3), FR(4)])  # 3 + 4x
        >>> r = p + q                        # 4 + 6x
        >>> r = p * q                        # 3 + 10x + 8x²
    """

    def __init__(self, coeffs=None):
        """다항식 생성.

        Args:
            coeffs: FR 원소(또는 정수)의 리스트 [c₀, c₁, ...].
                    None이면 길이 0인 영 다항식을 생성한다.
        """
        if coeffs is None:
            self.coeffs = []
        else:
            self.coeffs = [to_fr(c) for c in coeffs]

    @classmethod
    def zeros(cls, length):
        """계수가 모두 0인 길이 length의 다항식."""
        return cls([FR(0)] * length)

    def normalized(self):
        """최고차 0 계수를 제거한 새 다항식을 반환한다.

        예: [1, 2, 0, 0] → [1, 2],  [0, 0] → []
        """
        end = len(self.coeffs)
        while end > 0 and self.coeffs[end - 1] == FR(0):
            end -= 1
        return Polynomial(self.coeffs[:end])

    @property
    def degree(self):
        """다항식의 차수. 영 다항식의 차수는 0으로 정의한다."""
        return max(len(self.normalized().coeffs) - 1, 0)

    def is_zero(self):
        """영 다항식인지 확인."""
        return all(c == FR(0) for c in self.coeffs)

    def evaluate(self, point):
        """다항식을 주어진 점에서 평가한다 (Horner's method).

        Horner's method: p(x) = c₀ + x(c₁ + x(c₂ + ...))

        Args:
            point: 평가할 FR 원소 (또는 정수)

        Returns:
            FR: p(point) 값. 길이 0인 다항식은 FR(0).
        """
        point = to_fr(point)
        result = FR(0)
        for coeff in reversed(self.coeffs):
            result = result * point + coeff
        return result

    def __call__(self, point):
        return self.evaluate(point)

    def __len__(self):
        """계수 개수 반환."""
        return len(self.coeffs)

    def __getitem__(self, i):
        return self.coeffs[i]

    def __setitem__(self, i, value):
        self.coeffs[i] = to_fr(value)

    def __add__(self, other):
        """다항식 덧셈: p(x) + q(x)."""
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        max_len = max(len(self.coeffs), len(other.coeffs))
        result = []
        for i in range(max_len):
            a = self.coeffs[i] if i < len(self.coeffs) else FR(0)
            b = other.coeffs[i] if i < len(other.coeffs) else FR(0)
            result.append(a + b)
        return Polynomial(result).normalized()

    def __radd__(self, other):
        # int + p 만 여기로 온다. FR 스칼라는 p + FR 로 쓴다
        return self.__add__(other)

    def __sub__(self, other):
        """다항식 뺄셈: p(x) - q(x)."""
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        max_len = max(len(self.coeffs), len(other.coeffs))
        result = []
        for i in range(max_len):
            a = self.coeffs[i] if i < len(self.coeffs) else FR(0)
            b = other.coeffs[i] if i < len(other.coeffs) else FR(0)
            result.append(a - b)
        return Polynomial(result).normalized()

    def __rsub__(self, other):
        # int - p 만 여기로 온다
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        return other.__sub__(self)

    def __neg__(self):
        """다항식 부호 반전: -p(x)."""
        return Polynomial([-c for c in self.coeffs]).normalized()

    def __mul__(self, other):
        """다항식 곱셈: p(x) · q(x) 또는 스칼라곱.

        다항식 × 다항식: O(n²) 나이브 곱셈
        다항식 × 스칼라: 각 계수에 스칼라를 곱함 (FR 스칼라는 오른쪽에만)
        """
        if isinstance(other, (int, FR)):
            other = to_fr(other)
            return Polynomial([c * other for c in self.coeffs]).normalized()
        if not self.coeffs or not other.coeffs:
            return Polynomial()
        result = [FR(0)] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            for j, b in enumerate(other.coeffs):
                result[i + j] = result[i + j] + a * b
        return Polynomial(result).normalized()

    def __rmul__(self, other):
        # int * p 만 여기로 온다. FR 스칼라는 p * FR 로 쓴다
        return self.__mul__(other)

    def __floordiv__(self, other):
        """몫만 반환하는 나눗셈: p(x) // d(x)."""
        quotient, _ = poly_div(self, other)
        return quotient

    def __mod__(self, other):
        """나머지만 반환하는 나눗셈: p(x) % d(x)."""
        _, remainder = poly_div(self, other)
        return remainder

    def __eq__(self, other):
        """다항식 동등 비교 (최고차 0 계수는 무시)."""
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        if not isinstance(other, Polynomial):
            return False
        return self.normalized().coeffs == other.normalized().coeffs

    def __repr__(self):
        terms = []
        for i, c in enumerate(self.coeffs):
            if c == FR(0):
                continue
            if i == 0:
                terms.append(str(int(c)))
            elif i == 1:
                terms.append(f"{int(c)}*x")
            else:
                terms.append(f"{int(c)}*x^{i}")
        return "Poly(" + " + ".join(terms) + ")" if terms else "Poly(0)"


# ─────────────────────────────────────────────────────────────────────
# 다항식 나눗셈 (Polynomial Long Division)
# ─────────────────────────────────────────────────────────────────────

def poly_div(a, b):
    """다항식 나눗셈: a(x) = b(x) · q(x) + r(x).

    긴 나눗셈(long division)으로 몫 q(x)와 나머지 r(x)를 계산한다.
    나머지가 0인지 검사하지 않는다.

    몫의 길이는 len(a) - len(b') + 1 이다 (b'는 최고차 0 계수를 제거한 제수).
    피제수가 제수보다 짧으면 몫은 길이 0인 다항식이다.

    Args:
        a: 피제수 다항식 (Polynomial)
        b: 제수 다항식 (Polynomial)

    Returns:
        tuple: (몫 Polynomial, 나머지 Polynomial)

    Raises:
        BadArgumentsError: 제수가 영 다항식인 경우

    예시:
        >>> a = Polynomial([FR(-1), FR(0), FR(1)])  # x² - 1
        >>> b = Polynomial([FR(-1), FR(1)])          # x - 1
        >>> q, r = poly_div(a, b)
        >>> q  # x + 1
        >>> r  # 0
    """
    divisor = b.normalized().coeffs
    if not divisor:
        raise BadArgumentsError("0으로 나눌 수 없습니다")

    remainder = list(a.coeffs)
    len_b = len(divisor)
    len_a = len(remainder)

    if len_a < len_b:
        return Polynomial(), Polynomial(remainder).normalized()

    quotient = [FR(0)] * (len_a - len_b + 1)
    lead_inv = fr_inv(divisor[-1])

    # 최고차 항부터 하나씩 소거
    for i in range(len_a - len_b, -1, -1):
        coeff = remainder[i + len_b - 1] * lead_inv
        quotient[i] = coeff
        if coeff == FR(0):
            continue
        for j in range(len_b):
            remainder[i + j] = remainder[i + j] - coeff * divisor[j]

    return Polynomial(quotient), Polynomial(remainder[:len_b - 1]).normalized()
