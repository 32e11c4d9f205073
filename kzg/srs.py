"""
테스트 전용 Structured Reference String (SRS)
==============================================

**경고: 이 모듈의 출력은 안전하지 않다.**
  비밀 값 s ("toxic waste")를 seed에서 결정론적으로 만들기 때문에
  seed를 아는 누구나 임의의 거짓 증명을 만들 수 있다.
  실제 시스템의 SRS는 MPC 세레모니(powers-of-tau)에서 받아와야 하며,
  이 모듈은 테스트와 데모에서만 사용한다.

  SRS = {
      G1 powers: [G1, s·G1, s²·G1, ..., s^(length-1)·G1]
      G2 powers: [G2, s·G2, s²·G2, ..., s^(length-1)·G2]
  }

  코셋 검증은 [sⁿ]₂ 가 필요하므로 G2 쪽도 G1과 같은 길이로 만든다.

사용 예시:
    >>> srs = SRS.generate(length=17, seed=42)
    >>> len(srs.g1_powers)  # 17
"""

import hashlib
import logging
import secrets

from kzg.errors import BadArgumentsError
from kzg.field import FR, G1, G2, ec_mul, CURVE_ORDER

logger = logging.getLogger(__name__)


class SRS:
    """신뢰 설정 결과물.

    속성:
        g1_powers: [G1, s·G1, ..., s^(length-1)·G1]
        g2_powers: [G2, s·G2, ..., s^(length-1)·G2]
        length: 각 배열의 길이
    """

    def __init__(self, g1_powers, g2_powers):
        self.g1_powers = g1_powers
        self.g2_powers = g2_powers
        self.length = len(g1_powers)

    @classmethod
    def generate(cls, length, seed=None):
        """안전하지 않은 SRS를 생성한다.

        Args:
            length: 생성할 거듭제곱 개수 (≥ 1)
            seed: 결정론적 생성을 위한 시드. None이면 무작위 s를 쓴다.

        Returns:
            SRS
        """
        if length < 1:
            raise BadArgumentsError(f"SRS 길이는 1 이상이어야 합니다: {length}")
        logger.warning(
            "안전하지 않은 SRS를 생성합니다 (length=%d). 테스트/데모 전용입니다", length
        )

        # toxic waste s
        if seed is not None:
            h = hashlib.sha256(str(seed).encode()).digest()
            s_int = int.from_bytes(h, "big") % CURVE_ORDER
        else:
            s_int = secrets.randbelow(CURVE_ORDER - 1) + 1
        s = FR(s_int)

        g1_powers = []
        g2_powers = []
        s_power = FR(1)  # s^0 = 1
        for _ in range(length):
            g1_powers.append(ec_mul(G1, s_power))
            g2_powers.append(ec_mul(G2, s_power))
            s_power = s_power * s

        return cls(g1_powers, g2_powers)
