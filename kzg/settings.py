"""
KZG 커밋먼트 키 (KZGSettings)
=============================

신뢰 설정(trusted setup)에서 받은 SRS의 사본과 FFT 도메인 참조를 묶는다.

  secret_g1 = [G1, s·G1, s²·G1, ..., s^(length-1)·G1]
  secret_g2 = [G2, s·G2, s²·G2, ..., s^(length-1)·G2]

s는 "toxic waste"이며 이 모듈은 s에 직접 접근하지 않는다.
생성 시 입력 배열을 복사하므로 호출자는 원본을 곧바로 재사용해도 된다.
생성 후에는 읽기 전용이므로 여러 스레드의 증명/검증 호출이 공유할 수 있다.

사용 예시:
    >>> fs = FFTSettings(4)
    >>> ks = KZGSettings(srs.g1_powers, srs.g2_powers, 17, fs)
    >>> C = commit(poly, ks)
    >>> ks.close()
"""

import logging

from kzg.errors import BadArgumentsError

logger = logging.getLogger(__name__)


class KZGSettings:
    """KZG 커밋먼트 키.

    속성:
        secret_g1: SRS의 G1 부분 (길이 length인 튜플)
        secret_g2: SRS의 G2 부분 (길이 length인 튜플)
        length: SRS 길이. 커밋 가능한 다항식의 최대 계수 개수
        fs: 참조하는 FFTSettings (소유하지 않음)
    """

    def __init__(self, secret_g1, secret_g2, length, fs):
        """SRS를 복사하여 커밋먼트 키를 만든다.

        Args:
            secret_g1: G1 점 시퀀스 (길이 ≥ length)
            secret_g2: G2 점 시퀀스 (길이 ≥ length)
            length: 복사할 SRS 길이. fs.max_width 이상이어야 한다
            fs: FFTSettings

        Raises:
            BadArgumentsError: length < fs.max_width 이거나 입력 배열이 짧을 때
        """
        if length < fs.max_width:
            raise BadArgumentsError(
                f"SRS 길이 {length}가 FFT 도메인 너비 {fs.max_width}보다 작습니다"
            )
        if len(secret_g1) < length or len(secret_g2) < length:
            raise BadArgumentsError(
                f"SRS 배열 길이(G1 {len(secret_g1)}, G2 {len(secret_g2)})가 "
                f"{length}보다 짧습니다"
            )

        self.length = length
        self.secret_g1 = tuple(secret_g1[:length])
        self.secret_g2 = tuple(secret_g2[:length])
        self.fs = fs
        logger.debug("KZGSettings 생성: length=%d, %r", length, fs)

    def close(self):
        """보유한 SRS 사본을 해제한다. 여러 번 호출해도 안전하다.

        참조하는 FFTSettings는 해제하지 않는다.
        """
        self.secret_g1 = ()
        self.secret_g2 = ()
        self.length = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __repr__(self):
        return f"KZGSettings(length={self.length}, fs={self.fs!r})"
