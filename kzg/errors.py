"""
KZG 예외 계층
=============

구조적 오류(잘못된 요청)와 증명의 유효성(참/거짓)은 서로 다른 채널로 전달된다.
검증 함수는 거짓 주장에 대해 예외를 던지지 않고 False를 반환하며,
아래 예외는 호출자가 전제 조건을 어겼거나 내부 불변식이 깨진 경우에만 발생한다.

메모리 할당 실패는 파이썬 내장 MemoryError가 그대로 전파된다.
"""


class KZGError(Exception):
    """KZG 모듈에서 발생하는 모든 오류의 기반 클래스."""


class BadArgumentsError(KZGError, ValueError):
    """호출자가 전제 조건을 위반했다.

    예: SRS보다 긴 다항식, 2의 거듭제곱이 아닌 코셋 크기, 길이가 맞지 않는 배열.
    """


class InternalError(KZGError):
    """항상 성립해야 하는 내부 불변식이 깨졌다."""
