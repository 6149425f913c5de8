"""
예외 클래스 정의
"""


class NotFittedError(RuntimeError):
    """fit() 전에 학습 상태가 필요한 연산을 호출한 경우"""


class DimensionMismatchError(ValueError):
    """입력 샘플의 피처 수가 학습 시 차원과 다른 경우"""
