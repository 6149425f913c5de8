"""
거리 커널
"""

from typing import Sequence

import numpy as np

from .exceptions import DimensionMismatchError


class Canberra:
    """
    Canberra 거리

    d(a, b) = Σ |a_i - b_i| / (|a_i| + |b_i|)

    0 근처 값의 차이에 민감한 가중 맨해튼 거리.
    두 좌표가 모두 0인 항은 0으로 계산합니다.
    """

    def compute(self, a: Sequence[float], b: Sequence[float]) -> float:
        a = np.asarray(a, dtype=float)
        b = np.asarray(b, dtype=float)

        if a.shape != b.shape:
            raise DimensionMismatchError(
                f"두 벡터의 차원이 다릅니다: {a.shape} vs {b.shape}"
            )

        numerator = np.abs(a - b)
        denominator = np.abs(a) + np.abs(b)

        nonzero = denominator > 0

        return float(np.sum(numerator[nonzero] / denominator[nonzero]))

    def __call__(self, a: Sequence[float], b: Sequence[float]) -> float:
        return self.compute(a, b)

    def __repr__(self) -> str:
        return "Canberra()"
