"""
Dataset Generators - 합성 데이터셋 생성기
=========================================

- SwissRoll   : 3차원 스위스 롤, 연속형 레이블 (비선형 회귀용)
- Blob        : 가우시안 군집, 레이블 없음
- Agglomerate : 여러 Blob을 합쳐 범주형 레이블 데이터셋 생성

참고:
[1] S. Marsland. (2009). Machine Learning: An Algorithmic Perspective, Chapter 10.

Author: ML From Scratch Project
"""

from typing import Any, Dict, Optional, Sequence, Union

import numpy as np

from .datasets import Dataset, Labeled


class SwissRoll:
    """
    스위스 롤 데이터셋 생성기

    t ~ 1.5π * (1 + 2U),  U ~ Uniform(0, 1)

    x = t cos(t)
    y = depth * U'
    z = t sin(t)

    레이블은 변환의 입력값 t (연속형).

    Parameters
    ----------
    x, y, z : float, default=0.0
        롤의 중심 좌표

    scale : float, default=1.0
        크기 배율

    depth : float, default=21.0
        y축 방향 깊이

    noise : float, default=0.1
        가우시안 잡음의 표준편차

    random_state : int, default=None
        랜덤 시드
    """

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        scale: float = 1.0,
        depth: float = 21.0,
        noise: float = 0.1,
        random_state: Optional[int] = None
    ):
        if scale < 0.0:
            raise ValueError(f"scale은 0 이상이어야 합니다: {scale}")

        if depth < 0.0:
            raise ValueError(f"depth는 0 이상이어야 합니다: {depth}")

        if noise < 0.0:
            raise ValueError(f"noise는 0 이상이어야 합니다: {noise}")

        self.center = np.array([x, y, z], dtype=float)
        self.scale = scale
        self.depth = depth
        self.noise = noise
        self.random_state = random_state

    def dimensions(self) -> int:
        return 3

    def generate(self, n: int) -> Labeled:
        """n개 샘플 생성"""
        rng = np.random.default_rng(self.random_state)

        t = (rng.random(n) * 2 + 1) * 1.5 * np.pi

        x = t * np.cos(t)
        y = rng.random(n) * self.depth
        z = t * np.sin(t)

        noise = rng.normal(size=(n, 3)) * self.noise

        samples = np.column_stack([x, y, z]) * self.scale + self.center + noise

        return Labeled(samples, t)


class Blob:
    """
    가우시안 군집 생성기

    Parameters
    ----------
    center : sequence of float
        군집 중심 (차원 수 결정)

    stddev : float or sequence of float, default=1.0
        표준편차 (스칼라 또는 차원별)

    random_state : int, default=None
        랜덤 시드
    """

    def __init__(
        self,
        center: Sequence[float],
        stddev: Union[float, Sequence[float]] = 1.0,
        random_state: Optional[int] = None
    ):
        center = np.asarray(center, dtype=float).ravel()

        if center.size == 0:
            raise ValueError("center는 최소 1차원이어야 합니다.")

        stddev = np.broadcast_to(np.asarray(stddev, dtype=float), center.shape)

        if np.any(stddev < 0):
            raise ValueError(f"stddev는 0 이상이어야 합니다: {stddev}")

        self.center = center
        self.stddev = stddev
        self.random_state = random_state

    def dimensions(self) -> int:
        return self.center.size

    def generate(self, n: int) -> Dataset:
        rng = np.random.default_rng(self.random_state)

        samples = self.center + rng.normal(size=(n, self.dimensions())) * self.stddev

        return Dataset(samples)


class Agglomerate:
    """
    여러 생성기를 합쳐 레이블 데이터셋 생성

    Parameters
    ----------
    generators : dict
        {레이블: Blob}. 레이블이 문자열이면 범주형 레이블이 됨.

    weights : sequence of float, default=None
        각 생성기의 샘플 비율. None이면 균등.

    Examples
    --------
    >>> gen = Agglomerate({'A': Blob([0, 0]), 'B': Blob([5, 5])})
    >>> gen.generate(10).shape()
    (10, 2)
    """

    def __init__(
        self,
        generators: Dict[Any, Blob],
        weights: Optional[Sequence[float]] = None
    ):
        if len(generators) == 0:
            raise ValueError("최소 1개의 생성기가 필요합니다.")

        dims = {g.dimensions() for g in generators.values()}
        if len(dims) > 1:
            raise ValueError(f"모든 생성기의 차원이 같아야 합니다: {sorted(dims)}")

        if weights is None:
            weights = np.ones(len(generators))

        weights = np.asarray(weights, dtype=float)

        if weights.shape != (len(generators),):
            raise ValueError(
                f"가중치 수가 생성기 수와 다릅니다: {weights.size} vs {len(generators)}"
            )

        if np.any(weights < 0) or weights.sum() <= 0:
            raise ValueError(f"가중치는 0 이상이고 합이 양수여야 합니다: {weights}")

        self.generators = generators
        self.weights = weights / weights.sum()

    def dimensions(self) -> int:
        return next(iter(self.generators.values())).dimensions()

    def _allocate(self, n: int) -> np.ndarray:
        """비율에 따라 생성기별 샘플 수 배분 (합계 = n)"""
        raw = self.weights * n
        counts = np.floor(raw).astype(int)

        remainder = n - counts.sum()
        if remainder > 0:
            order = np.argsort(-(raw - counts), kind='stable')
            counts[order[:remainder]] += 1

        return counts

    def generate(self, n: int) -> Labeled:
        samples = []
        labels = []

        for (label, generator), count in zip(self.generators.items(), self._allocate(n)):
            samples.append(generator.generate(count).samples())
            labels.extend([label] * count)

        return Labeled(np.vstack(samples), labels)
