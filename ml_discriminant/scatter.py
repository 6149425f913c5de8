"""
Scatter Matrices - 클래스 내/클래스 간 산포 행렬 계산
=====================================================

수학적 배경:
-----------
n개 샘플, d개 피처, 레이블별 stratum k (크기 m_k)에 대해

클래스 내 산포 (within-class):
    Sw = Σ_k (m_k / n) * Cov(X_k)

클래스 간 산포 (between-class):
    Sb = Cov(X) - Sw

공분산은 피처를 변수, 샘플을 관측치로 보고 계산합니다 (d x d).
모공분산(분모 m)을 사용하므로 전체 공분산 법칙에 의해

    Cov(X) = Σ_k (m_k/n) Cov(X_k) + Σ_k (m_k/n) (μ_k - μ)(μ_k - μ)ᵀ

가 정확히 성립하고, Sb는 대칭 양의 준정부호 행렬이 됩니다.

Author: ML From Scratch Project
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Tuple

import numpy as np

from .datasets import DataType

# 레이블 데이터셋이 제공해야 하는 메서드
_LABELED_CONTRACT = (
    'shape', 'samples', 'labels', 'stratify',
    'column_type', 'label_type', 'homogeneous',
)


@dataclass
class ScatterMatrices:
    """산포 행렬 계산 결과"""

    within_class: np.ndarray             # Sw (d x d)
    between_class: np.ndarray            # Sb (d x d)
    n_samples: int = 0
    n_features: int = 0
    strata_sizes: Dict[Any, int] = field(default_factory=dict)

    @property
    def total(self) -> np.ndarray:
        """전체 공분산 = Sw + Sb"""
        return self.within_class + self.between_class


def is_labeled(dataset: Any) -> bool:
    """레이블 데이터셋 인터페이스를 만족하는지 확인"""
    return all(
        callable(getattr(dataset, name, None)) for name in _LABELED_CONTRACT
    )


def validate_dataset(dataset: Any) -> None:
    """
    입력 데이터셋 사전 조건 검증

    Raises
    ------
    ValueError
        레이블 없는 데이터셋, 빈 데이터셋, 연속형이 아닌 피처,
        범주형이 아닌 레이블인 경우 (각각 다른 메시지)
    """
    if not is_labeled(dataset):
        raise ValueError("레이블이 있는 학습 데이터셋이 필요합니다.")

    n, d = dataset.shape()

    if n == 0 or d == 0:
        raise ValueError(f"빈 데이터셋으로는 학습할 수 없습니다: shape=({n}, {d})")

    if not dataset.homogeneous() or dataset.column_type(0) is not DataType.CONTINUOUS:
        raise ValueError("연속형 피처만 지원합니다.")

    if dataset.label_type() is not DataType.CATEGORICAL:
        raise ValueError("범주형 레이블만 지원합니다.")


def covariance(samples: np.ndarray) -> np.ndarray:
    """
    피처 공분산 행렬 (모공분산, d x d)

    샘플이 1개뿐이면 영행렬을 반환합니다.
    """
    samples = np.asarray(samples, dtype=float)
    return np.atleast_2d(np.cov(samples, rowvar=False, bias=True))


def iter_strata(dataset: Any) -> Iterator[Tuple[Any, Any]]:
    """
    (레이블, stratum) 쌍 순회

    stratify()가 {레이블: stratum} 매핑이나 stratum 시퀀스 중 무엇을
    반환해도 동작합니다. 시퀀스인 경우 레이블은 각 stratum의 첫 레이블.
    """
    strata = dataset.stratify()

    if isinstance(strata, Mapping):
        yield from strata.items()
        return

    for stratum in strata:
        labels = stratum.labels()
        yield (labels[0] if len(labels) > 0 else None), stratum


def _symmetrize(matrix: np.ndarray) -> np.ndarray:
    return (matrix + matrix.T) / 2


def compute_scatter_matrices(dataset: Any) -> ScatterMatrices:
    """
    클래스 내/클래스 간 산포 행렬 계산

    Parameters
    ----------
    dataset : Labeled
        연속형 피처와 범주형 레이블을 가진 데이터셋

    Returns
    -------
    scatter : ScatterMatrices
    """
    validate_dataset(dataset)

    n, d = dataset.shape()

    within_class = np.zeros((d, d))
    strata_sizes = {}
    n_partitioned = 0

    for label, stratum in iter_strata(dataset):
        m = stratum.shape()[0]

        if m == 0:
            raise ValueError(f"빈 stratum이 있습니다: label={label!r}")

        within_class += covariance(stratum.samples()) * (m / n)
        strata_sizes[label] = strata_sizes.get(label, 0) + m
        n_partitioned += m

    # strata는 모든 행을 빠짐없이 나눠야 함
    if n_partitioned != n:
        raise ValueError(
            f"stratum 크기의 합이 샘플 수와 다릅니다: {n_partitioned} vs {n}"
        )

    between_class = covariance(dataset.samples()) - within_class

    return ScatterMatrices(
        within_class=_symmetrize(within_class),
        between_class=_symmetrize(between_class),
        n_samples=n,
        n_features=d,
        strata_sizes=strata_sizes
    )
