"""
Linear Discriminant Analysis - From Scratch Implementation
===========================================================

클래스 레이블을 이용해 데이터를 가장 판별력 있는 방향으로 투영하는
지도 차원 축소 기법.

수학적 배경:
-----------
1. 산포 행렬 (scatter.py 참고):
   Sw = Σ_k (m_k / n) * Cov(X_k)
   Sb = Cov(X) - Sw

2. 고유값 분해:
   Sb v = λ v
   (Sw⁻¹ Sb의 일반화 고유값 문제가 아니라 Sb 자체를 분해합니다)

3. 고유쌍 정렬 및 절단:
   λ_1 ≥ λ_2 ≥ ... ≥ λ_d 순으로 정렬 후 상위 k개 선택

4. 분산 계산:
   total     = Σ_i λ_i
   explained = Σ_{i≤k} λ_i
   noise     = total - explained
   lossiness = noise / total   (total == 0 이면 epsilon 사용)

5. 투영:
   Z (m x k) = X (m x d) · W (d x k)

수치 관련:
---------
Sb는 대칭 행렬이므로 np.linalg.eigh로 분해하여 실수 고유값만 다룹니다.
반올림 오차로 생긴 음의 고유값은 0으로 잘라냅니다.

Author: ML From Scratch Project
"""

from typing import Any, Optional, Tuple

import numpy as np

from .config import CONFIG
from .datasets import Dataset
from .exceptions import DimensionMismatchError, NotFittedError
from .scatter import ScatterMatrices, compute_scatter_matrices, validate_dataset


def rank_eigenpairs(
    eigenvalues: np.ndarray,
    eigenvectors: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    """
    고유값 내림차순으로 고유쌍 정렬

    같은 고유값끼리는 원래 순서를 유지합니다 (stable sort).

    Parameters
    ----------
    eigenvalues : ndarray of shape (d,)
    eigenvectors : ndarray of shape (d, d)
        열 벡터가 각 고유값의 고유벡터

    Returns
    -------
    eigenvalues, eigenvectors : 정렬된 고유쌍
    """
    order = np.argsort(-eigenvalues, kind='stable')
    return eigenvalues[order], eigenvectors[:, order]


def normalize_signs(eigenvectors: np.ndarray) -> np.ndarray:
    """각 고유벡터의 절댓값이 가장 큰 성분이 양수가 되도록 부호 조정"""
    if eigenvectors.size == 0:
        return eigenvectors

    rows = np.argmax(np.abs(eigenvectors), axis=0)
    signs = np.sign(eigenvectors[rows, np.arange(eigenvectors.shape[1])])
    signs[signs == 0] = 1.0

    return eigenvectors * signs


class LinearDiscriminantAnalysis:
    """
    선형 판별 분석 변환기 (From Scratch)

    Parameters
    ----------
    dimensions : int
        투영할 목표 차원 수 (k). 1 이상이어야 하며, fit 시 피처 수 이하여야 함.

    epsilon : float, default=None
        전체 분산이 0일 때 손실률 분모로 사용할 작은 양수.
        None이면 CONFIG['epsilon'] 사용.

    verbose : int, default=None
        출력 수준. None이면 CONFIG['verbose'] 사용.

    Attributes
    ----------
    components_ : ndarray of shape (n_features, dimensions)
        투영 기저 (상위 k개 고유벡터)

    eigenvalues_ : ndarray of shape (n_features,)
        내림차순 정렬된 전체 고유값. 반올림 오차로 생긴 음수는 0으로 잘라낸 값.

    explained_variance_ : float
        보존된 분산 (상위 k개 고유값의 합)

    noise_variance_ : float
        버려진 분산

    lossiness_ : float
        정보 손실 비율 (noise / total)

    total_variance_ : float
        전체 고유값의 합

    n_features_ : int
        학습에 사용된 피처 수

    scatter_ : ScatterMatrices
        학습 시 계산된 산포 행렬

    Examples
    --------
    >>> from ml_discriminant import Labeled, LinearDiscriminantAnalysis
    >>> ds = Labeled([[1, 1], [1, 2], [8, 8], [9, 8]], ['a', 'a', 'b', 'b'])
    >>> lda = LinearDiscriminantAnalysis(dimensions=1).fit(ds)
    >>> lda.transform(ds.samples()).shape
    (4, 1)
    """

    def __init__(
        self,
        dimensions: int,
        epsilon: Optional[float] = None,
        verbose: Optional[int] = None
    ):
        if isinstance(dimensions, bool) or not isinstance(dimensions, (int, np.integer)):
            raise ValueError(f"dimensions는 정수여야 합니다: {dimensions!r}")

        if dimensions < 1:
            raise ValueError(
                f"1차원 미만으로 투영할 수 없습니다: dimensions={dimensions}"
            )

        epsilon = CONFIG['epsilon'] if epsilon is None else float(epsilon)
        if epsilon <= 0:
            raise ValueError(f"epsilon은 양수여야 합니다: {epsilon}")

        self.dimensions = int(dimensions)
        self.epsilon = epsilon
        self.verbose = CONFIG['verbose'] if verbose is None else verbose

        # 학습 후 설정되는 속성들
        self.components_: Optional[np.ndarray] = None
        self.eigenvalues_: Optional[np.ndarray] = None
        self.explained_variance_: Optional[float] = None
        self.noise_variance_: Optional[float] = None
        self.lossiness_: Optional[float] = None
        self.total_variance_: Optional[float] = None
        self.n_features_: int = 0
        self.scatter_: Optional[ScatterMatrices] = None

    def fitted(self) -> bool:
        """학습 여부"""
        return self.components_ is not None

    def explained_variance(self) -> Optional[float]:
        return self.explained_variance_

    def noise_variance(self) -> Optional[float]:
        return self.noise_variance_

    def lossiness(self) -> Optional[float]:
        return self.lossiness_

    def fit(self, dataset: Any) -> 'LinearDiscriminantAnalysis':
        """
        판별 기저 학습

        검증과 계산을 모두 마친 뒤 속성을 한 번에 갱신하므로,
        실패 시 이전 학습 상태가 그대로 유지됩니다.

        Parameters
        ----------
        dataset : Labeled
            연속형 피처와 범주형 레이블을 가진 데이터셋

        Returns
        -------
        self : LinearDiscriminantAnalysis
        """
        validate_dataset(dataset)

        n, d = dataset.shape()

        if self.dimensions > d:
            raise ValueError(
                f"목표 차원이 피처 수보다 큽니다: dimensions={self.dimensions}, "
                f"n_features={d}"
            )

        scatter = compute_scatter_matrices(dataset)

        if self.verbose > 0:
            print(
                f"LDA 학습 시작: {n}개 샘플, {d}개 피처, "
                f"{len(scatter.strata_sizes)}개 클래스"
            )

        # Sb 고유값 분해
        eigenvalues, eigenvectors = np.linalg.eigh(scatter.between_class)
        eigenvalues = np.clip(eigenvalues, 0.0, None)

        eigenvalues, eigenvectors = rank_eigenpairs(eigenvalues, eigenvectors)
        eigenvectors = normalize_signs(eigenvectors)

        k = self.dimensions
        components = eigenvectors[:, :k]

        total_variance = float(np.sum(eigenvalues))
        explained_variance = float(np.sum(eigenvalues[:k]))
        noise_variance = max(total_variance - explained_variance, 0.0)
        lossiness = noise_variance / (total_variance or self.epsilon)

        self.components_ = components
        self.eigenvalues_ = eigenvalues
        self.explained_variance_ = explained_variance
        self.noise_variance_ = noise_variance
        self.lossiness_ = lossiness
        self.total_variance_ = total_variance
        self.n_features_ = d
        self.scatter_ = scatter

        if self.verbose > 0:
            print(
                f"설명 분산: {explained_variance:.4f}, "
                f"잡음 분산: {noise_variance:.4f}, "
                f"손실률: {lossiness:.2%}"
            )

        return self

    def transform(self, samples: Any) -> np.ndarray:
        """
        학습된 기저로 샘플 투영

        입력은 변경하지 않고 새 배열을 반환합니다.

        Parameters
        ----------
        samples : Dataset or array-like of shape (n_samples, n_features)
            투영할 샘플. 1차원 배열은 단일 샘플로 취급.

        Returns
        -------
        projected : ndarray of shape (n_samples, dimensions)
        """
        if self.components_ is None:
            raise NotFittedError("변환기가 학습되지 않았습니다. fit()을 먼저 호출하세요.")

        if isinstance(samples, Dataset):
            samples = samples.samples()

        X = np.asarray(samples, dtype=float)

        if X.ndim == 1:
            X = X.reshape(0, self.n_features_) if X.size == 0 else X.reshape(1, -1)

        if X.ndim != 2 or X.shape[1] != self.n_features_:
            raise DimensionMismatchError(
                f"샘플의 피처 수가 학습 시와 다릅니다: "
                f"기대 {self.n_features_}, 입력 shape {X.shape}"
            )

        return X @ self.components_

    def fit_transform(self, dataset: Any) -> np.ndarray:
        return self.fit(dataset).transform(dataset.samples())

    def __repr__(self) -> str:
        if not self.fitted():
            return f"LinearDiscriminantAnalysis(dimensions={self.dimensions}, not fitted)"

        return (
            f"LinearDiscriminantAnalysis("
            f"dimensions={self.dimensions}, "
            f"n_features={self.n_features_}, "
            f"lossiness={self.lossiness_:.4f})"
        )
