"""
Quartile Standardizer - 사분위수 기반 강건 표준화
=================================================

z = (x - median) / (IQR + ε)

IQR = Q3 - Q1 (np.percentile, 선형 보간)

중앙값과 사분위 범위를 사용하므로 평균/표준편차 기반 표준화보다
이상치에 덜 민감합니다. 연속형 피처에만 적용되고 범주형 피처는
그대로 통과합니다.

Author: ML From Scratch Project
"""

from typing import Any, Dict, Optional

import numpy as np

from .config import CONFIG
from .datasets import Dataset, DataType
from .exceptions import DimensionMismatchError, NotFittedError


class QuartileStandardizer:
    """
    사분위수 기반 표준화 변환기

    Parameters
    ----------
    epsilon : float, default=None
        IQR이 0인 피처를 위한 분모 보정값. None이면 CONFIG['epsilon'].

    Attributes
    ----------
    medians_ : dict
        {열 인덱스: 중앙값} (연속형 열만)

    iqrs_ : dict
        {열 인덱스: 사분위 범위}

    n_features_ : int
    """

    def __init__(self, epsilon: Optional[float] = None):
        self.epsilon = CONFIG['epsilon'] if epsilon is None else float(epsilon)

        self.medians_: Optional[Dict[int, float]] = None
        self.iqrs_: Optional[Dict[int, float]] = None
        self.n_features_: int = 0

    def fitted(self) -> bool:
        return self.medians_ is not None and self.iqrs_ is not None

    def medians(self) -> Optional[Dict[int, float]]:
        return self.medians_

    def iqrs(self) -> Optional[Dict[int, float]]:
        return self.iqrs_

    def fit(self, dataset: Any) -> 'QuartileStandardizer':
        """연속형 열별 중앙값과 사분위 범위 계산"""
        if not isinstance(dataset, Dataset):
            dataset = Dataset(dataset)

        medians = {}
        iqrs = {}

        for column, values in dataset.columns():
            if dataset.column_type(column) is not DataType.CONTINUOUS:
                continue

            q1, q2, q3 = np.percentile(values.astype(float), [25, 50, 75])

            medians[column] = float(q2)
            iqrs[column] = float(q3 - q1)

        self.medians_ = medians
        self.iqrs_ = iqrs
        self.n_features_ = dataset.num_columns()

        return self

    def transform(self, samples: Any) -> np.ndarray:
        """
        표준화 수행 (새 배열 반환)

        Parameters
        ----------
        samples : Dataset or array-like of shape (n_samples, n_features)

        Returns
        -------
        standardized : ndarray of shape (n_samples, n_features)
            범주형 열이 섞여 있으면 object 배열
        """
        if not self.fitted():
            raise NotFittedError("변환기가 학습되지 않았습니다. fit()을 먼저 호출하세요.")

        if isinstance(samples, Dataset):
            samples = samples.samples()

        X = np.array(samples)

        if X.ndim == 1:
            X = X.reshape(0, self.n_features_) if X.size == 0 else X.reshape(1, -1)

        if X.ndim != 2 or X.shape[1] != self.n_features_:
            raise DimensionMismatchError(
                f"샘플의 피처 수가 학습 시와 다릅니다: "
                f"기대 {self.n_features_}, 입력 shape {X.shape}"
            )

        # 모든 열이 연속형이면 float 배열로 계산
        if len(self.medians_) == self.n_features_:
            X = X.astype(float)
        elif X.dtype.kind in 'US':
            X = X.astype(object)

        for column, median in self.medians_.items():
            X[:, column] = (X[:, column].astype(float) - median) / (
                self.iqrs_[column] + self.epsilon
            )

        return X

    def fit_transform(self, dataset: Any) -> np.ndarray:
        return self.fit(dataset).transform(dataset)

    def __repr__(self) -> str:
        if not self.fitted():
            return "QuartileStandardizer(not fitted)"

        return f"QuartileStandardizer(n_features={self.n_features_})"
