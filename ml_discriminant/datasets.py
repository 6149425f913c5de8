"""
Datasets - 표 형식 데이터셋 컨테이너
====================================

샘플 행렬(n_samples x n_features)과 레이블 벡터를 보관하는 인메모리 데이터셋.
내부 저장소로 pandas DataFrame / Series를 사용합니다.

데이터 타입 규칙:
----------------
- 숫자형 (int, float)          → CONTINUOUS
- 그 외 (str, bool, object 등) → CATEGORICAL

예) 레이블이 ['A', 'B']이면 범주형, [0.5, 1.2]이면 연속형.
정수 레이블 [0, 1]도 숫자이므로 연속형으로 취급됩니다.

Author: ML From Scratch Project
"""

from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd


class DataType(Enum):
    """피처/레이블의 데이터 타입"""

    CONTINUOUS = 'continuous'
    CATEGORICAL = 'categorical'

    @classmethod
    def infer(cls, values: pd.Series) -> 'DataType':
        """pandas dtype으로부터 데이터 타입 추론"""
        if pd.api.types.is_bool_dtype(values):
            return cls.CATEGORICAL

        if pd.api.types.is_numeric_dtype(values):
            return cls.CONTINUOUS

        return cls.CATEGORICAL

    def __str__(self) -> str:
        return self.value


def _to_frame(samples: Any, feature_names: Optional[Sequence[str]]) -> pd.DataFrame:
    """샘플 입력을 DataFrame으로 변환 (모든 행의 길이가 같아야 함)"""
    if isinstance(samples, pd.DataFrame):
        frame = samples.reset_index(drop=True).copy()

    elif isinstance(samples, np.ndarray):
        if samples.size == 0:
            samples = samples.reshape(0, samples.shape[-1] if samples.ndim == 2 else 0)

        if samples.ndim != 2:
            raise ValueError(
                f"샘플은 2차원이어야 합니다: ndim={samples.ndim}"
            )

        frame = pd.DataFrame(samples).infer_objects()

    else:
        rows = [list(row) for row in samples]

        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise ValueError(
                f"모든 샘플의 피처 수가 같아야 합니다: {sorted(widths)}"
            )

        frame = pd.DataFrame(rows)

    if feature_names is not None:
        if len(feature_names) != frame.shape[1]:
            raise ValueError(
                f"피처 이름 수가 피처 수와 일치하지 않습니다: "
                f"{len(feature_names)} vs {frame.shape[1]}"
            )
        frame.columns = list(feature_names)

    return frame


class Dataset:
    """
    레이블 없는 데이터셋

    Parameters
    ----------
    samples : array-like of shape (n_samples, n_features) or DataFrame
        샘플 행렬. 모든 행은 같은 길이여야 함.

    feature_names : list of str, optional
        피처 이름

    Examples
    --------
    >>> ds = Dataset([[1.0, 2.0], [3.0, 4.0]])
    >>> ds.shape()
    (2, 2)
    >>> ds.homogeneous()
    True
    """

    def __init__(self, samples: Any, feature_names: Optional[Sequence[str]] = None):
        self._data = _to_frame(samples, feature_names)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> 'Dataset':
        return cls(df)

    def shape(self) -> Tuple[int, int]:
        """(n_samples, n_features)"""
        return self._data.shape[0], self._data.shape[1]

    def num_rows(self) -> int:
        return self._data.shape[0]

    def num_columns(self) -> int:
        return self._data.shape[1]

    def empty(self) -> bool:
        return self._data.shape[0] == 0

    def feature_names(self) -> List[Any]:
        return list(self._data.columns)

    def samples(self) -> np.ndarray:
        """샘플 행렬 (혼합 타입이면 object 배열)"""
        return self._data.to_numpy()

    def column_type(self, index: int) -> DataType:
        """index번째 피처의 데이터 타입"""
        return DataType.infer(self._data.iloc[:, index])

    def column_types(self) -> List[DataType]:
        return [self.column_type(i) for i in range(self.num_columns())]

    def homogeneous(self) -> bool:
        """모든 피처가 같은 데이터 타입인지 여부"""
        return len(set(self.column_types())) <= 1

    def columns(self) -> Iterator[Tuple[int, np.ndarray]]:
        """열 단위 순회: (index, values)"""
        for i in range(self.num_columns()):
            yield i, self._data.iloc[:, i].to_numpy()

    def to_dataframe(self) -> pd.DataFrame:
        return self._data.copy()

    def __len__(self) -> int:
        return self.num_rows()

    def __repr__(self) -> str:
        n, d = self.shape()
        return f"{self.__class__.__name__}(n_samples={n}, n_features={d})"


class Labeled(Dataset):
    """
    레이블이 있는 데이터셋

    Parameters
    ----------
    samples : array-like of shape (n_samples, n_features) or DataFrame
        샘플 행렬

    labels : array-like of shape (n_samples,)
        각 샘플의 레이블 (샘플과 1:1 대응)

    feature_names : list of str, optional
        피처 이름

    Examples
    --------
    >>> ds = Labeled([[1.0], [2.0], [9.0]], ['a', 'a', 'b'])
    >>> list(ds.stratify().keys())
    ['a', 'b']
    """

    def __init__(
        self,
        samples: Any,
        labels: Any,
        feature_names: Optional[Sequence[str]] = None
    ):
        super().__init__(samples, feature_names)

        labels = pd.Series(labels).reset_index(drop=True)

        if len(labels) != self.num_rows():
            raise ValueError(
                f"샘플 수와 레이블 수가 일치하지 않습니다: "
                f"{self.num_rows()} vs {len(labels)}"
            )

        if labels.isna().any():
            missing = int(labels.isna().sum())
            raise ValueError(f"누락된 레이블이 있습니다: {missing}개")

        self._labels = labels

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame, label_column: Any) -> 'Labeled':
        """DataFrame의 한 열을 레이블로 사용하여 생성"""
        if label_column not in df.columns:
            raise ValueError(f"레이블 열을 찾을 수 없습니다: {label_column}")

        return cls(df.drop(columns=[label_column]), df[label_column])

    def labels(self) -> np.ndarray:
        return self._labels.to_numpy()

    def label_type(self) -> DataType:
        """레이블의 데이터 타입"""
        return DataType.infer(self._labels)

    def possible_outcomes(self) -> np.ndarray:
        """고유 레이블 (첫 등장 순서)"""
        return pd.unique(self._labels)

    def stratify(self) -> Dict[Any, 'Labeled']:
        """
        레이블별로 데이터셋 분할 (stratum)

        각 stratum은 원래 행 순서와 피처 구성을 유지합니다.

        Returns
        -------
        strata : dict
            {레이블: 해당 레이블의 Labeled 데이터셋}
        """
        strata = {}

        for label in self.possible_outcomes():
            mask = (self._labels == label).to_numpy()
            strata[label] = Labeled(self._data[mask], self._labels[mask])

        return strata

    def to_dataframe(self, label_column: str = 'label') -> pd.DataFrame:
        df = self._data.copy()
        df[label_column] = self._labels.to_numpy()
        return df

    def __repr__(self) -> str:
        n, d = self.shape()
        return (
            f"Labeled(n_samples={n}, n_features={d}, "
            f"n_outcomes={len(self.possible_outcomes())})"
        )
