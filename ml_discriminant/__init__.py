"""
ML Discriminant - 판별 분석 기반 차원 축소 직접 구현
===================================================

레이블이 있는 표 형식 데이터셋에 대해 클래스 내/클래스 간 산포 행렬을
계산하고, 고유값 분해로 판별 기저를 찾아 데이터를 투영합니다.
NumPy로 수치 계산을, pandas로 데이터셋 저장을 처리합니다.

구현된 구성 요소:
- Labeled / Dataset: 표 형식 데이터셋 컨테이너
- compute_scatter_matrices: 클래스 내/클래스 간 산포 행렬
- LinearDiscriminantAnalysis: 판별 기저 학습 및 투영
- QuartileStandardizer: 사분위수 기반 강건 표준화
- Canberra: Canberra 거리
- SwissRoll / Blob / Agglomerate: 합성 데이터셋 생성기
- ProjectionVisualizer: 투영 결과 시각화

Author: ML From Scratch Project
"""

from .config import CONFIG
from .exceptions import NotFittedError, DimensionMismatchError
from .datasets import DataType, Dataset, Labeled
from .scatter import ScatterMatrices, compute_scatter_matrices
from .linear_discriminant import LinearDiscriminantAnalysis
from .quartile_standardizer import QuartileStandardizer
from .kernels import Canberra
from .generators import SwissRoll, Blob, Agglomerate
from .visualizer import ProjectionVisualizer

__all__ = [
    'CONFIG',
    'NotFittedError',
    'DimensionMismatchError',
    'DataType',
    'Dataset',
    'Labeled',
    'ScatterMatrices',
    'compute_scatter_matrices',
    'LinearDiscriminantAnalysis',
    'QuartileStandardizer',
    'Canberra',
    'SwissRoll',
    'Blob',
    'Agglomerate',
    'ProjectionVisualizer'
]

__version__ = '1.0.0'
