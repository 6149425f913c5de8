"""
Iris Discriminant Analysis - Main Runner
========================================
사분위수 표준화 + 선형 판별 분석 투영 + 시각화 통합 실행
"""

import os
from datetime import datetime

import numpy as np
import pandas as pd
from sklearn.datasets import load_iris

from ml_discriminant import (
    CONFIG,
    Labeled,
    LinearDiscriminantAnalysis,
    ProjectionVisualizer,
    QuartileStandardizer
)

RUN_CONFIG = {
    'dimensions': 2,
    'output_dir': 'figures',
    'label_column': 'species',
}


def load_data(label_column):
    """iris 데이터를 문자열 레이블의 DataFrame으로 로드"""
    iris = load_iris()
    df = pd.DataFrame(iris.data, columns=iris.feature_names)
    df[label_column] = iris.target_names[iris.target]
    return df


def main():
    print("=" * 70)
    print("Iris Linear Discriminant Analysis")
    print("=" * 70)
    print(f"Start Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print()

    # =========================================================================
    # 1. 데이터 로드 및 표준화
    # =========================================================================

    print("\n[PHASE 1] Load & Standardize")
    print("-" * 70)

    df = load_data(RUN_CONFIG['label_column'])
    dataset = Labeled.from_dataframe(df, RUN_CONFIG['label_column'])

    print(f"샘플 수: {dataset.num_rows()}, 피처 수: {dataset.num_columns()}")
    print(f"클래스: {list(dataset.possible_outcomes())}")

    standardizer = QuartileStandardizer()
    standardized = Labeled(
        standardizer.fit_transform(dataset),
        dataset.labels(),
        feature_names=dataset.feature_names()
    )

    # =========================================================================
    # 2. 판별 분석
    # =========================================================================

    print("\n[PHASE 2] Linear Discriminant Analysis")
    print("-" * 70)

    lda = LinearDiscriminantAnalysis(dimensions=RUN_CONFIG['dimensions'], verbose=1)
    projected = lda.fit_transform(standardized)

    print(f"\n{'Component':<12} {'Eigenvalue':>12} {'Cumulative':>12}")
    cumulative = np.cumsum(lda.eigenvalues_) / (lda.total_variance_ or CONFIG['epsilon'])
    for i, (value, ratio) in enumerate(zip(lda.eigenvalues_, cumulative), start=1):
        marker = '*' if i <= lda.dimensions else ' '
        print(f"{marker} LD{i:<9} {value:>12.4f} {ratio:>11.2%}")

    print(f"\nExplained variance: {lda.explained_variance():.4f}")
    print(f"Noise variance:     {lda.noise_variance():.4f}")
    print(f"Lossiness:          {lda.lossiness():.4%}")

    summary = pd.DataFrame(projected, columns=[f"LD{i + 1}" for i in range(lda.dimensions)])
    summary['species'] = dataset.labels()
    print("\n클래스별 투영 평균:")
    print(summary.groupby('species').mean().round(3))

    # =========================================================================
    # 3. 시각화
    # =========================================================================

    print("\n[PHASE 3] Visualization")
    print("-" * 70)

    os.makedirs(RUN_CONFIG['output_dir'], exist_ok=True)
    visualizer = ProjectionVisualizer()

    figures = {
        'lda_projection.png': visualizer.plot_projection(projected, dataset.labels()),
        'lda_spectrum.png': visualizer.plot_eigen_spectrum(lda),
        'lda_scatter.png': visualizer.plot_scatter_matrices(
            lda.scatter_, feature_names=dataset.feature_names()
        ),
    }

    for filename, fig in figures.items():
        visualizer.save_figure(fig, os.path.join(RUN_CONFIG['output_dir'], filename))

    print(f"\nEnd Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")


if __name__ == "__main__":
    main()
