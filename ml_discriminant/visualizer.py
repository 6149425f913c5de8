"""
Projection Visualizer - 판별 분석 시각화 도구
=============================================

학습된 판별 기저와 투영 결과를 시각화합니다.

주요 기능:
- 투영된 샘플의 클래스별 분포 (1차원 / 2차원)
- 고유값 스펙트럼과 누적 설명 분산 비율
- 클래스 내/클래스 간 산포 행렬 히트맵

Author: ML From Scratch Project
"""

from typing import Any, Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt

from .config import CONFIG
from .exceptions import NotFittedError
from .scatter import ScatterMatrices


class ProjectionVisualizer:
    """
    판별 분석 시각화 클래스

    Parameters
    ----------
    figsize : tuple, default=(12, 8)
        기본 Figure 크기

    style : str, default=None
        Matplotlib 스타일

    dpi : int, default=None
        Figure DPI. None이면 CONFIG['figure_dpi'].
    """

    def __init__(
        self,
        figsize: Tuple[int, int] = (12, 8),
        style: Optional[str] = None,
        dpi: Optional[int] = None
    ):
        self.figsize = figsize
        self.style = style
        self.dpi = dpi or CONFIG['figure_dpi']

        # 스타일 설정
        if self.style:
            try:
                plt.style.use(self.style)
            except OSError:
                pass  # 스타일을 찾을 수 없으면 기본값 사용

        # 색상 팔레트
        self.colors = {
            'primary': '#2E86AB',
            'secondary': '#A23B72',
            'accent': '#F18F01',
            'neutral': '#3B3B3B',
        }

    def plot_projection(
        self,
        projected: np.ndarray,
        labels: Sequence[Any],
        figsize: Optional[Tuple[int, int]] = None,
        title: str = "Discriminant Projection"
    ) -> plt.Figure:
        """
        투영된 샘플을 클래스별로 시각화

        1차원 투영은 클래스별 strip plot, 2차원 이상은 처음 두 성분의 산점도.

        Parameters
        ----------
        projected : ndarray of shape (n_samples, k)
            LinearDiscriminantAnalysis.transform 결과
        labels : sequence
            각 샘플의 레이블
        figsize : tuple, optional
        title : str

        Returns
        -------
        fig : matplotlib.Figure
        """
        projected = np.asarray(projected, dtype=float)
        labels = np.asarray(labels)

        if projected.ndim != 2 or len(projected) != len(labels):
            raise ValueError(
                f"투영 결과와 레이블 수가 맞지 않습니다: "
                f"{projected.shape} vs {labels.shape}"
            )

        fig, ax = plt.subplots(figsize=figsize or self.figsize, dpi=self.dpi)

        classes = list(dict.fromkeys(labels.tolist()))
        colors = plt.cm.tab10(np.linspace(0, 1, max(len(classes), 1)))

        for i, (label, color) in enumerate(zip(classes, colors)):
            mask = labels == label
            points = projected[mask]

            if projected.shape[1] == 1:
                rows = np.full(len(points), i, dtype=float)
                ax.scatter(points[:, 0], rows, color=color, alpha=0.7,
                           edgecolors='white', linewidth=0.5, label=str(label))
            else:
                ax.scatter(points[:, 0], points[:, 1], color=color, alpha=0.7,
                           edgecolors='white', linewidth=0.5, label=str(label))

        ax.set_xlabel('LD1', fontsize=11)
        if projected.shape[1] == 1:
            ax.set_yticks(range(len(classes)))
            ax.set_yticklabels([str(c) for c in classes])
            ax.set_ylabel('Class', fontsize=11)
        else:
            ax.set_ylabel('LD2', fontsize=11)

        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.legend(loc='best', fontsize=9)
        ax.grid(True, alpha=0.3)

        plt.tight_layout()
        return fig

    def plot_eigen_spectrum(
        self,
        lda,
        figsize: Optional[Tuple[int, int]] = None,
        title: str = "Eigenvalue Spectrum"
    ) -> plt.Figure:
        """
        고유값 스펙트럼과 누적 설명 분산 비율

        유지된 성분(상위 k개)은 강조 색으로 표시됩니다.
        """
        if not lda.fitted():
            raise NotFittedError("변환기가 학습되지 않았습니다. fit()을 먼저 호출하세요.")

        eigenvalues = lda.eigenvalues_
        k = lda.dimensions
        positions = np.arange(1, len(eigenvalues) + 1)

        fig, ax1 = plt.subplots(figsize=figsize or (10, 6), dpi=self.dpi)

        colors = [
            self.colors['primary'] if i < k else self.colors['neutral']
            for i in range(len(eigenvalues))
        ]
        ax1.bar(positions, eigenvalues, color=colors, alpha=0.8)
        ax1.set_xlabel('Component', fontsize=11)
        ax1.set_ylabel('Eigenvalue', fontsize=11)
        ax1.set_xticks(positions)

        # 누적 비율 (전체 분산이 0이면 0으로 표시)
        total = eigenvalues.sum()
        cumulative = np.cumsum(eigenvalues) / total if total > 0 else np.zeros_like(eigenvalues)

        ax2 = ax1.twinx()
        ax2.plot(positions, cumulative, 'o-', color=self.colors['accent'],
                 linewidth=2, markersize=5)
        ax2.set_ylabel('Cumulative Explained Ratio', fontsize=11)
        ax2.set_ylim(0, 1.05)

        ax1.axvline(x=k + 0.5, color='gray', linestyle=':', linewidth=1, alpha=0.7)
        ax1.set_title(
            f"{title} (lossiness={lda.lossiness():.2%})",
            fontsize=14, fontweight='bold'
        )
        ax1.grid(True, alpha=0.3)

        plt.tight_layout()
        return fig

    def plot_scatter_matrices(
        self,
        scatter: ScatterMatrices,
        feature_names: Optional[Sequence[str]] = None,
        figsize: Optional[Tuple[int, int]] = None,
        title: str = "Scatter Matrices"
    ) -> plt.Figure:
        """클래스 내(Sw) / 클래스 간(Sb) 산포 행렬 히트맵"""
        d = scatter.n_features
        names = list(feature_names) if feature_names else [f"X{i}" for i in range(d)]

        fig, axes = plt.subplots(1, 2, figsize=figsize or (14, 6), dpi=self.dpi)

        matrices = [
            ('Within-class (Sw)', scatter.within_class),
            ('Between-class (Sb)', scatter.between_class),
        ]

        for ax, (name, matrix) in zip(axes, matrices):
            im = ax.imshow(matrix, cmap='RdBu_r')
            ax.set_xticks(range(d))
            ax.set_yticks(range(d))
            ax.set_xticklabels(names, rotation=45, ha='right', fontsize=9)
            ax.set_yticklabels(names, fontsize=9)
            ax.set_title(name, fontsize=12)
            fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

        fig.suptitle(title, fontsize=14, fontweight='bold')

        plt.tight_layout()
        return fig

    def save_figure(
        self,
        fig: plt.Figure,
        filepath: str,
        dpi: Optional[int] = None
    ):
        """Figure 저장"""
        fig.savefig(filepath, dpi=dpi or self.dpi, bbox_inches='tight',
                    facecolor='white', edgecolor='none')
        print(f"Figure saved: {filepath}")
