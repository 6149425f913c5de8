"""
Projection Visualizer - 동작 확인 테스트
"""

import os
import tempfile

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
import pytest

from ml_discriminant import (
    Agglomerate,
    Blob,
    LinearDiscriminantAnalysis,
    NotFittedError,
    ProjectionVisualizer
)


def _fitted_lda(dimensions: int = 2):
    dataset = Agglomerate({
        'A': Blob([0.0, 0.0, 0.0], random_state=1),
        'B': Blob([4.0, 1.0, 0.0], random_state=2),
        'C': Blob([0.0, 5.0, 2.0], random_state=3),
    }).generate(60)

    lda = LinearDiscriminantAnalysis(dimensions=dimensions).fit(dataset)
    return lda, dataset


def test_plot_projection():
    visualizer = ProjectionVisualizer()

    for dimensions in (1, 2):
        lda, dataset = _fitted_lda(dimensions)
        fig = visualizer.plot_projection(lda.transform(dataset), dataset.labels())

        assert isinstance(fig, plt.Figure)
        plt.close(fig)

    with pytest.raises(ValueError):
        visualizer.plot_projection(np.zeros((3, 2)), ['A', 'B'])


def test_plot_eigen_spectrum():
    visualizer = ProjectionVisualizer(dpi=50)
    lda, _ = _fitted_lda()

    fig = visualizer.plot_eigen_spectrum(lda)
    assert isinstance(fig, plt.Figure)
    plt.close(fig)

    with pytest.raises(NotFittedError):
        visualizer.plot_eigen_spectrum(LinearDiscriminantAnalysis(dimensions=1))


def test_plot_scatter_matrices_and_save():
    visualizer = ProjectionVisualizer()
    lda, _ = _fitted_lda()

    fig = visualizer.plot_scatter_matrices(lda.scatter_, feature_names=['a', 'b', 'c'])

    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, 'scatter.png')
        visualizer.save_figure(fig, path)
        assert os.path.exists(path)

    plt.close(fig)


if __name__ == "__main__":
    for test in (test_plot_projection, test_plot_eigen_spectrum,
                 test_plot_scatter_matrices_and_save):
        test()
        print(f"  ✓ {test.__name__}")
