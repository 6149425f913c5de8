"""
Preprocessing / Kernels / Generators - 검증 테스트
==================================================

테스트 항목:
1. QuartileStandardizer: sklearn RobustScaler와의 일관성
2. Canberra 거리
3. 합성 데이터셋 생성기

Author: ML From Scratch Project
"""

import numpy as np
import pytest
from sklearn.preprocessing import RobustScaler

from ml_discriminant import (
    Agglomerate,
    Blob,
    Canberra,
    DataType,
    Dataset,
    DimensionMismatchError,
    Labeled,
    NotFittedError,
    QuartileStandardizer,
    SwissRoll
)


def test_quartile_standardizer_matches_sklearn():
    """(x - median) / IQR 가 RobustScaler와 일치"""
    print("=" * 50)
    print("Test: Quartile Standardizer vs sklearn")
    print("=" * 50)

    rng = np.random.default_rng(42)
    X = rng.normal(loc=[0.0, 5.0, -3.0], scale=[1.0, 2.0, 0.5], size=(200, 3))

    ours = QuartileStandardizer().fit_transform(Dataset(X))
    theirs = RobustScaler(quantile_range=(25.0, 75.0)).fit_transform(X)

    assert np.allclose(ours, theirs, rtol=1e-6, atol=1e-6)

    # 표준화 후 중앙값은 0
    assert np.allclose(np.median(ours, axis=0), 0.0, atol=1e-9)

    print(f"  ✓ 최대 차이: {np.max(np.abs(ours - theirs)):.2e}")


def test_quartile_standardizer_medians_and_iqrs():
    standardizer = QuartileStandardizer()

    assert standardizer.medians() is None
    assert standardizer.iqrs() is None

    standardizer.fit(Dataset([[1.0], [2.0], [3.0], [4.0], [5.0]]))

    assert standardizer.medians() == {0: 3.0}
    assert standardizer.iqrs() == {0: 2.0}


def test_quartile_standardizer_skips_categorical():
    """범주형 열은 통계를 계산하지 않고 그대로 통과"""
    dataset = Dataset([[1.0, 'a'], [2.0, 'b'], [3.0, 'a']])

    standardizer = QuartileStandardizer().fit(dataset)

    assert list(standardizer.medians().keys()) == [0]

    transformed = standardizer.transform(dataset)

    assert list(transformed[:, 1]) == ['a', 'b', 'a']
    assert np.allclose(transformed[:, 0].astype(float), [-1.0, 0.0, 1.0], atol=1e-6)

    raw = standardizer.transform([[2.0, 'c']])
    assert raw[0, 1] == 'c'
    assert np.isclose(float(raw[0, 0]), 0.0)


def test_quartile_standardizer_constant_column():
    """IQR = 0 → epsilon으로 0 나누기 방지"""
    standardizer = QuartileStandardizer().fit(Dataset([[7.0], [7.0], [7.0]]))

    transformed = standardizer.transform([[7.0], [8.0]])

    assert np.all(np.isfinite(transformed))
    assert transformed[0, 0] == 0.0


def test_quartile_standardizer_errors():
    with pytest.raises(NotFittedError):
        QuartileStandardizer().transform([[1.0]])

    standardizer = QuartileStandardizer().fit(Dataset([[1.0, 2.0], [3.0, 4.0]]))

    with pytest.raises(DimensionMismatchError):
        standardizer.transform([[1.0, 2.0, 3.0]])


def test_quartile_standardizer_does_not_mutate_input():
    X = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 9.0]])
    original = X.copy()

    QuartileStandardizer().fit(Dataset(X)).transform(X)

    assert np.array_equal(X, original)


def test_canberra_distance():
    """Canberra 거리 계산"""
    print("\n" + "=" * 50)
    print("Test: Canberra Distance")
    print("=" * 50)

    kernel = Canberra()

    assert np.isclose(kernel.compute([1.0, 2.0, 0.0], [3.0, 2.0, 0.0]), 0.5)
    assert np.isclose(kernel([-1.0], [1.0]), 1.0)
    assert kernel.compute([0.0, 0.0], [0.0, 0.0]) == 0.0

    # 대칭성
    a, b = [1.5, -2.0, 4.0], [0.5, 3.0, 4.5]
    assert np.isclose(kernel(a, b), kernel(b, a))

    with pytest.raises(DimensionMismatchError):
        kernel([1.0, 2.0], [1.0])

    print(f"  ✓ d(a, b) = {kernel(a, b):.4f}")


def test_swiss_roll():
    """3차원 스위스 롤, 연속형 레이블"""
    print("\n" + "=" * 50)
    print("Test: Swiss Roll Generator")
    print("=" * 50)

    generator = SwissRoll(x=1.0, scale=1.0, depth=10.0, noise=0.0, random_state=0)
    dataset = generator.generate(100)

    assert generator.dimensions() == 3
    assert dataset.shape() == (100, 3)
    assert dataset.label_type() is DataType.CONTINUOUS

    t = dataset.labels().astype(float)
    assert np.all((t >= 1.5 * np.pi) & (t <= 4.5 * np.pi))

    samples = dataset.samples()
    assert np.allclose(samples[:, 0], t * np.cos(t) + 1.0)
    assert np.allclose(samples[:, 2], t * np.sin(t))
    assert np.all((samples[:, 1] >= 0.0) & (samples[:, 1] <= 10.0))

    # 재현성
    again = SwissRoll(x=1.0, depth=10.0, noise=0.0, random_state=0).generate(100)
    assert np.allclose(again.samples(), samples)

    for kwargs in ({'scale': -1.0}, {'depth': -1.0}, {'noise': -0.1}):
        with pytest.raises(ValueError):
            SwissRoll(**kwargs)

    print(f"  ✓ t 범위: [{t.min():.2f}, {t.max():.2f}]")


def test_blob():
    blob = Blob([1.0, -1.0], stddev=0.0, random_state=1)
    dataset = blob.generate(5)

    assert dataset.shape() == (5, 2)
    assert np.allclose(dataset.samples(), [[1.0, -1.0]] * 5)

    with pytest.raises(ValueError):
        Blob([0.0], stddev=-1.0)

    with pytest.raises(ValueError):
        Blob([])


def test_agglomerate():
    """가중치 비율에 따른 샘플 수 배분과 범주형 레이블"""
    generator = Agglomerate(
        {'A': Blob([0.0, 0.0], random_state=1), 'B': Blob([5.0, 5.0], random_state=2)},
        weights=[1, 2]
    )

    dataset = generator.generate(10)
    labels = list(dataset.labels())

    assert isinstance(dataset, Labeled)
    assert dataset.shape() == (10, 2)
    assert labels.count('A') == 3
    assert labels.count('B') == 7
    assert dataset.label_type() is DataType.CATEGORICAL
    assert generator.dimensions() == 2

    with pytest.raises(ValueError):
        Agglomerate({'A': Blob([0.0]), 'B': Blob([0.0, 1.0])})

    with pytest.raises(ValueError):
        Agglomerate({'A': Blob([0.0])}, weights=[1, 2])

    with pytest.raises(ValueError):
        Agglomerate({})


def run_all_tests():
    """모든 테스트 실행"""
    print("\n" + "=" * 60)
    print("PREPROCESSING / KERNELS / GENERATORS - 전체 검증 테스트")
    print("=" * 60)

    tests = [
        test_quartile_standardizer_matches_sklearn,
        test_quartile_standardizer_medians_and_iqrs,
        test_quartile_standardizer_skips_categorical,
        test_quartile_standardizer_constant_column,
        test_quartile_standardizer_errors,
        test_quartile_standardizer_does_not_mutate_input,
        test_canberra_distance,
        test_swiss_roll,
        test_blob,
        test_agglomerate
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
        except Exception as e:
            print(f"\n  ✗ 테스트 실패 ({test.__name__}): {e}")
            failed += 1

    print("\n" + "=" * 60)
    print(f"테스트 결과: {passed} 통과, {failed} 실패")
    print("=" * 60)

    return failed == 0


if __name__ == "__main__":
    success = run_all_tests()
    exit(0 if success else 1)
