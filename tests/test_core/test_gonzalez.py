"""
Unit-тесты кластеризации Гонсалеса с отсечениями.
"""

import numpy as np
import pytest

from fgt.core.base import ClusteringParams
from fgt.core.gonzalez import GonzalezClustering
from fgt.errors import InvalidArgumentError


def _partition(X, K, start=None, rng=None, **kw):
    params = ClusteringParams(
        bandwidth=kw.pop("bandwidth", 1.0),
        epsilon=kw.pop("epsilon", 1e-3),
        starting_index=start,
        **kw,
    )
    return GonzalezClustering(n_clusters=K, params=params, rng=rng).partition(X)


class TestGonzalezScenarios:
    """Сценарии с заранее известным результатом."""

    def test_square_corners(self, square_corners):
        """Квадрат 10x10, K=2, старт в (0, 0)."""
        model = _partition(square_corners, K=2, start=0)

        # (10, 10) — самая дальняя точка и второй центр;
        # (10, 0) и (0, 10) равноудалены от обоих центров и остаются в кластере 0
        np.testing.assert_array_equal(model.indices, [0, 0, 0, 1])
        np.testing.assert_array_equal(model.num_points, [3, 1])

        # Центры — центроиды итогового членства, а не точки-затравки
        np.testing.assert_allclose(model.centers[0], [10.0 / 3, 10.0 / 3])
        np.testing.assert_allclose(model.centers[1], [10.0, 10.0])

        # Радиусы измерены от затравок и уже не в квадрате
        np.testing.assert_allclose(model.radii, [10.0, 0.0])
        assert model.rx == pytest.approx(10.0)

    def test_two_groups(self, simple_2d_dataset):
        """Две явные группы разделяются, радиусы считаются от затравок."""
        model = _partition(simple_2d_dataset, K=2, start=0)

        np.testing.assert_array_equal(model.indices, [0, 0, 0, 1, 1, 1])
        np.testing.assert_allclose(model.centers, [[1.0, 1.0], [11.0, 11.0]])
        np.testing.assert_allclose(model.radii, [np.sqrt(8.0), np.sqrt(8.0)])
        np.testing.assert_allclose(model.centroid_radii, [np.sqrt(2.0), np.sqrt(2.0)])

    def test_single_cluster(self, small_dataset):
        """K=1: центр — центроид всех точек."""
        X = small_dataset
        model = _partition(X, K=1, start=3)

        np.testing.assert_array_equal(model.indices, np.zeros(len(X)))
        np.testing.assert_allclose(model.centers[0], X.mean(axis=0))

        to_centroid = np.linalg.norm(X - X.mean(axis=0), axis=1)
        assert model.centroid_radii[0] == pytest.approx(to_centroid.max())

        to_seed = np.linalg.norm(X - X[3], axis=1)
        assert model.radii[0] == pytest.approx(to_seed.max())
        assert model.rx == pytest.approx(to_seed.max())

    def test_every_point_own_cluster(self):
        """K=N: каждый кластер из одной точки с нулевым радиусом."""
        rng = np.random.default_rng(0)
        X = rng.random((12, 3))
        model = _partition(X, K=12, start=5)

        np.testing.assert_array_equal(model.num_points, np.ones(12))
        np.testing.assert_allclose(model.radii, np.zeros(12))
        assert model.rx == 0.0
        np.testing.assert_allclose(model.centers[model.indices], X)

    def test_duplicate_points(self):
        """Кластеров больше, чем различных точек: ни один кластер не пуст."""
        X = np.ones((5, 2))
        model = _partition(X, K=3, start=0)

        np.testing.assert_array_equal(model.indices, [0, 1, 2, 0, 0])
        np.testing.assert_array_equal(model.num_points, [3, 1, 1])
        np.testing.assert_allclose(model.radii, np.zeros(3))
        np.testing.assert_allclose(model.centers, np.ones((3, 2)))


class TestGonzalezInvariants:
    """Инварианты результата для произвольных данных."""

    @pytest.mark.parametrize("K", [1, 2, 5, 17, 60])
    def test_assignment_is_total(self, small_dataset, K):
        X = small_dataset
        model = _partition(X, K=K, start=0)

        assert model.indices.shape == (len(X),)
        assert np.all((model.indices >= 0) & (model.indices < K))
        assert model.num_points.sum() == len(X)
        assert np.all(model.num_points >= 1)
        assert np.all(model.radii >= 0.0)
        assert model.rx == pytest.approx(model.radii.max())

    def test_assignment_is_nearest_seed(self, small_dataset):
        """Каждая точка принадлежит ближайшему центру-затравке (ничьи — к первому)."""
        X = small_dataset
        K = 6
        model = _partition(X, K=K, start=0)

        # Затравки восстанавливаем полным перебором на тех же данных
        seeds = [0]
        dist = np.sum((X - X[0]) ** 2, axis=1)
        for _ in range(1, K):
            nc = int(np.argmax(dist))
            seeds.append(nc)
            dist = np.minimum(dist, np.sum((X - X[nc]) ** 2, axis=1))

        d2 = np.sum((X[:, None, :] - X[seeds][None, :, :]) ** 2, axis=2)
        np.testing.assert_array_equal(model.indices, np.argmin(d2, axis=1))

    def test_deterministic_with_start(self, small_dataset):
        """Одинаковые входы и старт → побитово одинаковый результат."""
        a = _partition(small_dataset, K=7, start=11)
        b = _partition(small_dataset, K=7, start=11)

        np.testing.assert_array_equal(a.indices, b.indices)
        np.testing.assert_array_equal(a.centers, b.centers)
        np.testing.assert_array_equal(a.radii, b.radii)

    def test_seeded_random_start(self, small_dataset):
        """Случайный старт воспроизводим при одинаковом seed генератора."""
        a = _partition(small_dataset, K=4, rng=123)
        b = _partition(small_dataset, K=4, rng=np.random.default_rng(123))

        np.testing.assert_array_equal(a.indices, b.indices)
        np.testing.assert_array_equal(a.centers, b.centers)

    def test_source_is_referenced(self, small_dataset):
        model = _partition(small_dataset, K=3, start=0)
        assert model.source is small_dataset

    def test_model_is_read_only(self, small_dataset):
        model = _partition(small_dataset, K=3, start=0)

        with pytest.raises(ValueError):
            model.centers[0, 0] = 1.0
        with pytest.raises(ValueError):
            model.indices[0] = 2
        # Исходные точки принадлежат вызывающему коду
        assert small_dataset.flags.writeable

    def test_timings_collected(self, small_dataset):
        params = ClusteringParams(bandwidth=1.0, epsilon=1e-3, starting_index=0)
        clusterer = GonzalezClustering(n_clusters=4, params=params)
        clusterer.partition(small_dataset)

        assert clusterer.t_cluster > 0
        assert clusterer.t_finalize > 0


class TestGonzalezArguments:
    """Некорректные аргументы отклоняются до вычислений."""

    @pytest.mark.parametrize("K", [0, -1, 61, 2.5, True])
    def test_bad_n_clusters(self, small_dataset, K):
        with pytest.raises(InvalidArgumentError):
            _partition(small_dataset, K=K, start=0)

    @pytest.mark.parametrize("bandwidth", [0.0, -1.0, float("nan"), float("inf")])
    def test_bad_bandwidth(self, small_dataset, bandwidth):
        with pytest.raises(InvalidArgumentError):
            _partition(small_dataset, K=2, start=0, bandwidth=bandwidth)

    @pytest.mark.parametrize("epsilon", [0.0, 1.0, -0.1, 1.5, float("nan")])
    def test_bad_epsilon(self, small_dataset, epsilon):
        with pytest.raises(InvalidArgumentError):
            _partition(small_dataset, K=2, start=0, epsilon=epsilon)

    @pytest.mark.parametrize("start", [-1, 60, 100, 1.0])
    def test_bad_starting_index(self, small_dataset, start):
        with pytest.raises(InvalidArgumentError):
            _partition(small_dataset, K=2, start=start)

    def test_empty_source(self):
        with pytest.raises(InvalidArgumentError):
            _partition(np.zeros((0, 2)), K=1, start=None)

    def test_not_a_matrix(self):
        with pytest.raises(InvalidArgumentError):
            _partition(np.arange(5.0), K=1, start=0)

    def test_invalid_argument_is_value_error(self, small_dataset):
        with pytest.raises(ValueError):
            _partition(small_dataset, K=0, start=0)
