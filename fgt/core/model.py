from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from fgt.core.truncation import TruncationResult
from fgt.core.validation import validate_weights
from fgt.errors import InvalidArgumentError
from fgt.series.monomials import (
    compute_constant_series,
    compute_monomials,
    get_p_max_total,
)


@dataclass(eq=False)
class ClusterModel:
    """
    Результат разбиения точек на кластеры для IFGT.

    Хранит назначение точек, центры, радиусы, число точек в кластерах,
    выбранный порядок усечения и закэшированный вектор констант ряда.
    Заполняется одним проходом кластеризации, после чего массивы
    переводятся в режим только для чтения.

    Во время прохода radii — квадраты расстояний от исходных центров
    (точек-затравок); после финализации это обычные расстояния, а centers
    перезаписаны центроидами итоговых кластеров.
    """

    source: np.ndarray
    bandwidth: float
    epsilon: float
    indices: np.ndarray
    centers: np.ndarray
    radii: np.ndarray
    num_points: np.ndarray
    centroid_radii: np.ndarray
    rx: float
    p_max: int
    truncation_error: float
    bound_met: bool
    constant_series: np.ndarray

    @classmethod
    def empty(
        cls,
        source: np.ndarray,
        n_clusters: int,
        bandwidth: float,
        epsilon: float,
        truncation: TruncationResult,
    ) -> ClusterModel:
        """Модель с нулевыми массивами под N точек и K кластеров."""
        N, d = source.shape
        return cls(
            source=source,
            bandwidth=bandwidth,
            epsilon=epsilon,
            indices=np.zeros(N, dtype=np.int64),
            centers=np.zeros((n_clusters, d), dtype=np.float64),
            radii=np.zeros(n_clusters, dtype=np.float64),
            num_points=np.zeros(n_clusters, dtype=np.int64),
            centroid_radii=np.zeros(n_clusters, dtype=np.float64),
            rx=0.0,
            p_max=truncation.p_max,
            truncation_error=truncation.error,
            bound_met=truncation.bound_met,
            constant_series=compute_constant_series(d, truncation.p_max),
        )

    @property
    def N(self) -> int:
        return int(self.source.shape[0])

    @property
    def d(self) -> int:
        return int(self.source.shape[1])

    @property
    def K(self) -> int:
        return int(self.centers.shape[0])

    @property
    def p_max_total(self) -> int:
        """Число мономов степени <= p_max (ширина матрицы коэффициентов)."""
        return get_p_max_total(self.d, self.p_max)

    def set_truncation(self, truncation: TruncationResult) -> None:
        """Заменяет порядок усечения и пересчитывает кэш констант ряда."""
        self.p_max = truncation.p_max
        self.truncation_error = truncation.error
        self.bound_met = truncation.bound_met
        self.constant_series = compute_constant_series(self.d, self.p_max)

    def freeze(self) -> None:
        """Запрещает запись во все собственные массивы модели (source не трогаем)."""
        for arr in (
            self.indices,
            self.centers,
            self.radii,
            self.num_points,
            self.centroid_radii,
            self.constant_series,
        ):
            arr.flags.writeable = False

    def compute_C(self, q: np.ndarray, chunk_size: int = 1024) -> np.ndarray:
        """
        Агрегирует веса источников в коэффициенты разложения по кластерам.

        Для точки i кластера k:
            row_k += q_i * exp(-||x_i - c_k||^2 / h^2) * monomials((x_i - c_k) / h)
        после чего каждая строка поэлементно умножается на constant_series.

        Args:
            q: Веса источников, форма (N,)
            chunk_size: Сколько точек обрабатывать за раз; временные
                массивы занимают (chunk_size, p_max_total)

        Returns:
            Матрица коэффициентов (K, p_max_total)

        Raises:
            InvalidArgumentError: Если q или chunk_size некорректны
        """
        q = validate_weights(q, self.N)
        if chunk_size <= 0:
            raise InvalidArgumentError("chunk_size must be positive")
        h = self.bandwidth
        h2 = h * h

        C = np.zeros((self.K, self.p_max_total), dtype=np.float64)
        for start in range(0, self.N, chunk_size):
            stop = start + chunk_size
            idx = self.indices[start:stop]
            dx = self.source[start:stop] - self.centers[idx]
            distance2 = np.sum(dx * dx, axis=1)
            center_monomials = compute_monomials(dx / h, self.p_max)
            center_monomials *= (q[start:stop] * np.exp(-distance2 / h2))[:, None]
            # Несколько точек одного кластера: накопление без буферизации
            np.add.at(C, idx, center_monomials)

        return C * self.constant_series[None, :]
