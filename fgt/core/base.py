from __future__ import annotations

import warnings
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import numpy as np

from fgt.core.model import ClusterModel
from fgt.core.truncation import (
    TRUNCATION_NUMBER_UPPER_LIMIT,
    choose_truncation_number,
)
from fgt.core.validation import (
    validate_bandwidth,
    validate_epsilon,
    validate_n_clusters,
    validate_source,
    validate_starting_index,
)
from fgt.errors import BoundNotMetWarning
from fgt.metrics.timers import Timer
from fgt.series.monomials import max_order_within


@dataclass(frozen=True)
class ClusteringParams:
    """Параметры разбиения для IFGT."""

    bandwidth: float
    epsilon: float
    starting_index: int | None = None
    # Пересчитать p_max после кластеризации по фактическому радиусу центроидов
    refine_truncation: bool = False
    # Предел числа мономов C(d + p, d) для уточнённого порядка
    max_monomials: int = 100_000


class ClusteringBase(ABC):
    """
    Базовый класс алгоритмов разбиения точек для IFGT.

    Отвечает за общий каркас partition(...):
    - проверку аргументов до любого обращения к массивам;
    - выбор порядка усечения до кластеризации (по нулевой оценке радиуса);
    - финализацию: радиусы, rx, число точек и центроиды кластеров;
    - сбор таймингов t_cluster / t_finalize.

    Сам проход кластеризации реализуется в наследниках (_cluster).
    """

    def __init__(
        self,
        n_clusters: int,
        params: ClusteringParams,
        rng: np.random.Generator | int | None = None,
        logger: Any | None = None,
    ):
        self.K = n_clusters
        self.params = params
        if isinstance(rng, np.random.Generator):
            self.rng = rng
        else:
            self.rng = np.random.default_rng(rng)
        self.logger = logger

        self.t_cluster: float = 0.0
        self.t_finalize: float = 0.0

    def partition(self, X: np.ndarray) -> ClusterModel:
        """
        Разбивает точки X (N, d) на K кластеров и возвращает заполненную модель.

        Raises:
            InvalidArgumentError: При некорректных X, K, bandwidth, epsilon
                или starting_index
        """
        X = validate_source(X)
        N, d = X.shape
        K = validate_n_clusters(self.K, N)
        h = validate_bandwidth(self.params.bandwidth)
        eps = validate_epsilon(self.params.epsilon)
        start = validate_starting_index(self.params.starting_index, N)
        if start is None:
            start = int(self.rng.integers(N))

        # rx на этом этапе ещё неизвестен: порядок выбирается по нулевой оценке
        truncation = choose_truncation_number(d, h, eps, 0.0)
        model = ClusterModel.empty(X, K, h, eps, truncation)

        if self.logger:
            self.logger.info(
                f"Partition N={N} D={d} K={K} h={h:g} eps={eps:g} "
                f"start={start} p_max={model.p_max}"
            )

        with Timer(f"{type(self).__name__} pass", self.logger) as t_cluster:
            self._cluster(X, model, start)
        with Timer("finalize", self.logger) as t_finalize:
            self._finalize(X, model)
            if self.params.refine_truncation:
                self._refine_truncation(model, d, h, eps)
        self.t_cluster = t_cluster.elapsed
        self.t_finalize = t_finalize.elapsed

        if not model.bound_met:
            self._warn_bound_not_met(model)

        model.freeze()

        if self.logger:
            self.logger.info(
                f"  Partition done: rx={model.rx:.6g}, p_max={model.p_max}, "
                f"T_cluster={self.t_cluster:.6f}s, T_finalize={self.t_finalize:.6f}s"
            )
        return model

    def _finalize(self, X: np.ndarray, model: ClusterModel) -> None:
        """
        Переводит квадраты радиусов в расстояния, считает rx и центроиды.

        Радиусы остаются измеренными от точек-затравок; центры после этого
        шага — средние координаты итоговых членов кластеров.
        """
        np.sqrt(model.radii, out=model.radii)
        model.rx = float(np.max(model.radii))

        model.num_points[:] = np.bincount(model.indices, minlength=model.K)
        sums = np.zeros_like(model.centers)
        np.add.at(sums, model.indices, X)
        model.centers[:] = sums / model.num_points[:, None]

        diff = X - model.centers[model.indices]
        dist_to_centroid = np.sqrt(np.sum(diff * diff, axis=1))
        np.maximum.at(model.centroid_radii, model.indices, dist_to_centroid)

    def _refine_truncation(
        self, model: ClusterModel, d: int, h: float, eps: float
    ) -> None:
        """
        Пересчитывает p_max по наибольшему радиусу центроидов.

        Порядок ограничен так, чтобы мономов было не больше
        params.max_monomials; если при этом оценка не выполнена,
        модель помечается bound_met=False.
        """
        limit = max_order_within(
            d, self.params.max_monomials, TRUNCATION_NUMBER_UPPER_LIMIT
        )
        refined = choose_truncation_number(
            d, h, eps, float(np.max(model.centroid_radii)), upper_limit=limit
        )
        if self.logger and not refined.bound_met and limit < TRUNCATION_NUMBER_UPPER_LIMIT:
            self.logger.info(
                f"  Refined order capped at p_max={limit} "
                f"(max_monomials={self.params.max_monomials})"
            )
        model.set_truncation(refined)

    def _warn_bound_not_met(self, model: ClusterModel) -> None:
        msg = (
            f"Truncation order saturated at p_max={model.p_max}: "
            f"error bound {model.truncation_error:.3e} > epsilon={model.epsilon:.3e}"
        )
        if self.logger:
            self.logger.warning(msg)
        warnings.warn(msg, BoundNotMetWarning, stacklevel=3)

    @abstractmethod
    def _cluster(self, X: np.ndarray, model: ClusterModel, start: int) -> None:
        """
        Проход кластеризации.

        Должен заполнить model.indices и model.radii (квадраты расстояний
        от центров-затравок), начиная с точки start.
        """
        raise NotImplementedError
