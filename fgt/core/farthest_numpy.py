# core/farthest_numpy.py
from __future__ import annotations

import numpy as np

from .base import ClusteringBase
from .model import ClusterModel


class FarthestPointNumpy(ClusteringBase):
    """
    Та же кластеризация Гонсалеса без отсечений (baseline, O(N·K)).

    На каждой итерации пересчитывает расстояния от всех точек до нового
    центра. Используется как эталон для проверки GonzalezClustering.

    Совпадает с GonzalezClustering только при отсутствии ничьих по
    расстоянию: здесь из равноудалённых точек берётся точка с наименьшим
    индексом, а GonzalezClustering берёт первую найденную при обходе
    списков членов кластеров.
    """

    def _cluster(self, X: np.ndarray, model: ClusterModel, start: int) -> None:
        K = model.K
        labels = model.indices
        is_center = np.zeros(X.shape[0], dtype=bool)

        nc = start
        is_center[nc] = True
        model.centers[0] = X[nc]
        dist = np.sum((X - X[nc]) ** 2, axis=1)
        dist[nc] = 0.0

        for i in range(1, K):
            if dist.max() > 0.0:
                nc = int(np.argmax(dist))
            else:
                nc = int(np.flatnonzero(~is_center)[0])
            is_center[nc] = True
            model.centers[i] = X[nc]

            # (N, D) → (N,)
            dd = np.sum((X - X[nc]) ** 2, axis=1)
            closer = dd < dist
            dist = np.where(closer, dd, dist)
            labels[closer] = i
            dist[nc] = 0.0
            labels[nc] = i

        model.radii[:] = 0.0
        np.maximum.at(model.radii, labels, dist)
