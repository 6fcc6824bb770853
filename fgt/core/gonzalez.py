"""
Кластеризация Гонсалеса (farthest-point, 2-аппроксимация задачи K-center)
с отсечением по неравенству треугольника.

Состояние прохода:
- dist[i]: квадрат расстояния от точки i до ближайшего выбранного центра;
- model.indices[i]: кластер, владеющий точкой i;
- model.radii[j] / far2c[j]: максимальный квадрат расстояния от центра j
  до его членов и точка, на которой он достигается (кандидат в новый центр);
- cnext / cprev: кольцевые двусвязные списки членов кластеров поверх
  индексов точек. Голова списка кластера — его центр-затравка.

При добавлении центра c_new кластер j просматривается, только если
||c_j - c_new||^2 / 4 < radius[j]: иначе ни одна его точка не может
оказаться ближе к новому центру.
"""

from __future__ import annotations

import numpy as np

from fgt.core.base import ClusteringBase
from fgt.core.model import ClusterModel


def _ddist(x: np.ndarray, y: np.ndarray) -> float:
    """Квадрат евклидова расстояния между двумя точками."""
    return float(np.sum((x - y) ** 2))


class GonzalezClustering(ClusteringBase):
    """Farthest-point кластеризация с инкрементальным пересчётом членства."""

    def _cluster(self, X: np.ndarray, model: ClusterModel, start: int) -> None:
        N = X.shape[0]
        K = model.K
        index = model.indices
        radius = model.radii

        centers = np.zeros(K, dtype=np.int64)
        far2c = np.zeros(K, dtype=np.int64)

        nc = start
        centers[0] = nc
        model.centers[0] = X[nc]

        dist = np.sum((X - X[nc]) ** 2, axis=1)
        dist[nc] = 0.0

        # Один кольцевой список по всем точкам
        cnext = np.roll(np.arange(N, dtype=np.int64), -1)
        cprev = np.roll(np.arange(N, dtype=np.int64), 1)

        nc = int(np.argmax(dist))
        far2c[0] = nc
        radius[0] = dist[nc]

        for i in range(1, K):
            j_max = int(np.argmax(radius[:i]))
            if radius[j_max] > 0.0:
                nc = int(far2c[j_max])
            else:
                # Все оставшиеся точки совпадают с центрами (дубликаты)
                nc = self._first_free_member(centers[:i], cnext)

            centers[i] = nc
            model.centers[i] = X[nc]
            radius[i] = 0.0
            dist[nc] = 0.0
            index[nc] = i
            far2c[i] = nc

            # nc -> отдельный список из одного элемента
            cnext[cprev[nc]] = cnext[nc]
            cprev[cnext[nc]] = cprev[nc]
            cnext[nc] = nc
            cprev[nc] = nc

            x_new = X[nc]
            for j in range(i):
                ct_j = int(centers[j])
                dc2cq = _ddist(X[ct_j], x_new) / 4
                if dc2cq >= radius[j]:
                    continue

                radius[j] = 0.0
                far2c[j] = ct_j
                k = int(cnext[ct_j])
                while k != ct_j:
                    nextk = int(cnext[k])
                    dist2c_k = dist[k]
                    if dc2cq < dist2c_k:
                        dd = _ddist(X[k], x_new)
                        if dd < dist2c_k:
                            dist[k] = dd
                            index[k] = i
                            if radius[i] < dd:
                                radius[i] = dd
                                far2c[i] = k
                            # k: из списка j в голову списка i
                            cnext[cprev[k]] = nextk
                            cprev[nextk] = cprev[k]
                            cnext[k] = cnext[nc]
                            cprev[cnext[nc]] = k
                            cnext[nc] = k
                            cprev[k] = nc
                        elif radius[j] < dist2c_k:
                            radius[j] = dist2c_k
                            far2c[j] = k
                    elif radius[j] < dist2c_k:
                        radius[j] = dist2c_k
                        far2c[j] = k
                    k = nextk

            if self.logger:
                self.logger.debug(
                    f"  Center {i + 1}/{K}: point {nc}, "
                    f"max radius^2={float(np.max(radius[:i + 1])):.6g}"
                )

    @staticmethod
    def _first_free_member(centers: np.ndarray, cnext: np.ndarray) -> int:
        """Первая точка, не являющаяся центром, в списках существующих кластеров."""
        for ct_j in centers:
            k = int(cnext[ct_j])
            if k != ct_j:
                return k
        raise RuntimeError("No free point left to promote to a center")
