"""
Генератор синтетических задач гауссова преобразования.

Источники строятся через sklearn.make_blobs (кластеризованные данные)
и масштабируются в единичный куб, цели равномерно распределены в том же
кубе, веса — равномерные на [0, 1).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from sklearn.datasets import make_blobs
from sklearn.preprocessing import MinMaxScaler


@dataclass
class GaussProblem:
    """Контейнер для одной задачи: источники X, цели Y, веса q."""

    X: np.ndarray
    Y: np.ndarray
    q: np.ndarray
    metadata: dict[str, Any] = field(default_factory=dict)


def make_problem(
    N: int,
    D: int,
    K: int,
    n_targets: int | None = None,
    cluster_std: float = 1.0,
    seed: int = 42,
) -> GaussProblem:
    """
    Создаёт воспроизводимую задачу с N источниками в D измерениях.

    Args:
        N: Количество источников
        D: Размерность
        K: Количество "истинных" кластеров make_blobs
        n_targets: Количество целевых точек (по умолчанию N)
        cluster_std: Разброс кластеров make_blobs
        seed: Seed для make_blobs и генератора целей/весов
    """
    if n_targets is None:
        n_targets = N

    X, _ = make_blobs(
        n_samples=N,
        n_features=D,
        centers=K,
        cluster_std=cluster_std,
        random_state=seed,
    )
    X = MinMaxScaler().fit_transform(X).astype(np.float64)

    rng = np.random.default_rng(seed)
    Y = rng.random((n_targets, D))
    q = rng.random(N)

    return GaussProblem(
        X=X,
        Y=Y,
        q=q,
        metadata={
            "N": N,
            "D": D,
            "K": K,
            "M": n_targets,
            "cluster_std": cluster_std,
            "seed": seed,
        },
    )
