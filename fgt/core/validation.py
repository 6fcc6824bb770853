"""
Проверка входных параметров кластеризации и агрегации коэффициентов.

Все проверки выполняются до любого обращения к массивам по индексу и
бросают InvalidArgumentError.
"""

from __future__ import annotations

import math
import numbers

import numpy as np

from fgt.errors import InvalidArgumentError


def validate_source(source: np.ndarray) -> np.ndarray:
    """
    Приводит набор точек к float64 (N, d) без копирования, если это возможно.

    Raises:
        InvalidArgumentError: Если массив не двумерный, пуст или содержит
            нечисловые/бесконечные значения
    """
    try:
        X = np.asarray(source, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Source points must be numeric: {e}") from e

    if X.ndim != 2:
        raise InvalidArgumentError(
            f"Source points must be a 2-D array (N, d), got ndim={X.ndim}"
        )
    if X.shape[0] == 0:
        raise InvalidArgumentError("Source point set is empty (N=0)")
    if X.shape[1] == 0:
        raise InvalidArgumentError("Source points have zero dimensions (d=0)")
    if not np.all(np.isfinite(X)):
        raise InvalidArgumentError("Source points contain NaN or inf")
    return X


def validate_n_clusters(n_clusters: int, N: int) -> int:
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, numbers.Integral):
        raise InvalidArgumentError(
            f"Number of clusters must be an integer, got {n_clusters!r}"
        )
    K = int(n_clusters)
    if K <= 0:
        raise InvalidArgumentError(f"Number of clusters must be positive, got K={K}")
    if K > N:
        raise InvalidArgumentError(
            f"Number of clusters K={K} exceeds number of points N={N}"
        )
    return K


def _as_float(value: float, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{name} must be a real number, got {value!r}") from e


def validate_bandwidth(bandwidth: float) -> float:
    h = _as_float(bandwidth, "Bandwidth")
    if not math.isfinite(h) or h <= 0.0:
        raise InvalidArgumentError(f"Bandwidth must be positive and finite, got {bandwidth!r}")
    return h


def validate_epsilon(epsilon: float) -> float:
    eps = _as_float(epsilon, "Epsilon")
    if not (0.0 < eps < 1.0):
        raise InvalidArgumentError(f"Epsilon must lie in (0, 1), got {epsilon!r}")
    return eps


def validate_starting_index(starting_index: int | None, N: int) -> int | None:
    if starting_index is None:
        return None
    if isinstance(starting_index, bool) or not isinstance(
        starting_index, numbers.Integral
    ):
        raise InvalidArgumentError(
            f"Starting index must be an integer, got {starting_index!r}"
        )
    idx = int(starting_index)
    if not (0 <= idx < N):
        raise InvalidArgumentError(
            f"Starting index {idx} is out of range [0, {N})"
        )
    return idx


def validate_weights(weights: np.ndarray, N: int) -> np.ndarray:
    """
    Проверяет вектор весов q длины N.

    Raises:
        InvalidArgumentError: Если форма не (N,) или есть NaN/inf
    """
    q = np.asarray(weights, dtype=np.float64)
    if q.ndim != 1 or q.shape[0] != N:
        raise InvalidArgumentError(
            f"Weights must have shape ({N},), got {q.shape}"
        )
    if not np.all(np.isfinite(q)):
        raise InvalidArgumentError("Weights contain NaN or inf")
    return q
