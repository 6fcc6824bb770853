"""
Вычисление гауссова преобразования G(y) = sum_i q_i exp(-||y - x_i||^2 / h^2).

- direct_gauss_transform: прямое суммирование O(N·M), эталон точности;
- ifgt_transform: оценка по коэффициентам кластеров
  G(y) = sum_k exp(-||v_k||^2) sum_alpha C[k, alpha] v_k^alpha,
  где v_k = (y - c_k) / h.
"""

from __future__ import annotations

import numpy as np

from fgt.core.model import ClusterModel
from fgt.core.validation import validate_bandwidth, validate_source, validate_weights
from fgt.errors import InvalidArgumentError
from fgt.series.monomials import compute_monomials


def _validate_target(target: np.ndarray, d: int) -> np.ndarray:
    Y = validate_source(target)
    if Y.shape[1] != d:
        raise InvalidArgumentError(
            f"Target dimension {Y.shape[1]} does not match source dimension {d}"
        )
    return Y


def direct_gauss_transform(
    source: np.ndarray,
    target: np.ndarray,
    weights: np.ndarray,
    bandwidth: float,
    chunk_size: int = 128,
) -> np.ndarray:
    """
    Прямое вычисление суммы гауссиан в целевых точках.

    Цели обрабатываются чанками, чтобы матрица расстояний
    (chunk_size, N) помещалась в память.

    Returns:
        Массив (M,) значений G в целевых точках
    """
    X = validate_source(source)
    Y = _validate_target(target, X.shape[1])
    q = validate_weights(weights, X.shape[0])
    h = validate_bandwidth(bandwidth)
    if chunk_size <= 0:
        raise InvalidArgumentError("chunk_size must be positive")

    h2 = h * h
    G = np.empty(Y.shape[0], dtype=np.float64)
    for start in range(0, Y.shape[0], chunk_size):
        Y_chunk = Y[start:start + chunk_size]
        # (m, 1, D) - (1, N, D) → (m, N)
        diff = Y_chunk[:, None, :] - X[None, :, :]
        d2 = np.einsum("mnd,mnd->mn", diff, diff, optimize=True)
        G[start:start + chunk_size] = np.exp(-d2 / h2) @ q
    return G


def ifgt_transform(
    model: ClusterModel,
    target: np.ndarray,
    C: np.ndarray | None = None,
    weights: np.ndarray | None = None,
) -> np.ndarray:
    """
    Оценивает гауссово преобразование по коэффициентам кластеров.

    Args:
        model: Заполненная ClusterModel
        target: Целевые точки (M, d)
        C: Матрица коэффициентов model.compute_C(q); если не задана,
            вычисляется по weights
        weights: Веса источников (нужны, только если C не передана)

    Returns:
        Массив (M,) приближённых значений G
    """
    Y = _validate_target(target, model.d)
    if C is None:
        if weights is None:
            raise InvalidArgumentError("Either C or weights must be provided")
        C = model.compute_C(weights)
    C = np.asarray(C, dtype=np.float64)
    if C.shape != (model.K, model.p_max_total):
        raise InvalidArgumentError(
            f"Coefficient matrix must have shape {(model.K, model.p_max_total)}, "
            f"got {C.shape}"
        )

    h = model.bandwidth
    G = np.zeros(Y.shape[0], dtype=np.float64)
    for k in range(model.K):
        V = (Y - model.centers[k]) / h
        target_monomials = compute_monomials(V, model.p_max)
        G += np.exp(-np.sum(V * V, axis=1)) * (target_monomials @ C[k])
    return G
