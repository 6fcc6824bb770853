"""
Метрики качества и производительности быстрого преобразования Гаусса.

Модуль предоставляет функции для вычисления ускорения относительно прямого
суммирования, пропускной способности и ошибки аппроксимации.
"""

from __future__ import annotations

import numpy as np


def speedup(t_direct: float, t_fast: float) -> float:
    """
    Вычисляет ускорение IFGT относительно прямого суммирования.

    Args:
        t_direct: Время прямого вычисления суммы
        t_fast: Время быстрого вычисления (кластеризация + коэффициенты + оценка)

    Returns:
        Значение ускорения (speedup = t_direct / t_fast)

    Raises:
        ZeroDivisionError: Если t_fast равно нулю
    """
    if t_fast == 0:
        raise ZeroDivisionError("Fast transform time cannot be zero")
    return t_direct / t_fast


def throughput(N: int, M: int, total_time: float) -> float:
    """
    Пропускная способность: количество пар источник-цель в секунду.

    Args:
        N: Количество источников
        M: Количество целевых точек
        total_time: Общее время выполнения (секунды)

    Raises:
        ZeroDivisionError: Если total_time равно нулю
    """
    if total_time == 0:
        raise ZeroDivisionError("Total time cannot be zero")
    return (N * M) / total_time


def max_relative_error(
    approx: np.ndarray, exact: np.ndarray, weights: np.ndarray
) -> float:
    """
    Максимальная абсолютная ошибка, нормированная на сумму |q|.

    Именно в этой норме формулируется оценка точности IFGT:
    |G(y) - G_approx(y)| <= epsilon * sum(|q|).

    Raises:
        ValueError: Если формы approx и exact не совпадают
    """
    approx = np.asarray(approx, dtype=np.float64)
    exact = np.asarray(exact, dtype=np.float64)
    if approx.shape != exact.shape:
        raise ValueError(
            f"Shape mismatch: approx {approx.shape} vs exact {exact.shape}"
        )
    q_norm = float(np.sum(np.abs(weights)))
    if approx.size == 0:
        return 0.0
    err = float(np.max(np.abs(approx - exact)))
    if q_norm == 0.0:
        return err
    return err / q_norm
