"""
Многомерные мономы и константы ряда для разложения гауссова ядра.

Все функции используют одинаковый порядок мультииндексов ("heads"-порядок
IFGT): сначала нулевой порядок, затем для каждой степени k и каждой
координаты i — блок предыдущей степени, начиная с heads[i], умноженный на x_i.
Благодаря этому мономы степени k считаются одним умножением блока.
"""

from __future__ import annotations

import math

import numpy as np


def get_p_max_total(dimensions: int, p_max: int) -> int:
    """
    Количество мономов полной степени не выше p_max в пространстве размерности d.

    Равно биномиальному коэффициенту C(d + p_max, d).
    """
    return math.comb(int(dimensions) + int(p_max), int(dimensions))


def compute_multi_indices(dimensions: int, p_max: int) -> np.ndarray:
    """
    Таблица показателей степеней (M, d) в heads-порядке.

    Строка t — мультииндекс alpha монома с номером t.
    """
    d = int(dimensions)
    M = get_p_max_total(d, p_max)
    alphas = np.zeros((M, d), dtype=np.int64)

    heads = [0] * d
    t = 1
    tail = 1
    for _ in range(p_max):
        for i in range(d):
            head = heads[i]
            heads[i] = t
            width = tail - head
            alphas[t:t + width] = alphas[head:tail]
            alphas[t:t + width, i] += 1
            t += width
        tail = t

    return alphas


def compute_monomials(x: np.ndarray, p_max: int) -> np.ndarray:
    """
    Значения всех мономов x^alpha, |alpha| <= p_max, в heads-порядке.

    Args:
        x: Вектор (d,) или батч векторов (n, d)
        p_max: Максимальная полная степень

    Returns:
        Массив (M,) для одного вектора или (n, M) для батча
    """
    x = np.asarray(x, dtype=np.float64)
    single = x.ndim == 1
    X = np.atleast_2d(x)
    n, d = X.shape

    M = get_p_max_total(d, p_max)
    out = np.empty((n, M), dtype=np.float64)
    out[:, 0] = 1.0

    heads = [0] * d
    t = 1
    tail = 1
    for _ in range(p_max):
        for i in range(d):
            head = heads[i]
            heads[i] = t
            width = tail - head
            # (n, 1) * (n, width) -> блок мономов, начинающихся с x_i
            out[:, t:t + width] = X[:, i:i + 1] * out[:, head:tail]
            t += width
        tail = t

    return out[0] if single else out


def compute_constant_series(dimensions: int, p_max: int) -> np.ndarray:
    """
    Константы 2^|alpha| / alpha! разложения exp(2 u·v) в heads-порядке.

    Returns:
        Массив длины get_p_max_total(dimensions, p_max)
    """
    # table[a] = 2^a / a!
    table = np.empty(p_max + 1, dtype=np.float64)
    table[0] = 1.0
    for a in range(1, p_max + 1):
        table[a] = table[a - 1] * 2.0 / a

    alphas = compute_multi_indices(dimensions, p_max)
    return np.prod(table[alphas], axis=1)


def max_order_within(dimensions: int, budget: int, upper_limit: int) -> int:
    """
    Наибольший порядок p <= upper_limit, при котором мономов не больше budget.

    Порядок 0 (один моном) допустим всегда.
    """
    p = 0
    while p < upper_limit and get_p_max_total(dimensions, p + 1) <= budget:
        p += 1
    return p
