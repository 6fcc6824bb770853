"""
Выбор порядка усечения ряда для IFGT.

Ищет минимальный порядок p, при котором оценка ошибки усечения
(геометрический ряд с гауссовым множителем) не превышает epsilon.
Функция чистая и никогда не бросает исключений: при недостижимой точности
поиск останавливается на верхнем пределе, а результат помечается
bound_met=False.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

TRUNCATION_NUMBER_UPPER_LIMIT = 200


@dataclass(frozen=True)
class TruncationResult:
    """Результат подбора порядка усечения."""

    p_max: int
    error: float
    bound_met: bool


def choose_truncation_number(
    dimensions: int,
    bandwidth: float,
    epsilon: float,
    rx: float,
    upper_limit: int = TRUNCATION_NUMBER_UPPER_LIMIT,
) -> TruncationResult:
    """
    Подбирает порядок усечения p_max.

    Args:
        dimensions: Размерность пространства d
        bandwidth: Ширина ядра h
        epsilon: Требуемая относительная точность
        rx: Оценка максимального расстояния от центра кластера до точки
        upper_limit: Верхний предел для p

    Returns:
        TruncationResult(p_max, error, bound_met)
    """
    h2 = bandwidth * bandwidth
    rx2 = rx * rx

    if epsilon <= 0.0:
        r = math.sqrt(dimensions)
    else:
        r = min(
            math.sqrt(dimensions),
            bandwidth * math.sqrt(max(math.log(1.0 / epsilon), 0.0)),
        )

    error = 1.0
    temp = 1.0
    p = 0

    # NaN/inf в error не считаются выполнением оценки
    while not (error <= epsilon) and p < upper_limit:
        p += 1
        b = min((rx + math.sqrt(rx2 + 2 * p * h2)) / 2, rx + r)
        c = rx - b
        temp *= 2 * rx * b / h2 / p
        error = temp * math.exp(-c * c / h2)

    return TruncationResult(p_max=p, error=error, bound_met=bool(error <= epsilon))
