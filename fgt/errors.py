"""
Исключения и предупреждения пакета fgt.

- InvalidArgumentError: некорректные параметры построения или вызова;
- BoundNotMetWarning: подбор порядка усечения упёрся в верхний предел,
  не достигнув требуемой точности.
"""

from __future__ import annotations


class FGTError(Exception):
    """Базовое исключение пакета."""


class InvalidArgumentError(FGTError, ValueError):
    """Некорректный аргумент (проверяется до любого обращения к массивам)."""


class BoundNotMetWarning(UserWarning):
    """Оценка ошибки ряда не опустилась ниже epsilon до верхнего предела p."""
