"""
Таймеры для замеров этапов кластеризации и вычисления преобразования.

Timer — контекстный менеджер на основе time.perf_counter(). При передаче
логгера и метки по выходу пишет DEBUG-сообщение с длительностью этапа.
"""
from __future__ import annotations
import time
from typing import Any


class Timer:
    """
    Контекстный менеджер для измерения времени выполнения.

    Пример использования:
        with Timer("partition", logger) as t:
            model = clusterer.partition(X)
        t.elapsed
    """

    def __init__(self, label: str | None = None, logger: Any | None = None) -> None:
        self.label = label
        self.logger = logger
        self.start: float = 0.0
        self.end: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> Timer:
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start
        if self.logger and self.label:
            self.logger.debug(f"  {self.label}: {self.elapsed:.6f}s")
