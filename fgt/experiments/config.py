from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class PresetId(str, Enum):
    SMALL_2D = "small_2d"
    MEDIUM_3D = "medium_3d"
    SCALING_K = "scaling_k"
    HIGH_D = "high_d"


@dataclass
class BenchmarkConfig:
    id: PresetId
    description: str
    N: int
    D: int
    K: int
    bandwidth: float
    epsilon: float
    n_targets: int | None = None
    blobs: int = 8
    repeats: int = 5
    warmup: int = 1


PRESETS: Dict[PresetId, BenchmarkConfig] = {
    PresetId.SMALL_2D: BenchmarkConfig(
        id=PresetId.SMALL_2D,
        description="Небольшая 2D задача для быстрой проверки",
        N=2_000,
        D=2,
        K=20,
        bandwidth=0.2,
        epsilon=1e-3,
    ),
    PresetId.MEDIUM_3D: BenchmarkConfig(
        id=PresetId.MEDIUM_3D,
        description="Средняя 3D задача",
        N=20_000,
        D=3,
        K=60,
        bandwidth=0.3,
        epsilon=1e-3,
        n_targets=2_000,
        repeats=3,
    ),
    PresetId.SCALING_K: BenchmarkConfig(
        id=PresetId.SCALING_K,
        description="Много кластеров: нагрузка на отсечения Гонсалеса",
        N=20_000,
        D=2,
        K=400,
        bandwidth=0.1,
        epsilon=1e-3,
        n_targets=2_000,
        repeats=3,
    ),
    PresetId.HIGH_D: BenchmarkConfig(
        id=PresetId.HIGH_D,
        description="Размерность 6: рост числа мономов",
        N=10_000,
        D=6,
        K=40,
        bandwidth=0.8,
        epsilon=1e-2,
        n_targets=2_000,
        repeats=3,
    ),
}
