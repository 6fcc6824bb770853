"""
Общие фикстуры для всех тестов.
"""

import numpy as np
import pytest


@pytest.fixture(scope="session")
def random_seed():
    """Фикстура для установки глобального seed."""
    np.random.seed(42)
    return 42


@pytest.fixture
def square_corners():
    """Четыре вершины квадрата 10x10 (сценарий из описания алгоритма)."""
    return np.array([
        [0.0, 0.0],
        [10.0, 0.0],
        [0.0, 10.0],
        [10.0, 10.0],
    ])


@pytest.fixture
def small_dataset():
    """Фикстура с небольшим тестовым датасетом (2D, 2 явных группы)."""
    rng = np.random.default_rng(42)
    cluster1 = rng.standard_normal((30, 2)) + [0, 0]
    cluster2 = rng.standard_normal((30, 2)) + [5, 5]
    return np.vstack([cluster1, cluster2])


@pytest.fixture
def unit_cube_dataset():
    """Источники, цели и веса в единичном квадрате (2D)."""
    rng = np.random.default_rng(7)
    X = rng.random((200, 2))
    Y = rng.random((50, 2))
    q = rng.random(200)
    return X, Y, q


@pytest.fixture
def simple_2d_dataset():
    """Фикстура с очень простым 2D датасетом для базовых тестов."""
    return np.array([
        [0.0, 0.0],
        [1.0, 1.0],
        [2.0, 2.0],
        [10.0, 10.0],
        [11.0, 11.0],
        [12.0, 12.0],
    ])
