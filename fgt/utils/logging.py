import logging
from typing import Dict, Any


def setup_logger(level: int = logging.INFO) -> logging.Logger:
    """
    Создаёт и настраивает корневой логгер проекта ``fgt``.

    :param level: минимальный уровень логирования
    :return: настроенный экземпляр :class:`logging.Logger`
    """
    logger = logging.getLogger("fgt")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = False

    return logger


def format_problem_prefix(meta: Dict[str, Any]) -> str:
    """
    Текстовый префикс для логов по параметрам задачи.

    Ожидается словарь с ключами ``N``, ``D``, ``K`` и опциональным
    ``bandwidth``.
    """
    prefix = f"[N={meta['N']} D={meta['D']} K={meta['K']}"
    if "bandwidth" in meta:
        prefix += f" h={meta['bandwidth']:g}"
    return prefix + "]"
