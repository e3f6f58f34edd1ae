import time
from collections.abc import Sized
from functools import wraps

from config import logging


def measure_time(func):
    """
    Время выполнения шага пайплайна; пишется в логгер модуля функции
    """
    logger = logging.getLogger(func.__module__)

    @wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = time.perf_counter() - start
        if isinstance(result, Sized):
            logger.info('%s: %d item(s) in %.3f sec', func.__qualname__, len(result), elapsed)
        else:
            logger.info('%s elapsed in %.3f sec', func.__qualname__, elapsed)
        return result

    return wrapper
