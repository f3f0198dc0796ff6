"""
工具层 - AOP装饰器
日志、超时等横切关注点
"""

import asyncio
import functools
import time
from typing import Callable, TypeVar

from astrbot.api import logger

T = TypeVar("T")


def _log_finish(name: str, start: float, error: Exception = None) -> None:
    elapsed = time.perf_counter() - start
    if error is None:
        logger.debug(f"[MathTex] {name} 完成，耗时: {elapsed:.3f}s")
    else:
        logger.error(f"[MathTex] {name} 失败，耗时: {elapsed:.3f}s, 错误: {error}")


def log_execution(func: Callable[..., T]) -> Callable[..., T]:
    """日志装饰器 - 记录函数耗时，异常继续抛出"""
    name = func.__qualname__

    if asyncio.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs) -> T:
            start = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _log_finish(name, start, e)
                raise
            _log_finish(name, start)
            return result

        return async_wrapper

    @functools.wraps(func)
    def sync_wrapper(*args, **kwargs) -> T:
        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            _log_finish(name, start, e)
            raise
        _log_finish(name, start)
        return result

    return sync_wrapper


def with_timeout(timeout_ms: int):
    """超时装饰器

    超时后放弃等待，已发出的引擎调用可能继续运行直到引擎被释放。
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            try:
                return await asyncio.wait_for(
                    func(*args, **kwargs), timeout=timeout_ms / 1000
                )
            except asyncio.TimeoutError:
                raise TimeoutError(f"{func.__name__} 超时 ({timeout_ms}ms)")

        return wrapper

    return decorator
