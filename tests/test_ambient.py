"""Tests for ambient logger resolution"""

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from context_logger import Logger, LoggerConfig, LogLevel, current, scope, wrap
from context_logger.core import ambient


def make_logger(namespace: str) -> Logger:
    return Logger(LoggerConfig(namespace=namespace), writers=[])


class TestCurrent:
    """Test resolution outside and inside scopes."""

    def test_default_when_unbound(self):
        assert ambient.bound() is None
        logger = current()
        assert isinstance(logger, Logger)
        assert logger.namespace == ""
        assert logger.context is None

    def test_default_is_fresh_each_time(self):
        assert current() is not current()

    def test_default_survives_invalid_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "bogus")
        monkeypatch.setenv("LOG_LIMIT", "abc")

        logger = current()
        assert isinstance(logger, Logger)
        assert logger.config.log_level == LogLevel.ERROR
        assert logger.config.log_limit == 7000

    def test_default_reads_valid_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert current().config.log_level == LogLevel.DEBUG

    def test_logger_current_delegates(self):
        logger = make_logger("api")
        with scope(logger):
            assert Logger.current() is logger

    def test_bind_and_unbind(self):
        logger = make_logger("api")
        token = ambient.bind(logger)
        try:
            assert current() is logger
        finally:
            ambient.unbind(token)
        assert ambient.bound() is None


class TestScope:
    """Test nesting of scopes."""

    def test_scope_yields_logger(self):
        logger = make_logger("api")
        with scope(logger) as bound_logger:
            assert bound_logger is logger

    def test_innermost_wins_and_exit_restores(self):
        outer = make_logger("outer")
        inner = make_logger("inner")

        with scope(outer):
            assert current() is outer
            with scope(inner):
                assert current() is inner
            assert current() is outer
        assert ambient.bound() is None

    def test_restored_after_exception(self):
        logger = make_logger("api")
        with pytest.raises(RuntimeError):
            with scope(logger):
                raise RuntimeError("boom")
        assert ambient.bound() is None


class TestAsyncPropagation:
    """Test propagation across tasks and callbacks."""

    def test_visible_in_awaited_coroutines(self):
        logger = make_logger("request")

        async def inner():
            await asyncio.sleep(0)
            return Logger.current()

        async def handler():
            with scope(logger):
                return await inner()

        assert asyncio.run(handler()) is logger

    def test_concurrent_scopes_are_isolated(self):
        async def inner():
            await asyncio.sleep(0)
            return Logger.current().namespace

        async def handler(name):
            with scope(make_logger(name)):
                await asyncio.sleep(0)
                return await asyncio.create_task(inner())

        async def main():
            return await asyncio.gather(handler("a"), handler("b"), handler("c"))

        assert asyncio.run(main()) == ["a", "b", "c"]

    def test_scheduled_callback_sees_binding(self):
        logger = make_logger("request")

        async def main():
            loop = asyncio.get_running_loop()
            future = loop.create_future()
            with scope(logger):
                loop.call_soon(lambda: future.set_result(Logger.current()))
            return await future

        assert asyncio.run(main()) is logger

    def test_task_binding_does_not_leak_to_parent(self):
        async def child():
            ambient.bind(make_logger("child"))
            await asyncio.sleep(0)

        async def main():
            await asyncio.create_task(child())
            return ambient.bound()

        assert asyncio.run(main()) is None


class TestExplicitPropagation:
    """Test run() and wrap() helpers."""

    def test_run_binds_for_call_only(self):
        logger = make_logger("job")
        result = ambient.run(logger, lambda x: (Logger.current(), x), 5)

        assert result == (logger, 5)
        assert ambient.bound() is None

    def test_thread_with_wrap_sees_binding(self):
        logger = make_logger("request")
        with scope(logger), ThreadPoolExecutor(max_workers=2) as executor:
            task = wrap(lambda: Logger.current())
            results = [f.result() for f in [executor.submit(task), executor.submit(task)]]
        assert results == [logger, logger]

    def test_wrap_keeps_metadata(self):
        def process():
            """Process an item."""

        assert wrap(process).__name__ == "process"

    @pytest.mark.parametrize("helper", [wrap, lambda f: ambient.run(make_logger("x"), f)])
    def test_rejects_non_callable(self, helper):
        with pytest.raises(TypeError):
            helper("not callable")
