import asyncio
import inspect
import logging

import pytest


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem):
    """Run async test functions without requiring external plugins."""
    test_function = pyfuncitem.obj
    if inspect.iscoroutinefunction(test_function):
        loop = asyncio.new_event_loop()
        try:
            asyncio.set_event_loop(loop)
            # Filter funcargs to only include parameters the function expects
            sig = inspect.signature(test_function)
            filtered_args = {k: v for k, v in pyfuncitem.funcargs.items() if k in sig.parameters}
            loop.run_until_complete(test_function(**filtered_args))
        finally:
            loop.close()
            asyncio.set_event_loop(None)
        return True
    return None


def pytest_configure(config):
    """Register markers for pytest."""
    config.addinivalue_line("markers", "asyncio: mark async tests")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def _clean_ai_comments_env(monkeypatch):
    """Keep developer environment overrides out of the tests."""
    for name in (
        "AI_COMMENTS_LOG_LEVEL",
        "AI_COMMENTS_VERBOSE",
        "AI_COMMENTS_DEBUG",
        "AI_COMMENTS_RERAISE",
        "AI_COMMENTS_MAX_SNIPPET_LINES",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_ai_comments_logger():
    """Drop handlers the CLI attached so they never outlive a captured stream."""
    yield
    package_logger = logging.getLogger("ai_comments")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
