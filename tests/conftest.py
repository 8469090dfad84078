import asyncio
import inspect
import json
import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

DATA_DIR = pathlib.Path(__file__).parent / "data"

from vantage_client import ApiClient  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers used in the suite."""

    config.addinivalue_line("markers", "asyncio: mark test as running in an asyncio event loop")


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Execute async test functions without requiring pytest-asyncio."""

    test_function = pyfuncitem.obj
    if inspect.iscoroutinefunction(test_function):
        loop = asyncio.new_event_loop()
        try:
            asyncio.set_event_loop(loop)
            params = inspect.signature(test_function).parameters
            loop.run_until_complete(test_function(**{name: pyfuncitem.funcargs[name] for name in params}))
        finally:
            asyncio.set_event_loop(None)
            loop.close()
        return True
    return None


class StubTransport:
    """Records requested URLs and answers every request with ``body``."""

    def __init__(self, body: str | dict) -> None:
        self.body = body if isinstance(body, str) else json.dumps(body)
        self.calls: list[dict[str, str | None]] = []

    async def get_alpha_vantage_provider_output(self, url: str) -> str:
        self.calls.append({"url": url, "api_key": None})
        return self.body

    async def get_rapid_api_provider_output(self, url: str, api_key: str) -> str:
        self.calls.append({"url": url, "api_key": api_key})
        return self.body


def load_payload(name: str) -> dict:
    with (DATA_DIR / name).open("r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture()
def make_api():
    """Return a factory building an ApiClient whose transport answers with a fixed body."""

    def _make(body: str | dict, *, rapid: bool = False) -> ApiClient:
        transport = StubTransport(body)
        if rapid:
            return ApiClient.set_rapid_api("test", transport)
        return ApiClient.set_api("test", transport)

    return _make
