import httpx
import pytest

from services.api import ApiClient
from fake_backend import FakeBackend, TEST_TOKEN

BASE_URL = "http://testserver"


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def api(backend):
    return ApiClient(
        base_url=BASE_URL,
        token=TEST_TOKEN,
        transport=httpx.ASGITransport(app=backend.app),
    )
