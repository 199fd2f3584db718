import pytest

from weather_server.test.payloads import build_payload


@pytest.fixture
def taipei_payload():
    return build_payload()
