from __future__ import annotations

import logging

import pytest

from pixqr.config import get_settings

REFERENCE_KEY = "123e4567-e12b-12d1-a456-426655440000"
REFERENCE_CODE = (
    "00020126580014br.gov.bcb.pix0136123e4567-e12b-12d1-a456-426655440000"
    "5204000053039865802BR5913Fulano de Tal6008BRASILIA62070503***63041D3D"
)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    # Keep a developer's PIXQR_* variables out of the test run.
    for name in ("PIXQR_LOG_PAYLOADS", "PIXQR_LOGGING__LEVEL", "PIXQR_LOGGING__JSON_LOGS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    # configure_logging binds a handler to the captured stderr of the test that called it
    logger = logging.getLogger("pixqr")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def reference_request() -> dict[str, str]:
    return {
        "key": REFERENCE_KEY,
        "keyType": "RANDOM",
        "merchantName": "Fulano de Tal",
        "merchantCity": "BRASILIA",
    }
