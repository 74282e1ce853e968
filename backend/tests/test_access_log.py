"""
Products API — Access Log Tests
=================================

What:  The one-line-per-request access log on `products_api.access`.

What we test:
    ✅ Level follows the status class (2xx/3xx INFO, 4xx WARNING, 5xx ERROR)
    ✅ Each line names the pipeline stage and handler that answered
    ✅ /health is never logged
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

ACCESS_LOGGER = "products_api.access"


def access_records(caplog):
    return [
        (r.levelno, r.getMessage())
        for r in caplog.records
        if r.name == ACCESS_LOGGER
    ]


class TestAccessLog:

    @pytest.mark.asyncio
    async def test_success_logged_at_info(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger=ACCESS_LOGGER):
            await test_client.get("/api/products/121", headers={"X-Request-ID": "ok-1"})

        [(level, message)] = access_records(caplog)
        assert level == logging.INFO
        assert message.startswith("GET /api/products/121 200 ")
        assert "stage=endpoint handler=get_product [ok-1]" in message

    @pytest.mark.asyncio
    async def test_not_found_logged_at_warning(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger=ACCESS_LOGGER):
            await test_client.get("/api/products/9")

        [(level, message)] = access_records(caplog)
        assert level == logging.WARNING
        assert message.startswith("GET /api/products/9 404 ")
        assert "stage=endpoint handler=get_product" in message

    @pytest.mark.asyncio
    async def test_unhandled_error_logged_at_error(self, test_client, caplog):
        failing = MagicMock()
        failing.get_product.side_effect = RuntimeError("catalog exploded")

        with patch("app.routes.products.product_service", failing):
            with caplog.at_level(logging.INFO, logger=ACCESS_LOGGER):
                await test_client.get("/api/products/121")

        [(level, message)] = access_records(caplog)
        assert level == logging.ERROR
        assert message.startswith("GET /api/products/121 500 ")
        assert "stage=exception_handler handler=get_product" in message

    @pytest.mark.asyncio
    async def test_unknown_route_attributed_to_router(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger=ACCESS_LOGGER):
            await test_client.get("/api/orders/1")

        [(level, message)] = access_records(caplog)
        assert level == logging.WARNING
        assert "stage=router handler=-" in message

    @pytest.mark.asyncio
    async def test_redirect_attributed_to_https_stage(self, http_client, caplog):
        with caplog.at_level(logging.INFO, logger=ACCESS_LOGGER):
            await http_client.get("/api/products/121")

        [(level, message)] = access_records(caplog)
        assert level == logging.INFO
        assert message.startswith("GET /api/products/121 307 ")
        assert "stage=https_redirect handler=-" in message

    @pytest.mark.asyncio
    async def test_health_not_logged(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger=ACCESS_LOGGER):
            response = await test_client.get("/health")

        assert response.status_code == 200
        assert access_records(caplog) == []

    @pytest.mark.asyncio
    async def test_one_line_per_request(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger=ACCESS_LOGGER):
            await test_client.get("/api/products/121")
            await test_client.get("/api/products/9")
            await test_client.get("/health")

        levels = [level for level, _ in access_records(caplog)]
        assert levels == [logging.INFO, logging.WARNING]
