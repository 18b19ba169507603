"""
Warehouse Backend — Middleware Tests
======================================

What:  Tests for request ID resolution and the access log line.

What we test:
    ✅ Well-formed client request IDs are reused, others replaced
    ✅ Paths map to their record category
    ✅ Status and method map to an outcome
    ✅ One access line per API call, silent for /health
"""

import logging
import re

import pytest

from warehouse.middleware.logging import classify_outcome, record_category
from warehouse.middleware.request_id import resolve_request_id

_GENERATED_ID = re.compile(r"^[0-9a-f]{8}$")


class TestResolveRequestId:

    @pytest.mark.parametrize("client_id", ["trace-42", "abc_DEF-123", "x" * 64])
    def test_well_formed_id_is_reused(self, client_id):
        assert resolve_request_id(client_id) == client_id

    @pytest.mark.parametrize(
        "header_value",
        [None, "", "has space", "semi;colon", "line\nbreak", "x" * 65],
    )
    def test_malformed_id_is_replaced(self, header_value):
        assert _GENERATED_ID.match(resolve_request_id(header_value))


class TestRecordCategory:

    @pytest.mark.parametrize(
        "path, category",
        [
            ("/api/users", "users"),
            ("/api/schedule", "schedule"),
            ("/api/miscellaneous/save", "miscellaneous"),
            ("/", "-"),
            ("/docs", "-"),
        ],
    )
    def test_category_from_path(self, path, category):
        assert record_category(path) == category


class TestClassifyOutcome:

    @pytest.mark.parametrize(
        "method, status, outcome",
        [
            ("GET", 200, "listed"),
            ("POST", 200, "stored"),
            ("POST", 400, "rejected"),
            ("GET", 404, "rejected"),
            ("POST", 500, "failed"),
            ("GET", 503, "failed"),
        ],
    )
    def test_outcome(self, method, status, outcome):
        assert classify_outcome(method, status) == outcome


class TestAccessLog:

    @pytest.mark.asyncio
    async def test_stored_record_is_logged(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="warehouse.access")

        await test_client.post(
            "/api/schedule", json={"data": {"dock": 1}}, headers={"X-Request-ID": "log-1"}
        )

        lines = [r for r in caplog.records if r.name == "warehouse.access"]
        assert len(lines) == 1
        assert lines[0].levelno == logging.INFO
        message = lines[0].getMessage()
        assert message.startswith("POST /api/schedule -> 200 stored schedule in ")
        assert message.endswith("[log-1]")

    @pytest.mark.asyncio
    async def test_rejected_request_is_a_warning(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="warehouse.access")

        await test_client.post("/api/miscellaneous/save", json={})

        lines = [r for r in caplog.records if r.name == "warehouse.access"]
        assert len(lines) == 1
        assert lines[0].levelno == logging.WARNING
        assert "-> 400 rejected miscellaneous" in lines[0].getMessage()

    @pytest.mark.asyncio
    async def test_request_body_is_not_logged(self, test_client, caplog, sample_user):
        caplog.set_level(logging.DEBUG)

        await test_client.post("/api/users", json=sample_user)

        assert sample_user["password"] not in caplog.text

    @pytest.mark.asyncio
    async def test_health_is_silent(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="warehouse.access")

        await test_client.get("/health")

        assert not [r for r in caplog.records if r.name == "warehouse.access"]
