# ==============================================================================
# Tests for Query Endpoints
# ==============================================================================
"""
Tests for GET /totals, GET /recordings and GET /recordings/{id}.

The analytics store is a MagicMock; these tests check what SQL and
parameters reach it and how failures are reported.
"""

import logging

from fastapi.testclient import TestClient

from edge_collector.core.errors import TransportFailure, UpstreamNon2xx


class TestTotals:
    def test_returns_raw_store_text(self, client, store):
        store.query_text.return_value = "127.0.0.1\t42\n203.0.113.7\t3\n"

        response = client.get("/totals")

        assert response.status_code == 200
        assert response.text == "127.0.0.1\t42\n203.0.113.7\t3\n"
        sql = store.query_text.call_args.args[0]
        assert "COUNT()" in sql
        assert "FROM analytics.web" in sql
        assert "GROUP BY ip" in sql

    def test_store_error_is_generic_500(self, client, store, caplog):
        store.query_text.side_effect = UpstreamNon2xx("analytics store", 502, "secret detail")

        with caplog.at_level(logging.ERROR, logger="edge_collector.api.server"):
            response = client.get("/totals")

        assert response.status_code == 500
        assert response.text == "Internal Server Error"
        assert "secret detail" not in response.text
        assert "/totals" in caplog.text

    def test_unreachable_store_is_500(self, client, store):
        store.query_text.side_effect = TransportFailure("connection refused")
        assert client.get("/totals").status_code == 500


class TestRecordings:
    def test_lists_rows(self, client, store):
        rows = [
            {"id": "b", "page_title": "Pricing", "latest_timestamp": 1700000005000},
            {"id": "a", "page_title": "Home", "latest_timestamp": 1700000001000},
        ]
        store.query_rows.return_value = rows

        response = client.get("/recordings")

        assert response.status_code == 200
        assert response.json() == rows
        sql, params = store.query_rows.call_args.args
        assert "ORDER BY latest_timestamp DESC" in sql
        assert "LIMIT 50" in sql
        assert "{admin_title:String}" in sql
        assert params == {"admin_title": "Admin"}

    def test_store_error_is_500(self, client, store):
        store.query_rows.side_effect = TransportFailure("down")
        response = client.get("/recordings")
        assert response.status_code == 500
        assert response.text == "Internal Server Error"


class TestRecordingById:
    def test_parameterized_by_id(self, client, store):
        store.query_rows.return_value = [{"id": "abc", "timestamp": 2}, {"id": "abc", "timestamp": 1}]

        response = client.get("/recordings/abc")

        assert response.status_code == 200
        assert len(response.json()) == 2
        sql, params = store.query_rows.call_args.args
        assert "WHERE id = {id:String}" in sql
        assert params == {"id": "abc"}

    def test_id_is_never_interpolated(self, client, store):
        store.query_rows.return_value = []
        client.get("/recordings/x' OR 1=1 --")
        sql, params = store.query_rows.call_args.args
        assert "OR 1=1" not in sql
        assert params == {"id": "x' OR 1=1 --"}


class TestMisc:
    def test_index(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.text.startswith("edge-collector v")

    def test_health(self, client):
        body = client.get("/health").json()
        assert body["ok"] is True
        assert body["service"] == "edge-collector"

    def test_cors_preflight(self, client):
        response = client.options(
            "/track",
            headers={
                "Origin": "https://shop.example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_shutdown_closes_collaborators(self, app, transport, store):
        with TestClient(app):
            pass
        assert transport.closed
        store.close.assert_called_once()

    def test_startup_logs_transport_version(self, app, caplog):
        with caplog.at_level(logging.INFO, logger="edge_collector.api.server"):
            with TestClient(app):
                pass
        assert "transport recording (recording v0)" in caplog.text
