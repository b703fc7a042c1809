# ==============================================================================
# Tests for the Analytical Store Client
# ==============================================================================
"""
Tests for AnalyticsStore with a mocked requests.Session.
"""

from unittest.mock import MagicMock

import pytest
import requests

from edge_collector.core.errors import TransportFailure, UpstreamNon2xx
from edge_collector.infrastructure.analytics_store import AnalyticsStore
from edge_collector.utils.config import AnalyticsStoreSettings


def _store(text: str = "", status_code: int = 200, **settings):
    session = MagicMock(spec=requests.Session)
    response = MagicMock()
    response.ok = 200 <= status_code < 300
    response.status_code = status_code
    response.text = text
    session.post.return_value = response
    session.get.return_value = response
    return AnalyticsStore(AnalyticsStoreSettings(**settings), session=session), session


class TestQueryText:
    def test_posts_sql_as_body(self):
        store, session = _store(text="1\t2\n")

        assert store.query_text("SELECT 1") == "1\t2\n"

        args, kwargs = session.post.call_args
        assert args[0] == "http://localhost:8123"
        assert kwargs["data"] == b"SELECT 1"
        assert kwargs["params"] == {"database": "analytics"}
        assert kwargs["auth"] is None

    def test_query_params_are_prefixed(self):
        store, session = _store()
        store.query_text("SELECT {id:String}", {"id": "abc"})
        assert session.post.call_args.kwargs["params"]["param_id"] == "abc"

    def test_basic_auth(self):
        store, session = _store(user="reader", password="pw")
        store.query_text("SELECT 1")
        assert session.post.call_args.kwargs["auth"] == ("reader", "pw")

    def test_non_2xx(self):
        store, _ = _store(text="Code: 60. Table does not exist", status_code=404)
        with pytest.raises(UpstreamNon2xx) as exc_info:
            store.query_text("SELECT 1")
        assert exc_info.value.status_code == 404

    def test_request_error_is_transport_failure(self):
        store, session = _store()
        session.post.side_effect = requests.exceptions.InvalidURL("bad url")
        with pytest.raises(TransportFailure):
            store.query_text("SELECT 1")


class TestQueryRows:
    def test_parses_json_each_row(self):
        store, session = _store(text='{"id":"a","n":1}\n{"id":"b","n":2}\n')

        assert store.query_rows("SELECT id, n FROM t") == [{"id": "a", "n": 1}, {"id": "b", "n": 2}]
        assert session.post.call_args.kwargs["params"]["default_format"] == "JSONEachRow"

    def test_empty_result(self):
        store, _ = _store(text="")
        assert store.query_rows("SELECT 1 WHERE 0") == []

    def test_invalid_body(self):
        store, _ = _store(text="not json\n")
        with pytest.raises(TransportFailure):
            store.query_rows("SELECT 1")


class TestPing:
    def test_ok(self):
        store, session = _store(text="Ok.\n")
        assert store.ping() is True
        assert session.get.call_args.args[0] == "http://localhost:8123/ping"

    def test_unreachable(self):
        store, session = _store()
        session.get.side_effect = requests.exceptions.ConnectionError("refused")
        assert store.ping() is False
