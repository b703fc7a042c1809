# ==============================================================================
# Tests for the Event Assembler
# ==============================================================================
"""
Tests for assemble(): field extraction, fallbacks, timestamps and the
reserved-field collision rule.
"""

import time

import pytest
from starlette.datastructures import Headers

from edge_collector.core.assembler import assemble, get_header
from edge_collector.core.errors import MalformedInput

BODY = {"url": "https://example.com/pricing"}


class TestGetHeader:
    def test_case_insensitive_on_dict(self):
        assert get_header({"cf-connecting-ip": "1.2.3.4"}, "CF-Connecting-IP") == "1.2.3.4"

    def test_starlette_headers(self):
        headers = Headers({"CF-Connecting-IP": "1.2.3.4"})
        assert get_header(headers, "cf-connecting-ip") == "1.2.3.4"

    def test_missing(self):
        assert get_header({}, "CF-Connecting-IP") is None


class TestAssemble:
    """Tests for assemble()."""

    def test_url_is_copied(self):
        event = assemble(BODY, {}, None)
        assert event.url == "https://example.com/pricing"

    def test_ip_from_client_ip_header(self):
        event = assemble(BODY, {"CF-Connecting-IP": "203.0.113.7"}, None)
        assert event.ip == "203.0.113.7"

    def test_ip_defaults_to_loopback(self):
        event = assemble(BODY, {}, None)
        assert event.ip == "127.0.0.1"

    def test_empty_ip_header_defaults_to_loopback(self):
        event = assemble(BODY, {"CF-Connecting-IP": ""}, None)
        assert event.ip == "127.0.0.1"

    def test_custom_ip_header_and_fallback(self):
        headers = {"X-Real-IP": "198.51.100.1"}
        assert assemble(BODY, headers, None, client_ip_header="X-Real-IP").ip == "198.51.100.1"
        assert assemble(BODY, {}, None, fallback_ip="0.0.0.0").ip == "0.0.0.0"

    def test_country_from_header(self):
        event = assemble(BODY, {"CF-IPCountry": "NL"}, None)
        assert event.country == "NL"

    def test_country_absent(self):
        event = assemble(BODY, {}, None)
        assert event.country is None
        assert "country" not in event.to_event_log_message()

    def test_timestamp_within_execution_window(self):
        before = int(time.time())
        event = assemble(BODY, {}, None)
        after = int(time.time())

        assert isinstance(event.timestamp, int)
        assert before <= event.timestamp <= after

    def test_timestamp_truncated_to_seconds(self):
        event = assemble(BODY, {}, None, clock=lambda: 1_700_000_000.987)
        assert event.timestamp == 1_700_000_000

    def test_single_timestamp_field(self):
        metadata = {"timestamp": "spoofed", "browser": {"name": "Chrome"}}
        message = assemble(BODY, {}, metadata, clock=lambda: 42.0).to_event_log_message()
        assert list(message).count("timestamp") == 1
        assert message["timestamp"] == 42

    def test_metadata_is_flattened(self):
        metadata = {"browser": {"name": "Chrome", "major": "120"}, "ua": "Mozilla/5.0"}
        event = assemble(BODY, {}, metadata)
        assert event.client == {"browser_name": "Chrome", "browser_major": "120", "ua": "Mozilla/5.0"}

    def test_missing_metadata_is_empty(self):
        assert assemble(BODY, {}, None).client == {}
        assert assemble(BODY, {}, {}).client == {}

    def test_reserved_fields_win_over_metadata(self):
        metadata = {"url": "evil", "ip": "6.6.6.6", "country": "XX", "browser": {"name": "Chrome"}}
        headers = {"CF-Connecting-IP": "203.0.113.7", "CF-IPCountry": "DE"}
        message = assemble(BODY, headers, metadata).to_event_log_message()

        assert message["url"] == "https://example.com/pricing"
        assert message["ip"] == "203.0.113.7"
        assert message["country"] == "DE"
        assert message["browser_name"] == "Chrome"

    def test_reserved_country_is_not_replaced_when_absent(self):
        """Without a country header, metadata must not supply one."""
        message = assemble(BODY, {}, {"country": "XX"}).to_event_log_message()
        assert "country" not in message

    def test_message_key_order(self):
        metadata = {"browser": {"name": "Chrome"}}
        headers = {"CF-IPCountry": "NL"}
        message = assemble(BODY, headers, metadata, clock=lambda: 1.0).to_event_log_message()
        assert list(message) == ["url", "ip", "country", "browser_name", "timestamp"]

    @pytest.mark.parametrize("body", [None, [], "https://example.com", 3, {"href": "x"}, {"url": 5}])
    def test_malformed_body(self, body):
        with pytest.raises(MalformedInput):
            assemble(body, {}, None)
