# ==============================================================================
# Analytical Store Client
# ==============================================================================
"""
Thin client for ClickHouse's HTTP interface.

Queries are POSTed as the request body. Parameters are bound server-side
using ClickHouse query parameters: a placeholder written as {id:String} in the
SQL is filled from the "param_id" URL parameter, so values are never
interpolated into SQL text.

Connection errors and timeouts get a light retry (3 attempts). Non-2xx
responses are not retried and raise UpstreamNon2xx.
"""

import json
import logging
from typing import Any, Optional

import requests

from edge_collector.core.errors import TransportFailure, UpstreamNon2xx
from edge_collector.utils.config import AnalyticsStoreSettings
from edge_collector.utils.retry import HTTP_RETRY_EXCEPTIONS, retry_light

logger = logging.getLogger(__name__)

SERVICE_NAME = "analytics store"


class AnalyticsStore:
    """Run SQL against the analytical store and return text or rows."""

    def __init__(
        self,
        settings: AnalyticsStoreSettings,
        session: Optional[requests.Session] = None,
    ):
        self._settings = settings
        self._session = session or requests.Session()

    @property
    def settings(self) -> AnalyticsStoreSettings:
        return self._settings

    @retry_light(HTTP_RETRY_EXCEPTIONS, logger)
    def _post(self, sql: str, params: dict[str, str]) -> requests.Response:
        return self._session.post(
            self._settings.url,
            params=params,
            data=sql.encode("utf-8"),
            headers={"Content-Type": "text/plain"},
            auth=self._settings.auth,
            timeout=self._settings.timeout_seconds,
        )

    def _execute(
        self,
        sql: str,
        query_params: Optional[dict[str, Any]] = None,
        output_format: Optional[str] = None,
    ) -> str:
        params = {"database": self._settings.database}
        if output_format:
            params["default_format"] = output_format
        for name, value in (query_params or {}).items():
            params[f"param_{name}"] = str(value)

        try:
            response = self._post(sql, params)
        except requests.exceptions.RequestException as e:
            raise TransportFailure(f"{SERVICE_NAME} unreachable: {e}") from e

        if not response.ok:
            raise UpstreamNon2xx(SERVICE_NAME, response.status_code, response.text)
        return response.text

    def query_text(self, sql: str, query_params: Optional[dict[str, Any]] = None) -> str:
        """
        Run a query and return the raw response body.

        Args:
            sql: SQL text, optionally with {name:Type} placeholders
            query_params: Values for the placeholders

        Returns:
            Response body in ClickHouse's default (TabSeparated) format

        Raises:
            TransportFailure: On connection errors after retries
            UpstreamNon2xx: On a non-success HTTP status
        """
        return self._execute(sql, query_params)

    def query_rows(
        self, sql: str, query_params: Optional[dict[str, Any]] = None
    ) -> list[dict[str, Any]]:
        """
        Run a query and return rows as dicts (JSONEachRow).

        Raises:
            TransportFailure: On connection errors or an undecodable body
            UpstreamNon2xx: On a non-success HTTP status
        """
        body = self._execute(sql, query_params, output_format="JSONEachRow")
        try:
            return [json.loads(line) for line in body.splitlines() if line.strip()]
        except json.JSONDecodeError as e:
            raise TransportFailure(f"{SERVICE_NAME} returned invalid JSONEachRow: {e}") from e

    def ping(self) -> bool:
        """
        Check if the store is reachable.

        Returns:
            True if GET /ping answers with a success status, False otherwise
        """
        try:
            response = self._session.get(
                f"{self._settings.url.rstrip('/')}/ping",
                timeout=self._settings.timeout_seconds,
            )
            return response.ok
        except requests.exceptions.RequestException as e:
            logger.debug("Analytics store ping failed: %s", e)
            return False

    def close(self) -> None:
        self._session.close()
