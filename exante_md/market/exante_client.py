"""Synchronous EXANTE market data client: one GET per call, one field per result."""

from __future__ import annotations

import logging
from typing import Any

import requests

from ..errors import ExanteHTTPError, FieldNotFoundError, ResponseParseError
from ..models import (
    CROSSRATES,
    GROUP,
    GROUP_NEAREST,
    OHLC,
    SYMBOL,
    SYMBOL_SPEC_FIELDS,
    SYMBOL_SPECIFICATION,
    ClientConfig,
    Endpoint,
    OHLCBar,
)

logger = logging.getLogger(__name__)

MID_DURATION_SECONDS = 60


class ExanteClient:
    """Read-only client for the /md/1.0 market data API.

    No caching and no retries: every operation issues exactly one request.
    A missing field raises FieldNotFoundError unless the config turns
    ``strict_fields`` off, in which case it yields None.
    """

    def __init__(self, config: ClientConfig, session: requests.Session | None = None):
        self.config = config
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    def __enter__(self) -> ExanteClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self._session.close()

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.config.token}"}

    def get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        """GET ``base_url + path`` and return the parsed JSON body as is."""
        url = self.config.base_url + path
        logger.debug(f"GET {url} params={params}")
        response = self._session.get(
            url,
            params=params or None,
            headers=self._headers(),
            timeout=self.config.timeout,
        )
        # Unfollowed 3xx responses count as failures too
        if not 200 <= response.status_code < 300:
            logger.warning(f"EXANTE API returned {response.status_code} for {url}")
            raise ExanteHTTPError(response.status_code, response.text, url)

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Unparsable response body from {url}")
            raise ResponseParseError("Response body is not valid JSON", url) from e

    def _fetch_object(self, endpoint: Endpoint, **values: Any) -> tuple[dict[str, Any], str]:
        path = endpoint.render(**values)
        url = self.config.base_url + path
        payload = self.get_json(path, endpoint.query)
        if not isinstance(payload, dict):
            raise ResponseParseError(
                f"Expected a JSON object, got {type(payload).__name__}", url
            )
        return payload, url

    def _extract(self, payload: dict[str, Any], field: str, url: str) -> Any:
        if field in payload:
            return payload[field]
        if self.config.strict_fields:
            raise FieldNotFoundError(field, url)
        return None

    def _latest_ohlc(self, symbol: str, duration: int | str) -> tuple[dict[str, Any] | None, str]:
        path = OHLC.render(symbol=symbol, duration=duration)
        url = self.config.base_url + path
        payload = self.get_json(path, OHLC.query)
        if not isinstance(payload, list):
            raise ResponseParseError(
                f"Expected a JSON array, got {type(payload).__name__}", url
            )
        if not payload:
            return None, url
        bar = payload[0]
        if not isinstance(bar, dict):
            raise ResponseParseError(f"Expected OHLC objects, got {type(bar).__name__}", url)
        return bar, url

    def cross_rate(self, from_: str, to: str) -> Any:
        """Conversion rate between two currencies."""
        payload, url = self._fetch_object(CROSSRATES, from_=from_, to=to)
        return self._extract(payload, CROSSRATES.result_field, url)

    def group_field(self, group: str, field: str) -> Any:
        """A property of a symbol group, e.g. ``group_field("Si", "name")``."""
        payload, url = self._fetch_object(GROUP, group=group)
        return self._extract(payload, field, url)

    def nearest_group_field(self, group: str, field: str) -> Any:
        """A property of the group's nearest-expiration symbol."""
        payload, url = self._fetch_object(GROUP_NEAREST, group=group)
        return self._extract(payload, field, url)

    def ohlc_field(self, symbol: str, duration: int | str, field: str) -> Any:
        """One field of the latest OHLC bar.

        ``field`` is normally one of open, high, low, close, timestamp.
        """
        bar, url = self._latest_ohlc(symbol, duration)
        if bar is None:
            if self.config.strict_fields:
                raise FieldNotFoundError(field, url)
            return None
        return self._extract(bar, field, url)

    def symbol_field(self, symbol: str, field: str) -> Any:
        """A symbol property, routed to /specification for specification-only fields."""
        endpoint = SYMBOL_SPECIFICATION if field in SYMBOL_SPEC_FIELDS else SYMBOL
        payload, url = self._fetch_object(endpoint, symbol=symbol)
        return self._extract(payload, field, url)

    def mid_price(self, symbol: str) -> Any:
        """Close of the latest one-minute bar."""
        return self.ohlc_field(symbol, MID_DURATION_SECONDS, "close")

    def latest_bar(self, symbol: str, duration: int | str = MID_DURATION_SECONDS) -> OHLCBar | None:
        """The latest OHLC bar as a model, or None when the API returns no bars.

        No field is requested here, so ``strict_fields`` does not apply: an
        empty array yields None in both modes.
        """
        bar, _ = self._latest_ohlc(symbol, duration)
        if bar is None:
            return None
        return OHLCBar.model_validate(bar)
