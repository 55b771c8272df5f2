"""Client configuration, endpoint descriptors and response models.

Every public client operation is one Endpoint rendered into a path,
fetched once, and reduced to a single field.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from .config import Settings

# Characters encodeURIComponent leaves alone on top of quote()'s own safe set
_URI_COMPONENT_SAFE = "!~*'()"

# Served by /symbols/{symbol}/specification rather than /symbols/{symbol}
SYMBOL_SPEC_FIELDS = frozenset({"leverage", "lotSize", "contractMultiplier", "priceUnit", "units"})


def encode_component(value: Any) -> str:
    """Percent-encode a single path segment, slashes included."""
    return quote(str(value), safe=_URI_COMPONENT_SAFE)


class ClientConfig(BaseModel):
    """Connection settings for one ExanteClient."""

    host: str
    token: str
    api_path: str = "/md/1.0"
    timeout: float | None = Field(default=None, gt=0)
    strict_fields: bool = True

    model_config = {"frozen": True}

    @property
    def base_url(self) -> str:
        return self.host.rstrip("/") + self.api_path

    @classmethod
    def from_settings(cls, settings: Settings) -> ClientConfig:
        return cls(
            host=settings.exante_host,
            token=settings.exante_api_token,
            api_path=settings.exante_api_path,
            timeout=settings.exante_timeout_seconds,
            strict_fields=settings.exante_strict_fields,
        )


class Endpoint(BaseModel):
    """Path template plus the field a call extracts by default."""

    template: str  # e.g. "/ohlc/{symbol}/{duration}"
    result_field: str | None = None  # None: caller names the field
    query: dict[str, str] = Field(default_factory=dict)
    encoded: frozenset[str] = frozenset()  # params that may contain "/"

    model_config = {"frozen": True}

    def render(self, **values: Any) -> str:
        """Fill the template, percent-encoding the parameters listed in ``encoded``."""
        rendered = {
            name: encode_component(value) if name in self.encoded else value
            for name, value in values.items()
        }
        return self.template.format(**rendered)


class OHLCBar(BaseModel):
    """One open-high-low-close bar as returned by /ohlc."""

    timestamp: int | None = None  # epoch milliseconds
    open: float | None = None
    high: float | None = None
    low: float | None = None
    close: float | None = None


CROSSRATES = Endpoint(template="/crossrates/{from_}/{to}", result_field="rate")
GROUP = Endpoint(template="/groups/{group}")
GROUP_NEAREST = Endpoint(template="/groups/{group}/nearest")
OHLC = Endpoint(
    template="/ohlc/{symbol}/{duration}",
    query={"size": "1"},
    encoded=frozenset({"symbol"}),
)
SYMBOL = Endpoint(template="/symbols/{symbol}", encoded=frozenset({"symbol"}))
SYMBOL_SPECIFICATION = Endpoint(
    template="/symbols/{symbol}/specification",
    encoded=frozenset({"symbol"}),
)
