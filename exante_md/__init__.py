"""exante_md: thin read-only client for the EXANTE market data API."""

from .errors import ExanteError, ExanteHTTPError, FieldNotFoundError, ResponseParseError
from .market import ExanteClient
from .models import SYMBOL_SPEC_FIELDS, ClientConfig, Endpoint, OHLCBar

__all__ = [
    "ClientConfig",
    "Endpoint",
    "ExanteClient",
    "ExanteError",
    "ExanteHTTPError",
    "FieldNotFoundError",
    "OHLCBar",
    "ResponseParseError",
    "SYMBOL_SPEC_FIELDS",
]
