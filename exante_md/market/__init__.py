"""Market data layer (EXANTE HTTP API)."""

from .exante_client import ExanteClient

__all__ = ["ExanteClient"]
