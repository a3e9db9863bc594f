"""REST client for the portfolio API."""

from folio.api.client import ApiClient
from folio.api.protocols import ApiClientProtocol

__all__ = ["ApiClient", "ApiClientProtocol"]
