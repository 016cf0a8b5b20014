"""HTTP clients for the Shyft REST API."""

from .compressed_nft import CompressedNftClient
from .rest import ShyftAPIError, ShyftRestClient

__all__ = ["CompressedNftClient", "ShyftAPIError", "ShyftRestClient"]
