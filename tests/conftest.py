from unittest.mock import Mock

import pytest

from clients.compressed_nft import CompressedNftClient
from clients.rest import ShyftRestClient
from config import ShyftConfig
from domain.nft import Network


@pytest.fixture(scope="function")
def shyft_config() -> ShyftConfig:
    return ShyftConfig(api_key="test-key", network=Network.DEVNET, base_url="https://example.com/sol/v1")


@pytest.fixture(scope="function")
def dispatcher() -> Mock:
    mock = Mock(spec=ShyftRestClient)
    mock.request.return_value = {"success": True, "message": "ok", "result": {}}
    return mock


@pytest.fixture(scope="function")
def nft_client(shyft_config: ShyftConfig, dispatcher: Mock) -> CompressedNftClient:
    return CompressedNftClient(shyft_config, dispatcher=dispatcher)
