from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

from clients.rest import ShyftAPIError, ShyftRestClient
from config import ShyftConfig


def _mock_response(payload: object, status_code: int = 200) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    response.text = "payload"
    response.raise_for_status.return_value = None
    return response


def test_request_sends_json_body_with_api_key_header(shyft_config: ShyftConfig) -> None:
    session = Mock()
    envelope = {"success": True, "message": "ok", "result": {"tree": "T"}}
    session.request.return_value = _mock_response(envelope)

    client = ShyftRestClient(shyft_config, session=session)
    payload = client.request("POST", "nft/compressed/create_tree", data={"network": "devnet"})

    assert payload == envelope
    session.request.assert_called_once()
    args, kwargs = session.request.call_args
    assert args == ("POST", "https://example.com/sol/v1/nft/compressed/create_tree")
    assert kwargs["json"] == {"network": "devnet"}
    assert kwargs["params"] is None
    assert kwargs["headers"] == {"x-api-key": "test-key"}
    assert kwargs["timeout"] == 30.0


def test_request_passes_query_params_for_reads(shyft_config: ShyftConfig) -> None:
    session = Mock()
    session.request.return_value = _mock_response({"success": True, "result": []})

    client = ShyftRestClient(shyft_config, session=session)
    client.request("GET", "nft/compressed/read", params={"network": "devnet", "nft_address": "M"})

    kwargs = session.request.call_args.kwargs
    assert kwargs["params"] == {"network": "devnet", "nft_address": "M"}
    assert kwargs["json"] is None


def test_retry_adapter_is_mounted_for_get_only(shyft_config: ShyftConfig) -> None:
    session = requests.Session()
    ShyftRestClient(shyft_config, session=session)

    retries = session.get_adapter("https://api.shyft.to").max_retries
    assert retries.total == 3
    assert 429 in retries.status_forcelist
    assert retries.allowed_methods == frozenset({"GET"})


def test_request_wraps_http_errors_with_service_message(shyft_config: ShyftConfig) -> None:
    session = Mock()
    response = _mock_response({"success": False, "message": "Invalid API key"}, status_code=401)
    response.raise_for_status.side_effect = requests.HTTPError(response=response)
    session.request.return_value = response

    client = ShyftRestClient(shyft_config, session=session)

    with pytest.raises(ShyftAPIError, match="Invalid API key") as exc_info:
        client.request("GET", "nft/compressed/read")
    assert exc_info.value.status_code == 401
    assert exc_info.value.payload == {"success": False, "message": "Invalid API key"}


def test_request_wraps_connection_errors(shyft_config: ShyftConfig) -> None:
    session = Mock()
    session.request.side_effect = requests.ConnectionError("boom")

    client = ShyftRestClient(shyft_config, session=session)

    with pytest.raises(ShyftAPIError, match="request failed"):
        client.request("POST", "nft/compressed/mint", data={})


def test_request_rejects_invalid_json(shyft_config: ShyftConfig) -> None:
    session = Mock()
    response = _mock_response({})
    response.json.side_effect = ValueError("no json")
    session.request.return_value = response

    client = ShyftRestClient(shyft_config, session=session)

    with pytest.raises(ShyftAPIError, match="invalid JSON"):
        client.request("GET", "nft/compressed/read")


@pytest.mark.parametrize(
    "payload",
    [
        ["not", "an", "object"],
        {"success": False, "message": "Tree not found"},
        {"success": True, "message": "ok"},
    ],
)
def test_request_rejects_bad_envelopes(shyft_config: ShyftConfig, payload: object) -> None:
    session = Mock()
    session.request.return_value = _mock_response(payload)

    client = ShyftRestClient(shyft_config, session=session)

    with pytest.raises(ShyftAPIError):
        client.request("GET", "nft/compressed/read")
