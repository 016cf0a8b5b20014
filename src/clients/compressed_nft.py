from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Sequence, cast

from config import ShyftConfig
from domain.nft import (
    CNftBurnResponse,
    CNftMintResponse,
    CNftTransferManyResponse,
    CNftTransferResponse,
    CreateMerkleTreeResponse,
    DepthSizePair,
    Network,
    Nft,
)
from domain.tree_config import InvalidConfigurationError, is_valid_depth_size_pair
from utils.case_converter import CaseConverter

from .rest import ShyftAPIError, ShyftRestClient

logger = logging.getLogger(__name__)


def _always(value: Any) -> bool:
    return True


def _if_truthy(value: Any) -> bool:
    return bool(value)


# (argument, wire key, inclusion rule) for the mint body. Optional arguments
# are sent only when truthy, so an explicit False or 0 is the same as leaving
# the argument out. The service expects the misspelled "primary_sale_happend".
_MINT_FIELDS: tuple[tuple[str, str, Callable[[Any], bool]], ...] = (
    ("creator_wallet", "creator_wallet", _always),
    ("merkle_tree", "merkle_tree", _always),
    ("metadata_uri", "metadata_uri", _always),
    ("is_delegate_authority", "is_delegate_authority", _if_truthy),
    ("collection_address", "collection_address", _if_truthy),
    ("max_supply", "max_supply", _if_truthy),
    ("primary_sale_happened", "primary_sale_happend", _if_truthy),
    ("is_mutable", "is_mutable", _if_truthy),
    ("receiver", "receiver", _if_truthy),
    ("fee_payer", "fee_payer", _if_truthy),
)


class CompressedNftClient:
    """Compressed NFT endpoints of the Shyft API.

    Every method makes a single request and returns the ``result`` of the
    response envelope. Errors from the dispatcher are not caught here.
    """

    def __init__(self, config: ShyftConfig, *, dispatcher: ShyftRestClient | None = None) -> None:
        self.config = config
        self._dispatcher = dispatcher or ShyftRestClient(config)
        self._case_converter = CaseConverter()

    def create_merkle_tree(
        self,
        *,
        wallet_address: str,
        max_depth_size_pair: DepthSizePair | Mapping[str, int],
        canopy_depth: int,
        fee_payer: str | None = None,
        network: Network | str | None = None,
    ) -> CreateMerkleTreeResponse:
        if not is_valid_depth_size_pair(max_depth_size_pair):
            logger.warning("Rejected Merkle tree configuration %r", max_depth_size_pair)
            raise InvalidConfigurationError("Invalid depth size pair")
        _require("wallet_address", wallet_address)

        pair = DepthSizePair.model_validate(max_depth_size_pair)
        body: dict[str, Any] = {
            "network": self._network(network),
            "wallet_address": wallet_address,
            "max_depth_size_pair": self._case_converter.convert_to_snake_case_object(
                pair.model_dump(by_alias=True)
            ),
            "canopy_depth": canopy_depth,
        }
        if fee_payer:
            body["fee_payer"] = fee_payer

        return cast(CreateMerkleTreeResponse, self._call("POST", "nft/compressed/create_tree", data=body))

    def mint(
        self,
        *,
        creator_wallet: str,
        merkle_tree: str,
        metadata_uri: str,
        is_delegate_authority: bool | None = None,
        collection_address: str | None = None,
        max_supply: int | None = None,
        primary_sale_happened: bool | None = None,
        is_mutable: bool | None = None,
        receiver: str | None = None,
        fee_payer: str | None = None,
        network: Network | str | None = None,
    ) -> CNftMintResponse:
        arguments = locals()
        body: dict[str, Any] = {"network": self._network(network)}
        for argument, wire_key, include in _MINT_FIELDS:
            value = arguments[argument]
            if include(value):
                body[wire_key] = value

        return cast(CNftMintResponse, self._call("POST", "nft/compressed/mint", data=body))

    def transfer(
        self,
        *,
        mint: str,
        from_address: str,
        to_address: str,
        network: Network | str | None = None,
    ) -> CNftTransferResponse:
        body = {
            "network": self._network(network),
            "nft_address": mint,
            "sender": from_address,
            "receiver": to_address,
        }
        return cast(CNftTransferResponse, self._call("POST", "nft/compressed/transfer", data=body))

    def transfer_many(
        self,
        *,
        mints: Sequence[str],
        from_address: str,
        to_address: str,
        network: Network | str | None = None,
    ) -> CNftTransferManyResponse:
        """Move every NFT in ``mints`` from ``from_address`` to ``to_address`` in one request."""
        if not mints:
            raise ValueError("mints must contain at least one address")

        body = {
            "network": self._network(network),
            "nft_addresses": list(mints),
            "from_address": from_address,
            "to_address": to_address,
        }
        return cast(CNftTransferManyResponse, self._call("POST", "nft/compressed/transfer_many", data=body))

    def burn(
        self,
        *,
        wallet_address: str,
        mint: str,
        network: Network | str | None = None,
    ) -> CNftBurnResponse:
        body = {
            "network": self._network(network),
            "wallet_address": wallet_address,
            "nft_address": mint,
        }
        return cast(CNftBurnResponse, self._call("DELETE", "nft/compressed/burn", data=body))

    def read(self, *, mint: str, network: Network | str | None = None) -> Nft:
        params = {
            "network": self._network(network),
            "nft_address": mint,
        }
        return cast(Nft, self._call("GET", "nft/compressed/read", params=params))

    def read_all(self, *, wallet_address: str, network: Network | str | None = None) -> list[Nft]:
        params = {
            "network": self._network(network),
            "wallet_address": wallet_address,
        }
        return cast(list[Nft], self._call("GET", "nft/compressed/read_all", params=params, unwrap=("result", "nfts")))

    def _network(self, network: Network | str | None) -> str:
        return str(network if network is not None else self.config.network)

    def _call(
        self,
        method: str,
        path: str,
        *,
        data: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        unwrap: tuple[str, ...] = ("result",),
    ) -> Any:
        envelope = self._dispatcher.request(method, path, data=data, params=params)
        value: Any = envelope
        for key in unwrap:
            if not isinstance(value, Mapping) or key not in value:
                raise ShyftAPIError(f"Shyft API response is missing {key!r}", payload=envelope)
            value = value[key]
        return value


def _require(name: str, value: str) -> None:
    if not value:
        msg = f"{name} must be provided"
        raise ValueError(msg)


__all__ = ["CompressedNftClient", "InvalidConfigurationError"]
