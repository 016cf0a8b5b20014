from __future__ import annotations

from enum import StrEnum
from typing import Any, NewType, TypedDict

from pydantic import BaseModel, ConfigDict, StrictInt
from pydantic.alias_generators import to_camel

WalletAddress = NewType("WalletAddress", str)
MintAddress = NewType("MintAddress", str)
TreeAddress = NewType("TreeAddress", str)


class Network(StrEnum):
    MAINNET = "mainnet-beta"
    DEVNET = "devnet"
    TESTNET = "testnet"


class DepthSizePair(BaseModel):
    """Capacity of a concurrent Merkle tree.

    ``max_depth`` bounds the number of leaves (2 ** max_depth NFTs) and
    ``max_buffer_size`` the number of concurrent changes the tree can absorb
    within a single slot. Accepts ``maxDepth``/``maxBufferSize`` as well.
    """

    max_depth: StrictInt
    max_buffer_size: StrictInt

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class CreateMerkleTreeResponse(TypedDict):
    encoded_transaction: str
    tree: TreeAddress
    signers: list[str]


class CNftMintResponse(TypedDict):
    encoded_transaction: str
    mint: MintAddress
    signers: list[str]


class CNftTransferResponse(TypedDict):
    encoded_transaction: str
    signers: list[str]


class CNftTransferManyResponse(TypedDict):
    encoded_transactions: list[str]
    signers: list[str]


class CNftBurnResponse(TypedDict):
    encoded_transaction: str
    signers: list[str]


class NftCreator(TypedDict):
    address: WalletAddress
    share: int
    verified: bool


class Nft(TypedDict, total=False):
    name: str
    symbol: str
    royalty: int
    image_uri: str
    cached_image_uri: str
    metadata_uri: str
    description: str
    mint: MintAddress
    owner: WalletAddress
    update_authority: WalletAddress
    creators: list[NftCreator]
    collection: dict[str, Any]
    attributes: dict[str, Any]
    external_url: str
    primary_sale_happened: bool
    is_mutable: bool
    is_compressed: bool
    merkle_tree: TreeAddress


__all__ = [
    "CNftBurnResponse",
    "CNftMintResponse",
    "CNftTransferManyResponse",
    "CNftTransferResponse",
    "CreateMerkleTreeResponse",
    "DepthSizePair",
    "MintAddress",
    "Network",
    "Nft",
    "NftCreator",
    "TreeAddress",
    "WalletAddress",
]
