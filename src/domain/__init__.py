"""Domain types for the compressed NFT client.

Request-side values (networks, addresses, Merkle tree shapes) and the typed
shapes of the service's response payloads. Response payloads are plain
dictionaries typed with ``TypedDict``; the service is authoritative for their
content so they are not re-validated here.
"""

__all__ = [
    "nft",
    "tree_config",
]
