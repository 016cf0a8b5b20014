from __future__ import annotations

from pydantic import ValidationError

from .nft import DepthSizePair

# (max_depth, max_buffer_size) shapes supported by the account compression program.
VALID_DEPTH_SIZE_PAIRS: frozenset[tuple[int, int]] = frozenset(
    {
        (3, 8),
        (5, 8),
        (14, 64),
        (14, 256),
        (14, 1024),
        (14, 2048),
        (15, 64),
        (16, 64),
        (17, 64),
        (18, 64),
        (19, 64),
        (20, 64),
        (20, 256),
        (20, 1024),
        (20, 2048),
        (24, 64),
        (24, 256),
        (24, 512),
        (24, 1024),
        (24, 2048),
        (26, 512),
        (26, 1024),
        (26, 2048),
        (30, 512),
        (30, 1024),
        (30, 2048),
    }
)


class InvalidConfigurationError(ValueError):
    pass


def is_valid_depth_size_pair(candidate: object) -> bool:
    """Return True when ``candidate`` is one of the supported tree shapes.

    Accepts a ``DepthSizePair`` or a mapping with camelCase or snake_case keys.
    Anything else, including pairs with non-integer members, is invalid.
    """
    try:
        pair = DepthSizePair.model_validate(candidate)
    except ValidationError:
        return False
    return (pair.max_depth, pair.max_buffer_size) in VALID_DEPTH_SIZE_PAIRS


__all__ = ["InvalidConfigurationError", "VALID_DEPTH_SIZE_PAIRS", "is_valid_depth_size_pair"]
