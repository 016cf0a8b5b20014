from __future__ import annotations

import re
from typing import Any, Mapping

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


class CaseConverter:
    """Renames keys of nested mappings from camelCase to the service's snake_case."""

    @staticmethod
    def to_snake_case(key: str) -> str:
        key = _ACRONYM_BOUNDARY.sub(r"\1_\2", key)
        key = _WORD_BOUNDARY.sub(r"\1_\2", key)
        return key.replace("-", "_").lower()

    def convert_to_snake_case_object(self, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {
                self.to_snake_case(str(key)): self.convert_to_snake_case_object(item) for key, item in value.items()
            }
        if isinstance(value, (list, tuple)):
            return [self.convert_to_snake_case_object(item) for item in value]
        return value


__all__ = ["CaseConverter"]
