"""
Configuration access by slash separated paths.

.. code-block:: python

    config = Config({"client": {"html": {"basket": {"standard": {"check": 2}}}}})
    config.get("client/html/basket/standard/check", 1)  # 2
"""

import copy
import typing as t

from .globals import SENTINEL, STOREFRONT_LOGGER

logger = STOREFRONT_LOGGER.getChild(__name__)


class Config:
    """Read-mostly nested configuration"""

    __slots__ = ("_data",)

    def __init__(self, data: t.Mapping[str, t.Any] | None = None):
        self._data: dict[str, t.Any] = {}
        if data:
            self.merge(data)

    @staticmethod
    def _split(path: str) -> list[str]:
        return [part for part in path.strip("/").split("/") if part]

    def get(self, path: str, default: t.Any = None) -> t.Any:
        """Get the value at ``path`` or ``default`` if any segment is missing"""
        node: t.Any = self._data
        for part in self._split(path):
            if not isinstance(node, t.Mapping) or part not in node:
                return default
            node = node[part]
        return node

    def has(self, path: str) -> bool:
        return self.get(path, SENTINEL) is not SENTINEL

    def set(self, path: str, value: t.Any) -> None:
        parts = self._split(path)
        if not parts:
            raise ValueError("Cannot set the config root")
        node = self._data
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        node[parts[-1]] = value

    def merge(self, data: t.Mapping[str, t.Any]) -> "Config":
        """Deep merge ``data`` into this config.

        Keys may be nested mappings or slash paths
        (``{"client/html/basket/standard/check": 0}``).
        """
        for key, value in data.items():
            if isinstance(value, t.Mapping):
                current = self.get(key)
                if not isinstance(current, dict):
                    self.set(key, {})
                for sub_key, sub_value in value.items():
                    self.merge({f"{key}/{sub_key}": sub_value})
            else:
                self.set(key, copy.deepcopy(value))
        return self

    def as_dict(self) -> dict[str, t.Any]:
        return copy.deepcopy(self._data)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._data!r}>"
