from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from dbxclient.io.paths import RootLike, resource_path

if TYPE_CHECKING:
    from dbxclient.api._api import _Api


class ModuleApi(ABC):
    """Group of operations sharing one resource prefix."""

    def __init__(self, api: "_Api"):
        self._api = api

    @staticmethod
    @abstractmethod
    def _endpoint_prefix() -> str:
        pass

    def _resolve_root(self, root: Optional[RootLike]) -> str:
        """_resolve_root"""
        return self._api.resolve_root(root)

    def _resource(self, path: str, root: str, prefix: Optional[str] = None) -> str:
        """_resource"""
        return resource_path(prefix or self._endpoint_prefix(), root, path)

    def _content_resource(self, path: str, root: str, prefix: Optional[str] = None) -> str:
        """_content_resource"""
        return self._api.content_uri(self._resource(path, root, prefix))
