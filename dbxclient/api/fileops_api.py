from typing import Optional

from dbxclient.api._api import JsonValue
from dbxclient.api.module_api import ModuleApi
from dbxclient.domain.types.request import ApiRequest
from dbxclient.io.paths import RootLike


class FileOpsApi(ModuleApi):
    """
    Copy, move, delete and folder creation. Paths travel as parameters,
    exactly as given; only the root is resolved.
    """

    @staticmethod
    def _endpoint_prefix() -> str:
        return "fileops"

    def _request(self, operation: str, **params) -> ApiRequest:
        return ApiRequest(uri=f"{self._endpoint_prefix()}/{operation}", params=params)

    def copy(self, from_path: str, to_path: str, root: Optional[RootLike] = None) -> JsonValue:
        """Copies a file or folder and returns the metadata of the copy."""
        root = self._resolve_root(root)
        request = self._request("copy", from_path=from_path, to_path=to_path, root=root)
        return self._api.send_json(request)

    def create_folder(self, path: str, root: Optional[RootLike] = None) -> JsonValue:
        """Creates a folder and returns its metadata."""
        root = self._resolve_root(root)
        return self._api.send_json(self._request("create_folder", path=path, root=root))

    def delete(self, path: str, root: Optional[RootLike] = None) -> bytes:
        """Deletes a file or folder. The raw response body is returned."""
        root = self._resolve_root(root)
        return self._api.send(self._request("delete", path=path, root=root))

    def move(self, from_path: str, to_path: str, root: Optional[RootLike] = None) -> JsonValue:
        """Moves a file or folder and returns the metadata at its new location."""
        root = self._resolve_root(root)
        request = self._request("move", from_path=from_path, to_path=to_path, root=root)
        return self._api.send_json(request)
