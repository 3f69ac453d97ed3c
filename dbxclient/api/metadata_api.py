import logging
from typing import Any, Dict, Optional

from dbxclient.api._api import JsonValue
from dbxclient.api.module_api import ModuleApi
from dbxclient.domain.types.request import ApiRequest
from dbxclient.io.paths import RootLike

logger = logging.getLogger(__name__)


class MetadataApi(ModuleApi):
    """File and folder information, and browser links."""

    @staticmethod
    def _endpoint_prefix() -> str:
        return "metadata"

    def get(
        self,
        path: str,
        list: bool = True,
        hash: Optional[str] = None,
        file_limit: Optional[int] = None,
        root: Optional[RootLike] = None,
    ) -> JsonValue:
        """
        Returns file or folder information.

        :param path: Path to describe.
        :type path: str
        :param list: For a folder, include the entries it contains.
        :type list: bool
        :param hash: Hash of a previous listing; the server answers "not modified" if unchanged.
        :type hash: str, optional
        :param file_limit: Maximum number of entries to return.
        :type file_limit: int, optional
        :param root: Overrides the default root.
        :type root: str, optional
        :return: Decoded response
        """
        root = self._resolve_root(root)
        params = self.build_params(list=list, hash=hash, file_limit=file_limit)
        uri = self._resource(path, root)
        if self._api.legacy_metadata_params:
            logger.debug(f"Legacy metadata request, parameters not sent: {params}")
            return self._api.send_json(ApiRequest(uri=uri))
        return self._api.send_json(ApiRequest(uri=uri, params=params))

    def build_params(
        self,
        list: bool = True,
        hash: Optional[str] = None,
        file_limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Parameter set of a metadata request. In legacy mode ``file_limit``
        carries the value of ``hash``, for callers that depend on it.
        """
        params: Dict[str, Any] = {"list": list}
        if hash is not None:
            params["hash"] = hash
        if file_limit is not None:
            params["file_limit"] = hash if self._api.legacy_metadata_params else file_limit
        return params

    def links(self, path: str, root: Optional[RootLike] = None) -> JsonValue:
        """
        Returns browser links for a file or folder. The links are cookie
        protected, so opening one may prompt for a login.
        """
        root = self._resolve_root(root)
        return self._api.send_json(ApiRequest(uri=self._resource(path, root, prefix="links")))
