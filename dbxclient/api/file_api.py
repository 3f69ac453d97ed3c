import logging
from typing import Any, Optional, Union

from dbxclient.api._api import JsonValue
from dbxclient.api.module_api import ModuleApi
from dbxclient.domain.types.request import ApiRequest
from dbxclient.io.multipart import build_multipart_body, content_type_header
from dbxclient.io.paths import RootLike, split_upload_path, upload_directory
from dbxclient.io.payload import as_payload

logger = logging.getLogger(__name__)


class FileApi(ModuleApi):
    """File transfers on the content host."""

    @staticmethod
    def _endpoint_prefix() -> str:
        return "files"

    # --- Download -------------------------------------------------
    def get(self, path: str = "", root: Optional[RootLike] = None) -> bytes:
        """Returns the contents of a file, unprocessed."""
        root = self._resolve_root(root)
        return self._api.send(ApiRequest(uri=self._content_resource(path, root)))

    def thumbnail(
        self, path: str, size: str = "small", root: Optional[RootLike] = None
    ) -> bytes:
        """
        Returns the thumbnail image of a file.

        :param path: Path of the image file.
        :type path: str
        :param size: ``small``, ``medium`` or ``large``.
        :type size: str
        :param root: Overrides the default root.
        :type root: str, optional
        :return: Raw image bytes
        :rtype: :class:`bytes`
        """
        root = self._resolve_root(root)
        request = ApiRequest(
            uri=self._content_resource(path, root, prefix="thumbnails"),
            params={"size": size},
        )
        return self._api.send(request)

    # --- Upload ---------------------------------------------------
    def put(
        self, path: str, file: Any, root: Optional[RootLike] = None
    ) -> Union[JsonValue, bytes]:
        """
        Uploads a file to ``path`` (target directory plus filename).

        :param path: Target path including the filename.
        :type path: str
        :param file: Local file path, open stream, :class:`FilePath` or :class:`OpenStream`.
        :param root: Overrides the default root.
        :type root: str, optional
        :return: Decoded response, or the raw body if it is not JSON
        :raises InvalidArgumentError: ``file`` is neither a path nor a stream.
        """
        directory, filename = split_upload_path(path)
        root = self._resolve_root(root)
        payload = as_payload(file)
        request = self.build_upload(directory, filename, payload.read(), root=root)
        return self._api.send_json_or_raw(request)

    def build_upload(
        self,
        directory: str,
        filename: str,
        content: bytes,
        root: Optional[RootLike] = None,
    ) -> ApiRequest:
        """
        Shapes the multipart POST for an upload without sending it.

        The filename is repeated in the query string so that it is covered by
        the request signature.
        """
        root = self._resolve_root(root)
        directory = upload_directory(directory)
        boundary = self._api.new_boundary()
        uri = self._content_resource(directory, root) + f"?file={filename}"
        logger.debug(f"Upload of {len(content)} bytes to {uri}")
        return ApiRequest(
            uri=uri,
            body=build_multipart_body(filename, content, boundary),
            method="POST",
            headers=content_type_header(boundary),
        )
