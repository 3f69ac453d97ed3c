"""
Tests for request construction and dispatch of every API operation.
"""

import io
import json

import pytest

from dbxclient.api.api import Api
from dbxclient.domain.types.root import Root
from dbxclient.io.multipart import FIXED_BOUNDARY, parse_multipart_body
from dbxclient.io.network_exceptions import (
    DecodeError,
    InvalidArgumentError,
    TransportError,
)

# Each entry: (name, call, expected uri template). "{content}" and "{root}" are
# filled per test.
PATH_OPERATIONS = [
    (
        "get_file",
        lambda api, root: api.get_file("/docs/a.txt", root=root),
        "{content}files/{root}/docs/a.txt",
    ),
    (
        "get_links",
        lambda api, root: api.get_links("/docs", root=root),
        "links/{root}/docs",
    ),
    (
        "get_metadata",
        lambda api, root: api.get_metadata("/docs", root=root),
        "metadata/{root}/docs",
    ),
    (
        "get_thumbnail",
        lambda api, root: api.get_thumbnail("/p.jpg", root=root),
        "{content}thumbnails/{root}/p.jpg",
    ),
    (
        "put_file",
        lambda api, root: api.put_file("/docs/a.txt", io.BytesIO(b"hi"), root=root),
        "{content}files/{root}/docs?file=a.txt",
    ),
]

PARAM_OPERATIONS = [
    ("copy", lambda api, root: api.copy("/a", "/b", root=root)),
    ("create_folder", lambda api, root: api.create_folder("/new", root=root)),
    ("delete", lambda api, root: api.delete("/old", root=root)),
    ("move", lambda api, root: api.move("/a", "/b", root=root)),
]

ALL_OPERATIONS = [(name, call) for name, call, _ in PATH_OPERATIONS] + PARAM_OPERATIONS + [
    ("get_account_info", lambda api, root: api.get_account_info()),
]


# ------------------------------------------------------------------
# Root resolution
# ------------------------------------------------------------------


@pytest.mark.parametrize("name, call, uri", PATH_OPERATIONS)
def test_path_operations_use_default_root(api, transport, name, call, uri):
    call(api, None)
    assert transport.last["uri"] == uri.format(content=api.content_url, root="sandbox")


@pytest.mark.parametrize("name, call, uri", PATH_OPERATIONS)
def test_path_operations_use_override(api, transport, name, call, uri):
    call(api, "dropbox")
    assert transport.last["uri"] == uri.format(content=api.content_url, root="dropbox")


@pytest.mark.parametrize("name, call, uri", PATH_OPERATIONS)
def test_override_is_forwarded_verbatim(dropbox_api, transport, name, call, uri):
    call(dropbox_api, "custom-root")
    assert transport.last["uri"] == uri.format(content=dropbox_api.content_url, root="custom-root")


@pytest.mark.parametrize("name, call", PARAM_OPERATIONS)
def test_param_operations_send_root(api, dropbox_api, transport, name, call):
    call(api, None)
    assert transport.last["params"]["root"] == "sandbox"
    call(dropbox_api, None)
    assert transport.last["params"]["root"] == "dropbox"
    call(api, Root.DROPBOX)
    assert transport.last["params"]["root"] == "dropbox"


def test_default_root_accepts_enum(transport):
    api = Api(transport, root=Root.DROPBOX)
    assert api.root == "dropbox"


def test_missing_default_root_rejected(transport):
    with pytest.raises(InvalidArgumentError):
        Api(transport, root=None)
    assert transport.calls == []


# ------------------------------------------------------------------
# Individual operations
# ------------------------------------------------------------------


def test_account_info(api, transport):
    transport.response = b'{"display_name": "Ada", "quota_info": {"quota": 100}}'
    assert api.get_account_info() == {"display_name": "Ada", "quota_info": {"quota": 100}}
    assert transport.last == {"uri": "account/info", "params": None, "method": "GET", "headers": {}}


def test_get_file_returns_raw_bytes(api, transport):
    transport.response = b"\x89PNG not json"
    assert api.get_file("a.png") == b"\x89PNG not json"
    assert transport.last["params"] is None


def test_get_file_default_path(api, transport):
    api.get_file()
    assert transport.last["uri"] == api.content_url + "files/sandbox/"


def test_copy_params(api, transport):
    transport.response = b'{"path": "/b"}'
    assert api.copy("/a", "/b") == {"path": "/b"}
    assert transport.last["uri"] == "fileops/copy"
    assert transport.last["params"] == {"from_path": "/a", "to_path": "/b", "root": "sandbox"}


def test_move_params(api, transport):
    api.move("a", "b", root="dropbox")
    assert transport.last["uri"] == "fileops/move"
    assert transport.last["params"] == {"from_path": "a", "to_path": "b", "root": "dropbox"}


def test_create_folder_params(api, transport):
    api.create_folder("/new")
    assert transport.last["uri"] == "fileops/create_folder"
    assert transport.last["params"] == {"path": "/new", "root": "sandbox"}


def test_delete_returns_transport_result(api, transport):
    transport.response = b"deleted"
    assert api.delete("/old") == b"deleted"
    assert transport.last["uri"] == "fileops/delete"
    assert transport.last["params"] == {"path": "/old", "root": "sandbox"}


def test_links_decoded(api, transport):
    transport.response = b'["https://www.dropbox.com/s/abc"]'
    assert api.get_links("/docs") == ["https://www.dropbox.com/s/abc"]


def test_thumbnail_size(api, transport):
    transport.response = b"\xff\xd8jpeg"
    assert api.get_thumbnail("p.jpg") == b"\xff\xd8jpeg"
    assert transport.last["params"] == {"size": "small"}
    api.get_thumbnail("p.jpg", size="large")
    assert transport.last["params"] == {"size": "large"}


def test_module_apis_match_flat_methods(api, transport):
    api.metadata.links("/x")
    via_module = transport.last
    api.get_links("/x")
    assert transport.last == via_module


# ------------------------------------------------------------------
# Metadata parameters
# ------------------------------------------------------------------


def test_metadata_sends_all_params(api, transport):
    api.get_metadata("/docs", list=False, hash="abc123", file_limit=25)
    assert transport.last["uri"] == "metadata/sandbox/docs"
    assert transport.last["params"] == {"list": False, "hash": "abc123", "file_limit": 25}


def test_metadata_default_params(api, transport):
    api.get_metadata("/docs")
    assert transport.last["params"] == {"list": True}


def test_metadata_file_limit_without_hash(api, transport):
    api.get_metadata("/docs", file_limit=10)
    assert transport.last["params"] == {"list": True, "file_limit": 10}


def test_legacy_metadata_compatibility(transport):
    """Legacy mode copies hash into file_limit and sends no parameters at all."""
    api = Api(transport, legacy_metadata_params=True)
    assert api.metadata.build_params(list=True, hash="abc123", file_limit=25) == {
        "list": True,
        "hash": "abc123",
        "file_limit": "abc123",
    }
    api.get_metadata("/docs", hash="abc123", file_limit=25)
    assert transport.last["uri"] == "metadata/sandbox/docs"
    assert transport.last["params"] is None


# ------------------------------------------------------------------
# Upload
# ------------------------------------------------------------------


def test_put_file_from_path(api, transport, tmp_path):
    source = tmp_path / "local.txt"
    source.write_bytes(b"hi")
    transport.response = b'{"bytes": 2, "path": "/docs/a.txt"}'

    result = api.put_file("/docs/a.txt", str(source))

    assert result == {"bytes": 2, "path": "/docs/a.txt"}
    call = transport.last
    assert call["method"] == "POST"
    assert call["uri"] == api.content_url + "files/sandbox/docs?file=a.txt"
    assert call["headers"] == {"Content-Type": f"multipart/form-data; boundary={FIXED_BOUNDARY}"}
    assert call["params"] == (
        f"--{FIXED_BOUNDARY}\r\n"
        "Content-Disposition: form-data; name=file; filename=a.txt\r\n"
        "Content-type: application/octet-stream\r\n"
        "\r\n"
        "hi\r\n"
        f"--{FIXED_BOUNDARY}--"
    ).encode()


def test_put_file_without_directory(api, transport):
    api.put_file("a.txt", io.BytesIO(b"x"))
    assert transport.last["uri"] == api.content_url + "files/sandbox/?file=a.txt"


def test_build_upload_current_directory_marker(api):
    request = api.files.build_upload(".", "x", b"")
    assert request.uri == api.content_url + "files/sandbox/?file=x"
    assert request.method == "POST"


def test_put_file_with_injected_boundary(transport):
    api = Api(transport, boundary_factory=lambda: "custom-boundary")
    api.put_file("/a.txt", io.BytesIO(b"payload"))
    call = transport.last
    assert call["headers"]["Content-Type"] == "multipart/form-data; boundary=custom-boundary"
    assert parse_multipart_body(call["params"], call["headers"]["Content-Type"]) == (
        "a.txt",
        b"payload",
    )


def test_put_file_leaves_caller_stream_open(api):
    stream = io.BytesIO(b"data")
    api.put_file("a.txt", stream)
    assert not stream.closed


@pytest.mark.parametrize("value", [42, None, object(), b"bytes"])
def test_put_file_rejects_bad_payload_before_transport(api, transport, value):
    with pytest.raises(InvalidArgumentError):
        api.put_file("/a.txt", value)
    assert transport.calls == []


def test_put_file_missing_local_file(api, transport, tmp_path):
    with pytest.raises(FileNotFoundError):
        api.put_file("/a.txt", str(tmp_path / "nope.txt"))
    assert transport.calls == []


@pytest.mark.parametrize("body", [b"", b"ok", b"<html>uploaded</html>"])
def test_put_file_returns_raw_body_when_not_json(api, transport, body):
    transport.response = body
    assert api.put_file("/a.txt", io.BytesIO(b"x")) == body
    assert len(transport.calls) == 1


def test_put_file_still_decodes_json(api, transport):
    transport.response = b'{"rev": "1f"}'
    assert api.put_file("/a.txt", io.BytesIO(b"x")) == {"rev": "1f"}


# ------------------------------------------------------------------
# Failures
# ------------------------------------------------------------------


@pytest.mark.parametrize("name, call", ALL_OPERATIONS)
def test_transport_failure_surfaces_without_retry(make_transport, name, call):
    error = TransportError("503 Server Error", status_code=503)
    transport = make_transport(error=error)
    api = Api(transport)
    with pytest.raises(TransportError) as exc_info:
        call(api, None)
    assert exc_info.value is error
    assert len(transport.calls) == 1


@pytest.mark.parametrize(
    "call",
    [
        lambda api: api.get_account_info(),
        lambda api: api.copy("/a", "/b"),
        lambda api: api.get_metadata("/a"),
    ],
)
def test_invalid_json_raises_decode_error(make_transport, call):
    transport = make_transport(response=b"<html>oops</html>")
    with pytest.raises(DecodeError) as exc_info:
        call(Api(transport))
    assert exc_info.value.content == b"<html>oops</html>"


def test_decode_passes_structure_through(api, transport):
    payload = {"contents": [{"path": "/a", "is_dir": False}], "hash": None}
    transport.response = json.dumps(payload).encode()
    assert api.get_metadata("/") == payload


def test_transport_without_fetch_rejected():
    with pytest.raises(InvalidArgumentError):
        Api(object())
