import base64

import pytest

from osstypes.common import ValidationError
from osstypes.file import (
    CreateFileInput,
    FileChunk,
    UpdateFileInput,
    UrlFileParam,
    valid_file_name,
    valid_file_parent,
)


@pytest.mark.parametrize("name", ["file", "file.txt", ".file.txt", "file.txt.", "..."])
def test_valid_file_name_accepts(name):
    assert valid_file_name(name) is True


@pytest.mark.parametrize(
    "name",
    ["", ".", "..", " file.txt", "/file.txt", "./file.txt", "test/file.txt", "file.txt/"],
)
def test_valid_file_name_rejects(name):
    assert valid_file_name(name) is False


def test_valid_file_name_length_limit():
    assert valid_file_name("a" * 96) is True
    assert valid_file_name("a" * 97) is False


@pytest.mark.parametrize("parent", ["", "/", "/file", "/file.txt", "/file/.txt"])
def test_valid_file_parent_accepts(parent):
    assert valid_file_parent(parent) is True


@pytest.mark.parametrize(
    "parent",
    ["file.txt", "//file.txt", "/./file.txt", "/../file.txt", "test/file.txt", "/file/"],
)
def test_valid_file_parent_rejects(parent):
    assert valid_file_parent(parent) is False


def test_create_file_input_validate():
    CreateFileInput(name="a.txt", content_type="text/plain", status=1).validate()
    with pytest.raises(ValidationError, match="invalid file name"):
        CreateFileInput(name="", content_type="text/plain").validate()
    with pytest.raises(ValidationError, match="content_type cannot be empty"):
        CreateFileInput(name="a.txt").validate()
    with pytest.raises(ValidationError, match="content cannot be empty"):
        CreateFileInput(name="a.txt", content_type="text/plain", content=b"").validate()
    with pytest.raises(ValidationError, match="status should be 0 or 1"):
        CreateFileInput(name="a.txt", content_type="text/plain", status=-1).validate()


def test_update_file_input_validate():
    UpdateFileInput(id=1, status=-1).validate()
    with pytest.raises(ValidationError, match="invalid file name"):
        UpdateFileInput(id=1, name="a/b").validate()
    with pytest.raises(ValidationError, match="content_type cannot be empty"):
        UpdateFileInput(id=1, content_type="").validate()
    with pytest.raises(ValidationError, match="status should be -1, 0 or 1"):
        UpdateFileInput(id=1, status=2).validate()


def test_file_chunk_is_tuple():
    chunk = FileChunk(3, b"abc")
    index, content = chunk
    assert (index, content) == (3, b"abc")


def test_url_file_id():
    param = UrlFileParam.from_url("/f/123")
    assert param == UrlFileParam(file=123)


def test_url_file_full_url_with_name_and_inline():
    param = UrlFileParam.from_url("https://example.com/f/7/report.pdf?inline")
    assert param.file == 7
    assert param.name == "report.pdf"
    assert param.inline is True


def test_url_hash():
    digest = bytes(range(32))
    param = UrlFileParam.from_url("/h/" + digest.hex())
    assert param.hash == digest
    assert param.file == 0


def test_url_filename_query_and_path_override():
    assert UrlFileParam.from_url("/f/1?filename=a.txt").name == "a.txt"
    assert UrlFileParam.from_url("/f/1/b.txt?filename=a.txt").name == "b.txt"


def test_url_token_stops_query_parsing():
    encoded = base64.urlsafe_b64encode(b"token").decode().rstrip("=")
    param = UrlFileParam.from_url(f"/f/1?token={encoded}&inline")
    assert param.token == b"token"
    assert param.inline is False


@pytest.mark.parametrize(
    "url",
    [
        "/x/1",
        "/f/abc",
        "/f/",
        "/f/4294967296",
        "/h/zz",
        "/h/abcd",
        "relative/f/1",
        "/f/1?token=a=b",
    ],
)
def test_url_errors(url):
    with pytest.raises(ValidationError):
        UrlFileParam.from_url(url)