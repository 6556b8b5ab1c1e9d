import os

import pytest
import requests
import responses

from vfox.downloader import Downloader

URL = "http://downloads.example.com/files/sdk.tar.gz"


def test_download_saves_body_under_url_basename(tmp_path):
    body = b"archive bytes" * 100
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=body, status=200)
        path = Downloader(str(tmp_path)).download(URL)
    assert path == os.path.join(str(tmp_path), "sdk.tar.gz")
    with open(path, "rb") as fh:
        assert fh.read() == body


def test_download_ignores_query_string(tmp_path):
    url = "http://downloads.example.com/files/tool.zip?sig=abc"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, url, body=b"zipdata", status=200)
        path = Downloader(str(tmp_path)).download(url)
    assert os.path.basename(path) == "tool.zip"
    with open(path, "rb") as fh:
        assert fh.read() == b"zipdata"


def test_download_not_found(tmp_path):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"", status=404)
        with pytest.raises(FileNotFoundError, match="source file not found"):
            Downloader(str(tmp_path)).download(URL)
    assert not (tmp_path / "sdk.tar.gz").exists()


def test_download_connection_error(tmp_path):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=requests.ConnectionError("refused"))
        with pytest.raises(requests.ConnectionError):
            Downloader(str(tmp_path)).download(URL)


def test_download_empty_body(tmp_path):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"", status=200)
        path = Downloader(str(tmp_path)).download(URL)
    assert os.path.getsize(path) == 0