import pytest
import requests

from reelgrab.core.errors import NetworkError
from reelgrab.service.asset_fetcher import HttpAssetFetcher


class FakeStreamResponse:
    def __init__(self, chunks, headers=None, status_code=200):
        self.chunks = chunks
        self.headers = headers or {}
        self.status_code = status_code

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")

    def iter_content(self, chunk_size=1):
        yield from self.chunks


class FakeSession:
    def __init__(self, response=None, error=None):
        self.headers = {}
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error:
            raise self.error
        return self.response


def test_fetch_concatenates_chunks():
    session = FakeSession(FakeStreamResponse([b"abc", b"", b"def"], {"content-type": "video/mp4"}))
    fetcher = HttpAssetFetcher(timeout=5, max_bytes=0, session=session)

    content, content_type = fetcher.fetch("https://cdn.test/v.mp4")

    assert content == b"abcdef"
    assert content_type == "video/mp4"
    assert session.calls[0][1]["stream"] is True


def test_http_error_is_network_error():
    session = FakeSession(FakeStreamResponse([], status_code=404))

    with pytest.raises(NetworkError):
        HttpAssetFetcher(timeout=5, session=session).fetch("https://cdn.test/v.mp4")


def test_connection_error_is_network_error():
    session = FakeSession(error=requests.exceptions.ConnectionError("reset"))

    with pytest.raises(NetworkError):
        HttpAssetFetcher(timeout=5, session=session).fetch("https://cdn.test/v.mp4")


def test_declared_size_over_limit_is_rejected():
    session = FakeSession(FakeStreamResponse([b"x"], {"content-length": "2048"}))

    with pytest.raises(NetworkError):
        HttpAssetFetcher(timeout=5, max_bytes=1024, session=session).fetch("https://cdn.test/v.mp4")


def test_streamed_size_over_limit_is_rejected():
    session = FakeSession(FakeStreamResponse([b"x" * 600, b"x" * 600]))

    with pytest.raises(NetworkError):
        HttpAssetFetcher(timeout=5, max_bytes=1024, session=session).fetch("https://cdn.test/v.mp4")


def test_malformed_content_length_is_treated_as_unknown():
    session = FakeSession(FakeStreamResponse([b"abc"], {"content-length": "abc"}))

    content, _ = HttpAssetFetcher(timeout=5, max_bytes=1024, session=session).fetch("https://cdn.test/v.mp4")

    assert content == b"abc"


def test_malformed_content_length_still_enforces_cap():
    session = FakeSession(FakeStreamResponse([b"x" * 2048], {"content-length": "lots"}))

    with pytest.raises(NetworkError):
        HttpAssetFetcher(timeout=5, max_bytes=1024, session=session).fetch("https://cdn.test/v.mp4")
