from reelgrab.core.errors import ClipboardError, MissingAssetError, NetworkError, RemoteError, ValidationError
from reelgrab.utils.translator import translate_error


def test_keys_are_stable():
    for exc in (ValueError("x"), NetworkError(), RemoteError("Invalid link")):
        assert set(translate_error(exc)) == {"title", "content", "suggestion", "raw_error"}


def test_remote_message_is_verbatim():
    assert translate_error(RemoteError("Invalid link"))["content"] == "Invalid link"


def test_remote_without_message_uses_default():
    assert translate_error(RemoteError(None))["content"] == RemoteError.default_message


def test_raw_error_prefers_cause():
    info = translate_error(NetworkError(cause=TimeoutError("read timed out")))
    assert info["raw_error"] == "read timed out"
    assert info["content"] == "Failed to download reel. Please try again."


def test_titles_by_kind():
    assert translate_error(ValidationError())["title"] == ValidationError.title
    assert translate_error(ClipboardError())["title"] == ClipboardError.title
    assert translate_error(MissingAssetError())["content"] == "Video URL not found"


def test_unknown_errors_get_generic_text():
    info = translate_error(KeyError("video"))
    assert info["title"] == "Something went wrong"
    assert "video" in info["raw_error"]
