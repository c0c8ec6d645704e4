import pytest

from reelgrab.core.clipboard import ClipboardPasteHelper
from reelgrab.core.errors import ClipboardError


class FakeReader:
    def __init__(self, text="", error=None):
        self.text = text
        self.error = error

    def read_text(self):
        if self.error:
            raise self.error
        return self.text


def test_paste_returns_trimmed_clipboard_text():
    helper = ClipboardPasteHelper(FakeReader("  https://www.instagram.com/p/abc/\n"))
    assert helper.paste("old") == "https://www.instagram.com/p/abc/"


def test_empty_clipboard_keeps_input():
    assert ClipboardPasteHelper(FakeReader("")).paste("old") == "old"


def test_paste_does_not_validate():
    assert ClipboardPasteHelper(FakeReader("not a url")).paste() == "not a url"


def test_reader_failure_raises_clipboard_error():
    cause = PermissionError("denied")
    helper = ClipboardPasteHelper(FakeReader(error=cause))

    with pytest.raises(ClipboardError) as info:
        helper.paste("old")
    assert info.value.cause is cause
    assert info.value.message == "Unable to paste from clipboard. Please paste manually."
