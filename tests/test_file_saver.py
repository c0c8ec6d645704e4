import pytest

from reelgrab.core.errors import SaveError
from reelgrab.download.file_saver import DirectorySaver


def test_saves_into_directory(tmp_path):
    saver = DirectorySaver(tmp_path / "out")

    path = saver.save(b"video", "instagram-reel.mp4")

    assert path == str(tmp_path / "out" / "instagram-reel.mp4")
    assert (tmp_path / "out" / "instagram-reel.mp4").read_bytes() == b"video"


def test_existing_files_are_not_overwritten(tmp_path):
    saver = DirectorySaver(tmp_path)

    first = saver.save(b"1", "instagram-reel.mp4")
    second = saver.save(b"2", "instagram-reel.mp4")
    third = saver.save(b"3", "instagram-reel.mp4")

    assert first.endswith("instagram-reel.mp4")
    assert second.endswith("instagram-reel (1).mp4")
    assert third.endswith("instagram-reel (2).mp4")
    assert (tmp_path / "instagram-reel.mp4").read_bytes() == b"1"
    assert not list(tmp_path.glob("*.part"))


def test_filename_cannot_escape_directory(tmp_path):
    saver = DirectorySaver(tmp_path / "out")

    path = saver.save(b"v", "../../evil.mp4")

    assert path == str(tmp_path / "out" / "evil.mp4")


def test_unwritable_target_raises_save_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file")

    with pytest.raises(SaveError):
        DirectorySaver(blocker).save(b"v", "instagram-reel.mp4")


def test_failed_write_leaves_no_part_file(tmp_path, monkeypatch):
    from pathlib import Path

    real_write_bytes = Path.write_bytes

    def write_then_fail(self, data):
        real_write_bytes(self, data[:2])
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(Path, "write_bytes", write_then_fail)

    with pytest.raises(SaveError):
        DirectorySaver(tmp_path).save(b"video", "instagram-reel.mp4")

    assert not list(tmp_path.glob("*.part"))
    assert not (tmp_path / "instagram-reel.mp4").exists()
