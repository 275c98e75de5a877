from pathlib import Path

import pytest

from ytsummarize.core.exceptions import BadRequestError


def test_save_writes_both_artifacts(artifact_store):
    transcript_path, summary_path = artifact_store.save("abc123", "Hello world", "<html>report</html>")

    assert transcript_path.name == "transcript_abc123.txt"
    assert summary_path.name == "summary_abc123.html"
    assert transcript_path.read_text(encoding="utf-8") == "Hello world"
    assert summary_path.read_text(encoding="utf-8") == "<html>report</html>"
    assert artifact_store.transcript_path("abc123") == transcript_path
    assert artifact_store.summary_path("abc123") == summary_path


def test_save_overwrites_existing(artifact_store):
    artifact_store.save("abc123", "first", "<p>1</p>")
    artifact_store.save("abc123", "second", "<p>2</p>")

    assert artifact_store.transcript_path("abc123").read_text(encoding="utf-8") == "second"


def test_missing_artifacts_are_none(artifact_store):
    assert artifact_store.transcript_path("nothing") is None
    assert artifact_store.summary_path("nothing") is None


def test_save_handles_unicode(artifact_store):
    artifact_store.save("uni", "Grüße – 日本語", "<p>ü</p>")
    assert artifact_store.transcript_path("uni").read_text(encoding="utf-8") == "Grüße – 日本語"


@pytest.mark.parametrize("video_id", ["../etc/passwd", "a/b", "", "abc 123"])
def test_invalid_ids_are_rejected(artifact_store, video_id):
    with pytest.raises(BadRequestError):
        artifact_store.summary_path(video_id)
    with pytest.raises(BadRequestError):
        artifact_store.save(video_id, "t", "s")


def test_failed_transcript_write_leaves_no_summary(artifact_store, monkeypatch):
    """A save that fails halfway leaves neither file on disk."""
    real_write_text = Path.write_text

    def failing_write_text(self, *args, **kwargs):
        if self.name.startswith("transcript_"):
            raise OSError("disk full")
        return real_write_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "write_text", failing_write_text)

    with pytest.raises(OSError, match="disk full"):
        artifact_store.save("abc123", "Hello world", "<html>report</html>")

    assert artifact_store.transcript_path("abc123") is None
    assert artifact_store.summary_path("abc123") is None


def test_check_id_returns_valid_id(artifact_store):
    assert artifact_store.check_id("dQw4w9WgXcQ") == "dQw4w9WgXcQ"
    with pytest.raises(BadRequestError):
        artifact_store.check_id("abc123\n")
