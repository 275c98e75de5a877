"""
Filesystem store for transcripts and rendered summaries, keyed by video id.
"""
import re
from pathlib import Path
from typing import Optional

from loguru import logger

from ytsummarize.core.constants import ArtifactConfig
from ytsummarize.core.exceptions import BadRequestError

ID_RE = re.compile(ArtifactConfig.ID_PATTERN)


class ArtifactStore:
    """
    Writes transcript_<id>.txt and summary_<id>.html under one directory.

    Writes for an existing id overwrite the previous files.
    """

    def __init__(self, output_dir: str | Path):
        self.output_dir = Path(output_dir)

    @staticmethod
    def check_id(video_id: str) -> str:
        """Return video_id if it is safe to use in a file name, else raise BadRequestError."""
        if not ID_RE.fullmatch(video_id or ""):
            raise BadRequestError(f"Invalid video id '{video_id}'.")
        return video_id

    def _transcript_file(self, video_id: str) -> Path:
        return self.output_dir / ArtifactConfig.TRANSCRIPT_TEMPLATE.format(id=self.check_id(video_id))

    def _summary_file(self, video_id: str) -> Path:
        return self.output_dir / ArtifactConfig.SUMMARY_TEMPLATE.format(id=self.check_id(video_id))

    def save(self, video_id: str, transcript: str, summary_document: str) -> tuple[Path, Path]:
        """
        Persist both artifacts and return their paths.

        The summary is written first and removed again if the transcript
        write fails, so a failed save never leaves a lone file behind.
        """
        transcript_path = self._transcript_file(video_id)
        summary_path = self._summary_file(video_id)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        summary_path.write_text(summary_document, encoding="utf-8")
        try:
            transcript_path.write_text(transcript, encoding="utf-8")
        except OSError:
            summary_path.unlink(missing_ok=True)
            raise

        logger.info(f"Saved {transcript_path.name} and {summary_path.name} to {self.output_dir}")
        return transcript_path, summary_path

    def transcript_path(self, video_id: str) -> Optional[Path]:
        path = self._transcript_file(video_id)
        return path if path.is_file() else None

    def summary_path(self, video_id: str) -> Optional[Path]:
        path = self._summary_file(video_id)
        return path if path.is_file() else None
