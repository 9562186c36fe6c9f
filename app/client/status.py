"""Upload session phases and the feedback shown for each."""

from __future__ import annotations

from enum import Enum


class UploadStatus(str, Enum):
    """Phase of an upload session.

    Each member carries its status message and progress percentage, so the
    mapping cannot miss a phase.
    """

    IDLE = ("idle", "Drop your audio file here", 0)
    UPLOADING = ("uploading", "Uploading file...", 20)
    TRANSCRIBING = ("transcribing", "Transcribing audio with AI...", 40)
    ANALYZING = ("analyzing", "Analyzing meeting content...", 60)
    PUBLISHING = ("publishing", "Creating Notion page...", 80)
    COMPLETE = ("complete", "Processing complete!", 100)
    ERROR = ("error", "Something went wrong", 0)

    def __new__(cls, value: str, message: str, progress: int) -> "UploadStatus":
        member = str.__new__(cls, value)
        member._value_ = value
        member.message = message
        member.progress = progress
        return member

    @property
    def is_processing(self) -> bool:
        return self not in (UploadStatus.IDLE, UploadStatus.COMPLETE, UploadStatus.ERROR)

    @property
    def is_terminal(self) -> bool:
        return self in (UploadStatus.COMPLETE, UploadStatus.ERROR)


__all__ = ["UploadStatus"]
