"""Local audio duration probing, done before anything is uploaded."""

from __future__ import annotations

import io

from pydub import AudioSegment
from pydub.exceptions import CouldntDecodeError

from .errors import AudioDecodeError


def probe_duration(content: bytes, *, filename: str | None = None) -> float:
    """Return the length of ``content`` in seconds.

    pydub delegates to ffmpeg, so any container ffmpeg can read works.
    """

    audio_format = None
    if filename and "." in filename:
        audio_format = filename.rsplit(".", 1)[1].lower()

    try:
        segment = AudioSegment.from_file(io.BytesIO(content), format=audio_format)
    except (CouldntDecodeError, OSError, IndexError) as exc:
        raise AudioDecodeError("Could not load audio file") from exc
    return float(segment.duration_seconds)


__all__ = ["probe_duration"]
