from __future__ import annotations

import base64
import mimetypes
from dataclasses import dataclass
from pathlib import Path

from boxingpython.base.exceptions import InputValidationError

DEFAULT_MEDIA_TYPE = "video/mp4"


@dataclass(frozen=True)
class VideoUpload:
    """Uploaded video handed over by the transport layer.

    Attributes:
        data: Raw video bytes
        media_type: Declared media type, e.g. "video/mp4"
        filename: Display name of the uploaded file
    """

    data: bytes
    media_type: str
    filename: str = "video"

    @property
    def size(self) -> int:
        """Payload size in bytes."""
        return len(self.data)

    @classmethod
    def from_path(cls, path: str | Path, media_type: str | None = None) -> VideoUpload:
        """Read a video file from disk, guessing the media type from its suffix."""
        path_obj = Path(path)
        if not path_obj.is_file():
            raise InputValidationError(f"Video file `{path_obj}` does not exist")

        if media_type is None:
            guessed, _ = mimetypes.guess_type(path_obj.name)
            media_type = guessed or DEFAULT_MEDIA_TYPE

        return cls(data=path_obj.read_bytes(), media_type=media_type, filename=path_obj.name)

    def validate(self) -> VideoUpload:
        """Check the payload is usable for analysis.

        Returns:
            The same upload, for chaining.

        Raises:
            InputValidationError: If the payload is empty or the media type is missing or not a video type.
        """
        if not self.data:
            raise InputValidationError("Video file is required")
        if not self.media_type:
            raise InputValidationError("Video media type is required")
        if not self.media_type.lower().startswith("video/"):
            raise InputValidationError(f"Unsupported media type `{self.media_type}`, expected a video")
        return self

    def to_data_url(self) -> str:
        """Encode the payload as a base64 data URL for chat-style vision APIs."""
        encoded = base64.b64encode(self.data).decode()
        return f"data:{self.media_type};base64,{encoded}"
