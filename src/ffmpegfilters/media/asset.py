"""Media asset metadata (dimensions, duration) probed with ffprobe."""

import json
import subprocess
from pydantic import BaseModel
from typing import Any, Dict, Optional
from .context import MediaContext


class MediaAsset(BaseModel):
    """Dimensions and duration of a media file."""

    path: str
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[float] = None

    model_config = {"frozen": True}

    @staticmethod
    def probe(path: str, ctx: MediaContext) -> "MediaAsset":
        """
        Probe a media file once with ffprobe.

        Args:
            path: File path or URL
            ctx: Media context providing the ffprobe binary and logger

        Returns:
            MediaAsset; fields stay None when probing fails
        """
        cmd = [
            ctx.ffprobe,
            "-v",
            "quiet",
            "-print_format",
            "json",
            "-show_entries",
            "stream=codec_type,width,height,duration:format=duration",
            path,
        ]

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=5)
        except subprocess.TimeoutExpired:
            ctx.logger.warning(f"Probing timed out for {path}")
            return MediaAsset(path=path)
        except FileNotFoundError as e:
            raise RuntimeError(f"FFprobe not found. Please install FFmpeg: {e}")

        if result.returncode != 0:
            ctx.logger.warning(f"ffprobe failed for {path}: {result.stderr}")
            return MediaAsset(path=path)

        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError:
            ctx.logger.warning(f"Unreadable ffprobe output for {path}")
            return MediaAsset(path=path)

        return MediaAsset(path=path, **_extract_info(data))


def _extract_info(data: Dict[str, Any]) -> Dict[str, Any]:
    # First video stream wins; duration falls back to the container's
    video_stream = next(
        (s for s in data.get("streams", []) if s.get("codec_type") == "video"),
        {},
    )
    duration = video_stream.get("duration") or data.get("format", {}).get("duration")
    return {
        "width": video_stream.get("width"),
        "height": video_stream.get("height"),
        "duration": float(duration) if duration else None,
    }
