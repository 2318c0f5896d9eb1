"""Output formats: the target-format context filters are compiled against."""

from pydantic import BaseModel
from typing import List, Literal, Optional


class OutputFormat(BaseModel):
    """Target output format that generates FFmpeg codec arguments."""

    kind: Literal["h264", "vp9", "copy_audio"]
    crf: Optional[int] = None
    preset: Optional[str] = None

    model_config = {"frozen": True}

    @staticmethod
    def h264(crf: int = 18, preset: str = "medium") -> "OutputFormat":
        """
        H.264 output.

        Args:
            crf: Constant Rate Factor (lower = higher quality)
            preset: Encoding preset (ultrafast ... veryslow)

        Returns:
            H.264 output format
        """
        return OutputFormat(kind="h264", crf=crf, preset=preset)

    @staticmethod
    def vp9(crf: int = 32) -> "OutputFormat":
        """VP9 output for the web."""
        return OutputFormat(kind="vp9", crf=crf)

    @staticmethod
    def copy_audio(crf: int = 18) -> "OutputFormat":
        """H.264 video with the audio stream copied untouched."""
        return OutputFormat(kind="copy_audio", crf=crf)

    def args(self) -> List[str]:
        """
        Generate FFmpeg codec arguments for this format.

        Returns:
            List of FFmpeg arguments (without the output path)
        """
        if self.kind == "h264":
            return [
                "-c:v",
                "libx264",
                "-crf",
                str(self.crf or 18),
                "-preset",
                self.preset or "medium",
                "-pix_fmt",
                "yuv420p",
            ]

        if self.kind == "vp9":
            return [
                "-c:v",
                "libvpx-vp9",
                "-crf",
                str(self.crf or 32),
                "-b:v",
                "0",  # CRF mode
            ]

        if self.kind == "copy_audio":
            return ["-c:v", "libx264", "-crf", str(self.crf or 18), "-c:a", "copy"]

        raise ValueError(f"Unknown output format: {self.kind}")
