"""Media runtime context: FFmpeg binaries, logging and command execution."""

import logging
import re
import subprocess
from pydantic import BaseModel
from typing import List, Optional

_VERSION_RE = re.compile(r"ffmpeg version (\S+)")


class InvocationResult(BaseModel):
    """Exit status and captured output of one FFmpeg run."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class Invoker:
    """Runs a finished FFmpeg argument list."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        timeout: Optional[float] = None,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.timeout = timeout

    def run(self, argv: List[str]) -> InvocationResult:
        """
        Execute a command and capture its output.

        Args:
            argv: Complete argument list, binary first

        Returns:
            InvocationResult with return code, stdout and stderr

        Raises:
            RuntimeError: If the binary is missing or the run times out
        """
        self.logger.info(f"Running FFmpeg: {' '.join(argv)}")
        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                stdin=subprocess.DEVNULL,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise RuntimeError(f"FFmpeg not found. Please install FFmpeg: {e}")
        except subprocess.TimeoutExpired:
            raise RuntimeError(f"FFmpeg timed out after {self.timeout}s")

        if result.returncode != 0:
            self.logger.debug(f"FFmpeg exited with {result.returncode}: {result.stderr}")
        return InvocationResult(
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )


class MediaContext:
    """Context for media operations with FFmpeg."""

    def __init__(
        self,
        ffmpeg: str = "ffmpeg",
        ffprobe: str = "ffprobe",
        logger: Optional[logging.Logger] = None,
        invoker: Optional[Invoker] = None,
    ):
        """
        Initialize media context.

        Args:
            ffmpeg: Path to ffmpeg binary
            ffprobe: Path to ffprobe binary
            logger: Logger instance for debugging
            invoker: Command runner (defaults to one sharing this logger)
        """
        self.ffmpeg = ffmpeg
        self.ffprobe = ffprobe
        self.logger = logger or logging.getLogger(__name__)
        self.invoker = invoker or Invoker(self.logger)
        self._version: Optional[str] = None

        # Verify FFmpeg is available
        self._verify_ffmpeg()

    def _verify_ffmpeg(self) -> None:
        """Verify that FFmpeg binaries are available."""
        try:
            result = subprocess.run(
                [self.ffmpeg, "-version"], capture_output=True, text=True, timeout=10
            )
            if result.returncode != 0:
                raise RuntimeError(f"FFmpeg not working: {result.stderr}")

            result = subprocess.run(
                [self.ffprobe, "-version"], capture_output=True, text=True, timeout=10
            )
            if result.returncode != 0:
                raise RuntimeError(f"FFprobe not working: {result.stderr}")

            self.logger.debug("FFmpeg binaries verified successfully")

        except FileNotFoundError as e:
            raise RuntimeError(f"FFmpeg not found. Please install FFmpeg: {e}")
        except subprocess.TimeoutExpired:
            raise RuntimeError("FFmpeg verification timed out")

    def ffmpeg_version(self) -> Optional[str]:
        """
        Get the FFmpeg version string (e.g. ``"6.1.1"``), cached after the first call.

        Returns:
            Version string, or None if it cannot be determined
        """
        if self._version is not None:
            return self._version

        try:
            result = subprocess.run(
                [self.ffmpeg, "-version"], capture_output=True, text=True, timeout=10
            )
        except (FileNotFoundError, subprocess.TimeoutExpired) as e:
            self.logger.warning(f"Could not determine FFmpeg version: {e}")
            return None

        m = _VERSION_RE.search(result.stdout or "")
        if not m:
            self.logger.warning("Could not parse FFmpeg version output")
            return None

        self._version = m.group(1)
        self.logger.debug(f"FFmpeg version: {self._version}")
        return self._version


# Global default context
_DEFAULT_CTX: Optional[MediaContext] = None


def default_context() -> MediaContext:
    """
    Get the default media context.

    Returns:
        Default MediaContext instance
    """
    global _DEFAULT_CTX
    if _DEFAULT_CTX is None:
        _DEFAULT_CTX = MediaContext()
    return _DEFAULT_CTX


def set_default_context(ctx: MediaContext) -> None:
    """
    Set the default media context.

    Args:
        ctx: MediaContext to use as default
    """
    global _DEFAULT_CTX
    _DEFAULT_CTX = ctx
