"""Tests for media context, invoker, assets and output formats."""

import json
import logging
import subprocess
import pytest
from unittest.mock import Mock, patch
from ffmpegfilters.media import (
    AdvancedMedia,
    InvocationResult,
    Invoker,
    MediaAsset,
    MediaContext,
    OutputFormat,
    Video,
    default_context,
    set_default_context,
)


class TestMediaContext:
    """Test MediaContext class."""

    def test_init_default(self):
        """Test default initialization."""
        with patch("subprocess.run") as mock_run:
            mock_run.return_value.returncode = 0
            mock_run.return_value.stderr = ""

            ctx = MediaContext()
            assert ctx.ffmpeg == "ffmpeg"
            assert ctx.ffprobe == "ffprobe"
            assert isinstance(ctx.invoker, Invoker)
            assert mock_run.call_count == 2

    def test_custom_logger_shared_with_invoker(self):
        """The invoker logs through the context logger."""
        logger = logging.getLogger("custom")
        with patch("subprocess.run") as mock_run:
            mock_run.return_value.returncode = 0
            ctx = MediaContext(logger=logger)
        assert ctx.logger is logger
        assert ctx.invoker.logger is logger

    def test_ffmpeg_missing(self):
        """Missing binary raises RuntimeError."""
        with patch("subprocess.run", side_effect=FileNotFoundError("ffmpeg")):
            with pytest.raises(RuntimeError, match="FFmpeg not found"):
                MediaContext()

    def test_ffmpeg_broken(self):
        """Non-zero -version exit raises RuntimeError."""
        with patch("subprocess.run") as mock_run:
            mock_run.return_value.returncode = 1
            mock_run.return_value.stderr = "bad build"
            with pytest.raises(RuntimeError, match="FFmpeg not working"):
                MediaContext()

    def test_verification_timeout(self):
        """Timeouts raise RuntimeError."""
        with patch(
            "subprocess.run", side_effect=subprocess.TimeoutExpired("ffmpeg", 10)
        ):
            with pytest.raises(RuntimeError, match="timed out"):
                MediaContext()

    def test_ffmpeg_version(self, media_context):
        """Version is parsed from -version output and cached."""
        with patch("subprocess.run") as mock_run:
            mock_run.return_value.returncode = 0
            mock_run.return_value.stdout = (
                "ffmpeg version 6.1.1-3ubuntu5 Copyright (c) 2000-2023\n"
            )
            assert media_context.ffmpeg_version() == "6.1.1-3ubuntu5"
            assert media_context.ffmpeg_version() == "6.1.1-3ubuntu5"
            assert mock_run.call_count == 1

    def test_ffmpeg_version_unparsable(self, media_context):
        """Unknown output gives None."""
        with patch("subprocess.run") as mock_run:
            mock_run.return_value.stdout = "something else"
            assert media_context.ffmpeg_version() is None

    def test_default_context(self, media_context):
        """The default context can be replaced."""
        set_default_context(media_context)
        assert default_context() is media_context

    def test_default_context_does_not_leak(self):
        """A default set by an earlier test is gone; a fresh one is built lazily."""
        with patch("subprocess.run") as mock_run:
            mock_run.return_value.returncode = 0
            mock_run.return_value.stderr = ""
            ctx = default_context()
        assert ctx.ffmpeg == "ffmpeg"
        assert mock_run.call_count == 2


class TestInvoker:
    """Test Invoker class."""

    def test_run_captures_output(self):
        """Return code and output are captured."""
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=0, stdout="out", stderr="err")
            result = Invoker().run(["ffmpeg", "-i", "in.mp4", "out.mp4"])

        assert result == InvocationResult(returncode=0, stdout="out", stderr="err")
        assert result.ok
        args, kwargs = mock_run.call_args
        assert args[0] == ["ffmpeg", "-i", "in.mp4", "out.mp4"]
        assert kwargs["capture_output"] is True

    def test_run_nonzero_is_returned(self):
        """Failures are reported, not raised."""
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=1, stdout="", stderr="bad")
            result = Invoker().run(["ffmpeg"])
        assert not result.ok
        assert result.stderr == "bad"

    def test_run_missing_binary(self):
        """A missing binary raises RuntimeError."""
        with patch("subprocess.run", side_effect=FileNotFoundError("ffmpeg")):
            with pytest.raises(RuntimeError, match="FFmpeg not found"):
                Invoker().run(["ffmpeg"])


class TestMediaAsset:
    """Test MediaAsset probing."""

    def test_probe(self, media_context):
        """Dimensions and duration come from the first video stream."""
        data = {
            "streams": [
                {"codec_type": "audio", "duration": "9.0"},
                {"codec_type": "video", "width": 1920, "height": 1080},
            ],
            "format": {"duration": "12.5"},
        }
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=0, stdout=json.dumps(data))
            asset = MediaAsset.probe("in.mp4", media_context)

        assert asset == MediaAsset(
            path="in.mp4", width=1920, height=1080, duration=12.5
        )
        assert mock_run.call_args[0][0][0] == "/usr/bin/ffprobe"

    def test_probe_failure(self, media_context):
        """A failed probe leaves fields unset."""
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=1, stdout="", stderr="nope")
            asset = MediaAsset.probe("in.mp4", media_context)
        assert asset.width is None
        assert asset.duration is None

    def test_video_asset(self, media_context):
        """Video.asset() probes with the given context."""
        data = {"streams": [{"codec_type": "video", "width": 640, "height": 360, "duration": "3"}]}
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=0, stdout=json.dumps(data))
            asset = Video.open("clip.mp4").asset(media_context)
        assert (asset.width, asset.height, asset.duration) == (640, 360, 3.0)


class TestOutputFormat:
    """Test OutputFormat class."""

    def test_h264_default(self):
        """Test H.264 defaults."""
        fmt = OutputFormat.h264()
        assert fmt.kind == "h264"
        assert fmt.crf == 18
        assert fmt.preset == "medium"

    def test_args_h264(self):
        """Test H.264 FFmpeg args generation."""
        assert OutputFormat.h264(crf=20, preset="fast").args() == [
            "-c:v",
            "libx264",
            "-crf",
            "20",
            "-preset",
            "fast",
            "-pix_fmt",
            "yuv420p",
        ]

    def test_args_vp9(self):
        """Test VP9 FFmpeg args generation."""
        assert OutputFormat.vp9(crf=30).args() == [
            "-c:v",
            "libvpx-vp9",
            "-crf",
            "30",
            "-b:v",
            "0",
        ]

    def test_args_copy_audio(self):
        """Audio is copied untouched."""
        fmt = OutputFormat.copy_audio()
        assert fmt.kind == "copy_audio"
        args = fmt.args()
        assert args[-2:] == ["-c:a", "copy"]


class TestAdvancedMedia:
    """Test AdvancedMedia class."""

    def test_input_args(self):
        """Every input gets its own -i."""
        media = AdvancedMedia(inputs=["a.mp4", "b.png"])
        assert media.input_args() == ["-i", "a.mp4", "-i", "b.png"]
        assert media.fmt is None
