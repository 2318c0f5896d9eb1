"""Shared test fixtures and configuration."""

import pytest
import tempfile
import os
from unittest.mock import patch
from ffmpegfilters.media import MediaContext


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield tmp_dir


@pytest.fixture
def sample_image_path(temp_dir):
    """Create a sample watermark image path (fake file for testing)."""
    image_path = os.path.join(temp_dir, "logo.png")
    with open(image_path, "wb") as f:
        f.write(b"fake image data")
    return image_path


@pytest.fixture
def missing_path(temp_dir):
    """Path inside the temp dir that does not exist."""
    return os.path.join(temp_dir, "missing.png")


@pytest.fixture
def media_context():
    """MediaContext whose FFmpeg verification is mocked out."""
    with patch("subprocess.run") as mock_run:
        mock_run.return_value.returncode = 0
        mock_run.return_value.stderr = ""
        ctx = MediaContext(ffmpeg="/usr/bin/ffmpeg", ffprobe="/usr/bin/ffprobe")
    return ctx


@pytest.fixture(autouse=True)
def clean_default_context(monkeypatch):
    """Start every test without a process-wide default context."""
    monkeypatch.setattr("ffmpegfilters.media.context._DEFAULT_CTX", None)
