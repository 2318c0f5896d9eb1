#!/usr/bin/env python3
"""
Basic usage example for ffmpegfilters.

This example demonstrates:
1. Configuring a watermark in the bottom-right corner
2. Showing it only between seconds 1 and 4
3. Printing and running the final FFmpeg command
"""

import logging
import sys
from ffmpegfilters import (
    CoordinateSpec,
    FilterPipeline,
    InvalidConfiguration,
    OutputFormat,
    TimeWindow,
    Video,
    WatermarkFilter,
)


def main():
    """Run basic usage example."""
    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) < 3:
        print("Usage: basic_usage.py INPUT.mp4 LOGO.png [OUTPUT.mp4]")
        return

    input_path, logo_path = sys.argv[1], sys.argv[2]
    output_path = sys.argv[3] if len(sys.argv) > 3 else "watermarked.mp4"

    try:
        watermark = WatermarkFilter(
            logo_path,
            coordinates=CoordinateSpec.relative(bottom=10, right=10),
            scale={"w": 64, "h": 64},
            time=TimeWindow(start=1, end=4),
        )
    except InvalidConfiguration as e:
        print(f"Cannot use watermark: {e}")
        return

    pipeline = FilterPipeline().add(watermark)
    video = Video.open(input_path)
    fmt = OutputFormat.h264(crf=20)

    print(f"Command: {pipeline.dry_run(video, output_path, fmt)}")
    pipeline.run(video, output_path, fmt)

    print("✅ Watermark applied!")
    print(f"Output saved to: {output_path}")


if __name__ == "__main__":
    main()
