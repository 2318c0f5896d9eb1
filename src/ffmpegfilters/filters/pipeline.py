"""Filter pipeline: orders filters by priority and concatenates their arguments."""

import logging
import re
from typing import Iterator, List, Optional, Sequence, Tuple, Union
from .base import Filter
from .models import ToolVersionError
from ..media.context import InvocationResult, MediaContext, default_context
from ..media.formats import OutputFormat
from ..media.video import AdvancedMedia, Video

logger = logging.getLogger(__name__)

# Release builds look like "6.1.1", "n6.1" or "4.4.2-0ubuntu0.22.04.1"
_RELEASE_RE = re.compile(r"^n?(\d+(?:\.\d+)*)")


def parse_version(version: str) -> Optional[Tuple[int, ...]]:
    """
    Parse an FFmpeg version string into a comparable tuple.

    Returns:
        e.g. (4, 4, 2), or None for git snapshots and other unparsable versions
    """
    m = _RELEASE_RE.match(version.strip())
    if not m:
        return None
    return tuple(int(part) for part in m.group(1).split("."))


def version_at_least(found: str, required: str) -> Optional[bool]:
    """Whether ``found`` >= ``required``; None if either cannot be parsed."""
    found_v, required_v = parse_version(found), parse_version(required)
    if found_v is None or required_v is None:
        return None
    return found_v >= required_v


def check_tool_version(
    filters: Sequence[Filter],
    tool_version: str,
    strict: bool = False,
    log: Optional[logging.Logger] = None,
) -> None:
    """
    Compare each filter's minimum FFmpeg version against the target tool.

    Args:
        filters: Filters to check
        tool_version: Version of the FFmpeg that will run the command
        strict: Raise instead of warning
        log: Logger for warnings

    Raises:
        ToolVersionError: In strict mode, for the first unsupported filter
    """
    log = log or logger
    for f in filters:
        supported = version_at_least(tool_version, f.minimum_tool_version)
        if supported is None:
            log.debug(
                f"Cannot compare FFmpeg {tool_version} with {f.minimum_tool_version} "
                f"for filter '{f.name}'"
            )
            continue
        if supported:
            continue

        message = (
            f"Filter '{f.name}' requires FFmpeg >= {f.minimum_tool_version}, "
            f"found {tool_version}"
        )
        if strict:
            raise ToolVersionError(
                message, required=f.minimum_tool_version, found=tool_version
            )
        log.warning(message)


def ordered_filters(
    filters: Sequence[Filter],
    tool_version: Optional[str] = None,
    strict: bool = False,
    log: Optional[logging.Logger] = None,
) -> List[Filter]:
    """
    Sort filters for emission and check them against the target FFmpeg.

    Ascending priority; filters with equal priority keep their insertion order.
    """
    ordered = sorted(filters, key=lambda f: f.priority)
    if tool_version:
        check_tool_version(ordered, tool_version, strict, log)
    return ordered


def compile_filters(
    filters: Sequence[Filter],
    fmt: Optional[OutputFormat] = None,
    tool_version: Optional[str] = None,
    strict: bool = False,
    log: Optional[logging.Logger] = None,
) -> List[str]:
    """
    Compile filters into one flat argument list.

    Filters are stably sorted by ascending priority and their fragments
    concatenated in that order. Graph labels such as ``[in]``/``[out]`` are
    not renamed; keeping them apart across filters is up to the caller.

    Args:
        filters: Filters in insertion order
        fmt: Target output format passed to every filter
        tool_version: FFmpeg version to check minimum versions against
        strict: Raise ToolVersionError instead of warning on old FFmpeg
        log: Logger for version warnings

    Returns:
        Flat list of FFmpeg arguments
    """
    argv: List[str] = []
    for f in ordered_filters(filters, tool_version, strict, log):
        argv.extend(f.compile_fragment(fmt))
    return argv


class FilterPipeline:
    """Ordered collection of filters applied to one FFmpeg command."""

    def __init__(self, ctx: Optional[MediaContext] = None):
        """
        Initialize pipeline.

        Args:
            ctx: Media context; the default context is used when a command is built
        """
        self._ctx = ctx
        self._filters: List[Filter] = []

    @property
    def ctx(self) -> MediaContext:
        if self._ctx is None:
            self._ctx = default_context()
        return self._ctx

    def _logger(self) -> logging.Logger:
        return self._ctx.logger if self._ctx is not None else logger

    def add(self, f: Filter) -> "FilterPipeline":
        """Add a filter to the pipeline."""
        self._filters.append(f)
        return self

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[Filter]:
        return iter(self._filters)

    def compile(
        self,
        fmt: Optional[OutputFormat] = None,
        tool_version: Optional[str] = None,
        strict: bool = False,
    ) -> List[str]:
        """Compile all filters into a flat argument list (see compile_filters)."""
        return compile_filters(
            self._filters, fmt, tool_version, strict, log=self._logger()
        )

    def build_argv(
        self,
        source: Union[Video, AdvancedMedia, str],
        out_path: str,
        fmt: Optional[OutputFormat] = None,
        tool_version: Optional[str] = None,
        strict: bool = False,
    ) -> List[str]:
        """
        Build a complete FFmpeg command.

        A Video (or plain path) goes through each filter's single-input
        ``apply``; an AdvancedMedia goes through ``apply_complex``.

        Args:
            source: Input video, path, or multi-input media
            out_path: Output file path
            fmt: Output format (defaults to the media's format, if any)
            tool_version: FFmpeg version to check minimum versions against
            strict: Raise ToolVersionError instead of warning on old FFmpeg

        Returns:
            FFmpeg argument list, binary first
        """
        ordered = ordered_filters(
            self._filters, tool_version, strict, self._logger()
        )

        argv = [self.ctx.ffmpeg, "-y"]

        if isinstance(source, AdvancedMedia):
            fmt = fmt or source.fmt
            argv.extend(source.input_args())
            for f in ordered:
                argv.extend(f.apply_complex(source))
        else:
            video = source if isinstance(source, Video) else Video.open(source)
            argv.extend(["-i", video.src])
            for f in ordered:
                argv.extend(f.apply(video, fmt))

        if fmt is not None:
            argv.extend(fmt.args())
        argv.append(out_path)
        return argv

    def dry_run(
        self,
        source: Union[Video, AdvancedMedia, str],
        out_path: str = "OUT.mp4",
        fmt: Optional[OutputFormat] = None,
    ) -> str:
        """
        Generate the FFmpeg command without executing it.

        Returns:
            FFmpeg command string
        """
        return " ".join(self.build_argv(source, out_path, fmt))

    def run(
        self,
        source: Union[Video, AdvancedMedia, str],
        out_path: str,
        fmt: Optional[OutputFormat] = None,
        strict: bool = False,
    ) -> InvocationResult:
        """
        Build the command and execute it with the context's invoker.

        Raises:
            ToolVersionError: In strict mode, if FFmpeg is too old for a filter
            RuntimeError: If FFmpeg fails
        """
        ctx = self.ctx
        argv = self.build_argv(
            source, out_path, fmt, tool_version=ctx.ffmpeg_version(), strict=strict
        )
        result = ctx.invoker.run(argv)
        if not result.ok:
            raise RuntimeError(f"FFmpeg failed: {result.stderr}")

        ctx.logger.info("FFmpeg completed successfully")
        return result
