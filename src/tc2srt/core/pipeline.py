from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from tc2srt.core.subtitle import render_srt
from tc2srt.core.transcript import parse_transcript
from tc2srt.infra.config import AppConfig, is_standard_frame_rate
from tc2srt.infra.storage import ensure_directory, read_transcript, write_srt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConvertRequest:
    input_path: Path
    output_path: Path | None
    config: AppConfig


@dataclass(frozen=True)
class ConvertResult:
    input_path: Path
    output_path: Path
    status: str
    message: str
    cue_count: int = 0


@dataclass(frozen=True)
class BatchRequest:
    input_dir: Path
    output_dir: Path
    config: AppConfig
    glob_pattern: str = "*.txt"


@dataclass(frozen=True)
class BatchResult:
    total: int
    succeeded: int
    failed: int
    status: str
    message: str


BatchProgressCallback = Callable[[ConvertResult], None]


def success_message(cue_count: int) -> str:
    return f"Successfully converted! Found {cue_count} subtitle entries."


def _resolve_output_path(request: ConvertRequest) -> Path:
    if request.output_path is None:
        return request.input_path.with_suffix(".srt")
    if request.output_path.is_dir():
        return request.output_path / f"{request.input_path.stem}.srt"
    return request.output_path


def warn_if_nonstandard_frame_rate(fps: float) -> None:
    if not is_standard_frame_rate(fps):
        logger.warning("Frame rate %s is not a standard rate; converting anyway.", fps)


def convert_file(request: ConvertRequest) -> ConvertResult:
    """Convert one transcript file and write the SRT next to it or to ``output_path``."""
    output_path = _resolve_output_path(request)
    try:
        raw_text = read_transcript(request.input_path, request.config.encoding)
        cues = parse_transcript(raw_text, request.config.fps)
        ensure_directory(output_path.parent)
        write_srt(render_srt(cues), output_path, request.config.encoding)
    except (OSError, ValueError) as exc:
        logger.warning("Conversion failed for %s: %s", request.input_path, exc)
        return ConvertResult(
            input_path=request.input_path,
            output_path=output_path,
            status="failed",
            message=str(exc),
        )
    logger.info("Wrote %d cues to %s", len(cues), output_path)
    return ConvertResult(
        input_path=request.input_path,
        output_path=output_path,
        status="done",
        message=success_message(len(cues)),
        cue_count=len(cues),
    )


def discover_transcripts(input_dir: Path, glob_pattern: str) -> list[Path]:
    return [
        path
        for path in sorted(input_dir.glob(glob_pattern))
        if path.is_file()
    ]


def batch_convert(
    request: BatchRequest,
    *,
    files: list[Path] | None = None,
    on_progress: BatchProgressCallback | None = None,
) -> BatchResult:
    """Convert every matching transcript in a directory into ``output_dir``.

    ``files`` skips discovery when the caller already globbed ``input_dir``.
    """
    if files is None:
        files = discover_transcripts(request.input_dir, request.glob_pattern)
    if not files:
        return BatchResult(
            total=0,
            succeeded=0,
            failed=0,
            status="failed",
            message="No input files matched the glob pattern.",
        )
    ensure_directory(request.output_dir)
    succeeded = 0
    failed = 0
    for input_path in files:
        result = convert_file(
            ConvertRequest(
                input_path=input_path,
                output_path=request.output_dir / f"{input_path.stem}.srt",
                config=request.config,
            )
        )
        if result.status == "done":
            succeeded += 1
        else:
            failed += 1
        if on_progress is not None:
            on_progress(result)

    if failed and not succeeded:
        status = "failed"
    elif failed:
        status = "partial"
    else:
        status = "done"
    message = (
        f"Batch complete: total={len(files)} succeeded={succeeded} failed={failed}."
    )
    return BatchResult(
        total=len(files),
        succeeded=succeeded,
        failed=failed,
        status=status,
        message=message,
    )
