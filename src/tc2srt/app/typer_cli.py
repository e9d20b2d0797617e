from __future__ import annotations

import math
from pathlib import Path

import typer
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

from tc2srt.core.errors import ConversionError
from tc2srt.core.pipeline import (
    BatchRequest,
    ConvertRequest,
    ConvertResult,
    batch_convert,
    convert_file,
    discover_transcripts,
    success_message,
    warn_if_nonstandard_frame_rate,
)
from tc2srt.core.subtitle import render_srt
from tc2srt.core.transcript import parse_transcript
from tc2srt.infra.config import (
    SUPPORTED_FRAME_RATES,
    AppConfig,
    build_app_config,
    resolve_frame_rate,
    resolve_log_level,
)
from tc2srt.infra.logging import setup_logging
from tc2srt.infra.storage import (
    default_output_name,
    ensure_directory,
    read_transcript,
    write_srt,
)

STDIN_MARKER = "-"

app = typer.Typer(
    name="tc2srt",
    add_completion=False,
    help="Convert timecoded transcripts (HH;MM;SS;FF - HH;MM;SS;FF) into SRT subtitles.",
)


def _build_config(fps: str | None, encoding: str | None) -> AppConfig:
    try:
        config = build_app_config(fps=fps, encoding=encoding)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--fps") from exc
    warn_if_nonstandard_frame_rate(config.fps)
    return config


def _fail(message: str) -> typer.Exit:
    typer.echo(f"[failed] {message}", err=True)
    return typer.Exit(code=2)


def _convert_text(raw_text: str, config: AppConfig) -> tuple[str, int]:
    try:
        cues = parse_transcript(raw_text, config.fps)
    except ConversionError as exc:
        raise _fail(str(exc)) from exc
    return render_srt(cues), len(cues)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging on stderr."
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="DEBUG|INFO|WARNING|ERROR (default: TC2SRT_LOG_LEVEL or WARNING)."
    ),
) -> None:
    try:
        level = resolve_log_level(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    setup_logging("DEBUG" if verbose else level)


@app.command("convert")
def convert_command(
    input_path: Path = typer.Argument(
        ..., help="Transcript .txt file, or '-' to read from stdin."
    ),
    output_path: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output .srt path or directory (default: input path with .srt suffix).",
    ),
    fps: str | None = typer.Option(
        None,
        "--fps",
        "-f",
        help="Frame rate, e.g. 23.976, 24, 25, 29.97 (default: TC2SRT_FPS or 24).",
    ),
    to_stdout: bool = typer.Option(
        False, "--stdout", help="Print the SRT document instead of writing a file."
    ),
    encoding: str | None = typer.Option(
        None, "--encoding", help="Text encoding for input and output (default: utf-8)."
    ),
) -> None:
    """Convert a single transcript."""
    config = _build_config(fps, encoding)

    if str(input_path) == STDIN_MARKER:
        raw_text = typer.get_text_stream("stdin").read()
        document, cue_count = _convert_text(raw_text, config)
        if output_path is None or to_stdout:
            typer.echo(document)
            typer.echo(success_message(cue_count), err=True)
            return
        if output_path.is_dir():
            output_path = output_path / default_output_name()
        ensure_directory(output_path.parent)
        write_srt(document, output_path, config.encoding)
        typer.echo(f"[done] {success_message(cue_count)}\n- output: {output_path}")
        return

    if not input_path.exists() or not input_path.is_file():
        raise typer.BadParameter(f"Input not found: {input_path}")

    if to_stdout:
        try:
            raw_text = read_transcript(input_path, config.encoding)
        except (OSError, ValueError) as exc:
            raise _fail(str(exc)) from exc
        document, cue_count = _convert_text(raw_text, config)
        typer.echo(document)
        typer.echo(success_message(cue_count), err=True)
        return

    result = convert_file(
        ConvertRequest(input_path=input_path, output_path=output_path, config=config)
    )
    if result.status == "failed":
        raise _fail(result.message)
    typer.echo(
        f"[{result.status}] {result.message}\n"
        f"- input: {result.input_path}\n"
        f"- output: {result.output_path}\n"
        f"- fps: {config.fps:g}"
    )


@app.command("batch")
def batch_command(
    input_dir: Path = typer.Argument(..., help="Directory containing transcripts."),
    output_dir: Path = typer.Option(
        Path("./outputs"), "--output-dir", "-o", help="Directory for .srt files."
    ),
    glob_pattern: str = typer.Option(
        "*.txt", "--glob", help="Glob pattern to select transcripts (default: *.txt)."
    ),
    fps: str | None = typer.Option(
        None, "--fps", "-f", help="Frame rate applied to every transcript."
    ),
    encoding: str | None = typer.Option(
        None, "--encoding", help="Text encoding for input and output (default: utf-8)."
    ),
) -> None:
    """Convert every transcript in a directory."""
    if not input_dir.exists() or not input_dir.is_dir():
        raise typer.BadParameter(f"Input directory not found: {input_dir}")
    config = _build_config(fps, encoding)
    request = BatchRequest(
        input_dir=input_dir,
        output_dir=output_dir,
        glob_pattern=glob_pattern,
        config=config,
    )

    files = discover_transcripts(input_dir, glob_pattern)
    failures: list[ConvertResult] = []
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        transient=False,
    ) as progress:
        task_id = progress.add_task(description="Converting transcripts...", total=len(files))

        def _progress_log(result: ConvertResult) -> None:
            if result.status == "failed":
                failures.append(result)
            progress.update(task_id, advance=1)

        result = batch_convert(request, files=files, on_progress=_progress_log)

    lines = [
        f"[{result.status}] {result.message}",
        f"- files discovered: {result.total}",
        f"- succeeded: {result.succeeded}",
        f"- failed: {result.failed}",
    ]
    lines.extend(f"  - {failure.input_path}: {failure.message}" for failure in failures)
    typer.echo("\n".join(lines))
    if result.status == "failed":
        raise typer.Exit(code=2)


@app.command("frame-rates")
def frame_rates_command() -> None:
    """List the recognized frame rates."""
    try:
        default_fps = resolve_frame_rate()
    except ValueError as exc:
        raise _fail(str(exc)) from exc
    for rate in SUPPORTED_FRAME_RATES:
        marker = " (default)" if math.isclose(rate, default_fps) else ""
        typer.echo(f"{rate:g}{marker}")


def run() -> None:
    """Console-script entrypoint."""
    app()
