from __future__ import annotations

from datetime import date
from pathlib import Path

from tc2srt.infra.config import DEFAULT_ENCODING, SUPPORTED_INPUT_SUFFIXES


def ensure_directory(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def is_supported_transcript(path: Path) -> bool:
    return path.suffix.lower() in SUPPORTED_INPUT_SUFFIXES


def read_transcript(path: Path, encoding: str = DEFAULT_ENCODING) -> str:
    if not is_supported_transcript(path):
        raise ValueError("Please upload a .txt file only.")
    return path.read_text(encoding=encoding)


def write_srt(content: str, output_path: Path, encoding: str = DEFAULT_ENCODING) -> None:
    """Write an SRT document, ending it with a single newline."""
    output_path.write_text(content.rstrip() + "\n", encoding=encoding)


def default_output_name(today: date | None = None) -> str:
    stamp = (today or date.today()).isoformat()
    return f"subtitles_{stamp}.srt"
