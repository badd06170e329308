import sys
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
from typing import BinaryIO, Callable, Iterator, Optional, TextIO

from sizefill.content.providers import ContentProvider
from sizefill.core.config import get_settings
from sizefill.core.logging import get_logger

log = get_logger("generator")

STDOUT_PATH = "-"
OVERWRITE_PROMPT = (
    "The file you are trying to create already exists.\n"
    "Do you want to overwrite it? [y/N]: "
)
CONFIRM_ANSWERS = ("y", "j")


class OverwriteDeclined(Exception):
    pass


@dataclass
class GenerationReport:
    path: str
    size: int
    elapsed_seconds: float

    @property
    def elapsed_text(self) -> str:
        elapsed_ms = int(self.elapsed_seconds * 1000)
        seconds, millis = divmod(elapsed_ms, 1000)
        return f"{seconds}s and {millis}ms"


def confirm_overwrite(prompt: Optional[Callable[[str], str]] = None) -> bool:
    try:
        answer = (prompt or input)(OVERWRITE_PROMPT)
    except EOFError:
        # Closed stdin reads as an empty answer
        answer = ""
    return (answer or "").strip().lower() in CONFIRM_ANSWERS


@contextmanager
def open_destination(
    path: str,
    overwrite: bool = False,
    prompt: Optional[Callable[[str], str]] = None,
) -> Iterator[BinaryIO]:
    """Yield a binary stream for ``path``; "-" is standard output.

    Parent directories are created. An existing file is only replaced when
    ``overwrite`` is set or the user confirms; otherwise OverwriteDeclined.
    """
    if path == STDOUT_PATH:
        stream = sys.stdout.buffer
        yield stream
        stream.flush()
        return

    target = Path(path)
    if target.parent and not target.parent.exists():
        target.parent.mkdir(parents=True, exist_ok=True)

    if target.is_file() and not overwrite:
        if not confirm_overwrite(prompt):
            raise OverwriteDeclined(path)
        log.info(f"Overwriting existing file {path}")

    with target.open("wb") as f:
        yield f


def write_content(
    stream: BinaryIO,
    size: int,
    provider: ContentProvider,
    buffer_size: Optional[int] = None,
    progress: Optional[TextIO] = None,
) -> int:
    """Write ``size`` bytes from ``provider`` in batches and return the bytes written."""
    buffer_size = buffer_size or get_settings().buffer_size
    bytes_left = size
    last_pct = -1
    while bytes_left > 0:
        batch_size = min(bytes_left, buffer_size)
        stream.write(provider.fill(batch_size))
        bytes_left -= batch_size

        if progress is not None:
            pct = (size - bytes_left) * 100 // size
            if pct != last_pct:
                progress.write(f"\rProgress: {pct}%")
                progress.flush()
                last_pct = pct
    if progress is not None and size > 0:
        progress.write("\n")
    return size - bytes_left


def generate_file(
    path: str,
    size: int,
    provider: ContentProvider,
    overwrite: bool = False,
    buffer_size: Optional[int] = None,
    prompt: Optional[Callable[[str], str]] = None,
    progress: Optional[TextIO] = None,
) -> GenerationReport:
    if progress is None:
        progress = sys.stderr
    log.info(f"Generating {size} bytes into {path} using {type(provider).__name__}")
    with open_destination(path, overwrite=overwrite, prompt=prompt) as stream:
        progress.write("Generating file...\n")
        t0 = perf_counter()
        written = write_content(stream, size, provider, buffer_size=buffer_size, progress=progress)
        report = GenerationReport(path=path, size=written, elapsed_seconds=perf_counter() - t0)
    progress.write(f"All done! ({report.elapsed_text})\n")
    return report
