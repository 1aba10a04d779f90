"""Command-line interface entrypoint for mtailf."""

from __future__ import annotations

import signal
import sys
from typing import Optional, Tuple

import click
from pydantic import ValidationError

from mtailf import __version__
from mtailf.config import get_config
from mtailf.errors import FileOpenError
from mtailf.follow import PollCycleDriver, RunConfig, close_files, open_files
from mtailf.utils.logs import setup_logging
from mtailf.utils.paths import expand_pattern


def decode_marker(value: str) -> bytes:
    """Turn ``\\n``, ``\\0``, ``\\x1e`` or a literal character into one byte."""
    try:
        decoded = value.encode("utf-8").decode("unicode_escape")
    except UnicodeDecodeError as e:
        raise ValueError(f"invalid escape in {value!r}") from e
    if len(decoded) != 1 or ord(decoded) > 0xFF:
        raise ValueError(f"{value!r} is not a single byte")
    return bytes([ord(decoded)])


class LineCountType(click.ParamType):
    """``k`` for the last k lines, ``+k`` to replay from the start."""

    name = "[+]lines"

    def convert(self, value, param, ctx) -> Tuple[int, bool]:
        if isinstance(value, tuple):
            return value
        text = str(value).strip()
        from_start = text.startswith("+")
        if from_start:
            text = text[1:]
        try:
            count = int(text)
        except ValueError:
            self.fail(f"{value!r} is not a line count", param, ctx)
        if count < 0:
            self.fail(f"{value!r} must not be negative", param, ctx)
        return count, from_start


class MarkerByteType(click.ParamType):
    name = "char"

    def convert(self, value, param, ctx) -> bytes:
        if isinstance(value, bytes):
            return value
        try:
            return decode_marker(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


def build_run_config(
    *,
    lines: Optional[Tuple[int, bool]],
    delay: Optional[float],
    pid: int,
    quiet: bool,
    pattern: Optional[str],
    delimiter: Optional[bytes],
    sentinel: Optional[bytes],
    verbose: bool,
    files: Tuple[str, ...],
) -> RunConfig:
    """Merge flags with configured defaults into a validated RunConfig.

    Raises:
        click.UsageError: If the resulting configuration is not usable.
    """
    defaults = get_config().defaults

    paths = list(files)
    if pattern:
        matches = expand_pattern(pattern)
        if not matches:
            raise click.UsageError(f"glob: {pattern} Input files not found")
        paths.extend(matches)
    if not paths:
        raise click.UsageError("No files to follow.")

    count, from_start = lines if lines is not None else (defaults.lines, False)
    try:
        return RunConfig(
            lines=count,
            from_start=from_start,
            delay=delay if delay is not None else defaults.delay,
            delimiter=delimiter if delimiter is not None else decode_marker(defaults.delimiter),
            sentinel=sentinel if sentinel is not None else decode_marker(defaults.sentinel),
            watch_pid=pid,
            quiet=quiet or defaults.quiet,
            verbose=verbose,
            paths=tuple(paths),
        )
    except (ValidationError, ValueError) as e:
        raise click.UsageError(str(e)) from e


@click.command(name="mtailf")
@click.option("-n", "lines", type=LineCountType(), default=None, help="Print the last N lines first; +N replays from the start.")
@click.option("-s", "delay", type=float, default=None, help="Seconds to sleep between polls.")
@click.option("-p", "pid", type=int, default=0, help="Stop once this pid is no longer alive.")
@click.option("-q", "quiet", is_flag=True, help="Never print file name headers.")
@click.option("-r", "pattern", default=None, help="Follow files matching this glob pattern.")
@click.option("-d", "delimiter", type=MarkerByteType(), default=None, help="Line delimiter (default \\n).")
@click.option("-x", "sentinel", type=MarkerByteType(), default=None, help="End-marker byte filling the unwritten region (default \\0).")
@click.option("-v", "verbose", is_flag=True, help="Print diagnostics to stderr.")
@click.version_option(__version__, prog_name="mtailf")
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False))
@click.pass_context
def cli(
    ctx: click.Context,
    lines: Optional[Tuple[int, bool]],
    delay: Optional[float],
    pid: int,
    quiet: bool,
    pattern: Optional[str],
    delimiter: Optional[bytes],
    sentinel: Optional[bytes],
    verbose: bool,
    files: Tuple[str, ...],
) -> None:
    """Follow FILES that are pre-allocated and filled with NUL bytes.

    New text is found at the edge where written content meets the padding,
    so files that never change size can still be followed. Press Ctrl-C to stop.

    Examples:
        mtailf /dev/shm/app.log
        mtailf -n 50 -s 0.5 -r '/var/log/app/*.mmap'
    """
    try:
        run_config = build_run_config(
            lines=lines,
            delay=delay,
            pid=pid,
            quiet=quiet,
            pattern=pattern,
            delimiter=delimiter,
            sentinel=sentinel,
            verbose=verbose,
            files=files,
        )
        setup_logging(get_config().logging.log_level, verbose=run_config.verbose)
        tailed_files = open_files(run_config.paths, run_config)
    except KeyboardInterrupt:
        return
    except FileOpenError as e:
        click.echo(str(e), err=True)
        ctx.exit(1)

    try:
        PollCycleDriver(tailed_files, run_config).run()
    except KeyboardInterrupt:
        pass
    except FileOpenError as e:
        click.echo(str(e), err=True)
        ctx.exit(1)
    finally:
        close_files(tailed_files)


def _raise_interrupt(signum, frame) -> None:
    raise KeyboardInterrupt


def main() -> None:
    signal.signal(signal.SIGTERM, _raise_interrupt)
    cli()


if __name__ == "__main__":
    main()
