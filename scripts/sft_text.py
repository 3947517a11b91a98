#!/usr/bin/env -S uv run --script
# /// script
# requires-python = ">=3.11"
# dependencies = ["fastmcp"]
# ///
"""Line and byte extraction over files or stdin: tail, head, wc, cut.

Usage:
    sft_text.py tail [-n SPEC | -c SPEC] [-q] [FILE ...]
    sft_text.py head [-n N | -c N] [-q] [FILE ...]
    sft_text.py wc [-l] [-w] [-c | -m] [FILE ...]
    sft_text.py cut (-b LIST | -c LIST | -f LIST) [-d DELIM] [FILE ...]
    sft_text.py mcp-stdio

Examples:
    sft_text.py tail -n +3 notes.txt        # from line 3 to the end
    sft_text.py tail -c 24 a.log b.log      # last 24 bytes of each, with headers
    cat notes.txt | sft_text.py wc -l
    sft_text.py cut -d , -f 1,3- data.csv  # first field and third onward
"""

import argparse
import codecs
import io
import os
import re
import shutil
import sys
import tempfile
import time
from contextlib import contextmanager, nullcontext
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, NamedTuple, TextIO


# =============================================================================
# LOGGING
# =============================================================================
_LEVELS = {"TRACE": 5, "DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40, "FATAL": 50}
_THRESHOLD = _LEVELS.get(os.environ.get("SFB_LOG_LEVEL", "INFO"), 20)
_LOG_DIR = os.environ.get("SFB_LOG_DIR", "")
_SCRIPT = Path(__file__).stem
_LOG = (
    Path(_LOG_DIR) / f"{_SCRIPT}_log.tsv"
    if _LOG_DIR
    else Path(__file__).parent / f"{_SCRIPT}_log.tsv"
)
_HEADER = "#timestamp\tscript\tlevel\tevent\tmessage\tdetail\tmetrics\ttrace\n"


def _log(
    level: str,
    event: str,
    msg: str,
    *,
    detail: str = "",
    metrics: str = "",
    trace: str = "",
):
    """Append TSV log line. Logging never crashes the main flow."""
    if _LEVELS.get(level, 20) < _THRESHOLD:
        return
    try:
        ts = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")
        write_header = not _LOG.exists()
        with open(_LOG, "a") as f:
            if write_header:
                f.write(_HEADER)
            f.write(f"{ts}\t{_SCRIPT}\t{level}\t{event}\t{msg}\t{detail}\t{metrics}\t{trace}\n")
    except Exception:
        pass


# =============================================================================
# CONFIGURATION
# =============================================================================
EXPOSED = ["tail", "head", "wc", "cut"]  # CLI + MCP — both interfaces

CONFIG = {
    "version": "1.0.0",
    "default_lines": "10",
    "header": "==> {name} <==",
    "chunk_size": 64 * 1024,
    "spool_max_bytes": 8 * 1024 * 1024,
    "wc_width": 8,
    "cut_delimiter": "\t",
}

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_COUNT_RE = re.compile(r"([+-]?)(\d+)", re.ASCII)
_POSITIVE_RE = re.compile(r"\d+", re.ASCII)
_RANGE_RE = re.compile(r"(\d*)-(\d*)", re.ASCII)


# =============================================================================
# CORE FUNCTIONS
# =============================================================================


# --- Count specs ---


class CountSpec(NamedTuple):
    """A parsed tail count.

    plus_zero is set only for the literal "+0", meaning everything. Otherwise
    n is signed: positive is a 1-based start position, negative means the
    last |n| units, and zero means nothing at all.
    """

    plus_zero: bool
    n: int


PLUS_ZERO = CountSpec(True, 0)


def _signed(n: int) -> CountSpec:
    """Build a signed spec, saturating to the 64-bit range."""
    return CountSpec(False, max(INT64_MIN, min(INT64_MAX, n)))


def _parse_count(token: str) -> CountSpec:
    """Parse a tail count token such as "3", "+3", "-3" or "+0".

    A bare number means "last N", so it becomes negative. Raises ValueError
    carrying the token verbatim when it is not [+-]digits.
    """
    m = _COUNT_RE.fullmatch(token)
    if m is None:
        raise ValueError(token)
    sign, digits = m.groups()
    magnitude = int(digits)
    if sign == "+":
        return PLUS_ZERO if magnitude == 0 else _signed(magnitude)
    return _signed(-magnitude)


def _parse_positive(token: str) -> int:
    """Parse a head count: digits only, greater than zero."""
    if _POSITIVE_RE.fullmatch(token) is None or int(token) == 0:
        raise ValueError(token)
    return int(token)


def _resolve(spec: CountSpec, total: int) -> int | None:
    """Zero-based index to start emitting from, or None for nothing.

    Positive positions past the end yield None, while negative counts larger
    than the extent clamp to 0. Keep both.
    """
    if total == 0:
        return None
    if spec.plus_zero:
        return 0
    n = spec.n
    if n == 0:
        return None
    if n > 0:
        return None if n > total else n - 1
    return max(total + n, 0)


# --- Sources ---


def _normalize_path(path_str: str) -> Path:
    """Normalize a path string to a resolved Path object."""
    if (
        sys.platform == "win32"
        and path_str.startswith("/")
        and len(path_str) > 2
        and path_str[2] == "/"
    ):
        path_str = f"{path_str[1]}:{path_str[2:]}"
    return Path(path_str).expanduser().resolve()


@contextmanager
def _open_source(name: str, rewind: bool = True) -> Iterator[BinaryIO]:
    """Yield a binary handle for a source name, "-" being stdin.

    With rewind the handle is seekable: stdin, pipes and FIFOs are spooled
    into a temporary file first so a second pass sees the same bytes.
    """
    if name == "-":
        raw_ctx = nullcontext(sys.stdin.buffer)
    else:
        raw_ctx = open(_normalize_path(name), "rb")
    with raw_ctx as raw:
        if not rewind or (name != "-" and raw.seekable()):
            yield raw
            return
        with tempfile.SpooledTemporaryFile(max_size=CONFIG["spool_max_bytes"]) as spool:
            shutil.copyfileobj(raw, spool, CONFIG["chunk_size"])
            spool.seek(0)
            yield spool


def _count_extents(handle: BinaryIO) -> tuple[int, int]:
    """Count (lines, bytes) from the current position to EOF in one pass.

    An unterminated final line still counts as a line.
    """
    lines = 0
    size = 0
    for line in handle:
        lines += 1
        size += len(line)
    return lines, size


def _emit_lines(handle: BinaryIO, start: int | None, total_lines: int, out: TextIO) -> int:
    """Re-read from the beginning and write lines whose index is >= start.

    Returns the number of lines written.
    """
    if start is None:
        return 0
    handle.seek(0)
    written = 0
    for index, line in enumerate(handle):
        if index >= total_lines:
            break
        if index >= start:
            out.write(line.decode("utf-8", errors="replace"))
            written += 1
    return written


def _emit_bytes(handle: BinaryIO, start: int | None, total_bytes: int, out: TextIO) -> int:
    """Seek to start and write the remaining total_bytes - start bytes.

    Invalid UTF-8, including a character split at start, is replaced rather
    than rejected. Returns the number of bytes consumed.
    """
    if start is None:
        return 0
    handle.seek(start)
    remaining = total_bytes - start
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    while remaining > 0:
        chunk = handle.read(min(CONFIG["chunk_size"], remaining))
        if not chunk:
            break
        remaining -= len(chunk)
        out.write(decoder.decode(chunk))
    out.write(decoder.decode(b"", final=True))
    return total_bytes - start - remaining


def _run_sources(
    event: str,
    files: list[str],
    process: Callable[[str, BinaryIO, TextIO], int],
    *,
    quiet: bool,
    rewind: bool,
    out: TextIO,
    err: TextIO,
) -> tuple[int, int]:
    """Run process over each source in order, with headers when several.

    A source that fails to open or read is reported as "NAME: CAUSE" on err
    and skipped. BrokenPipeError from writing out propagates to the caller.
    Returns (succeeded, failed).
    """
    show_headers = len(files) > 1 and not quiet
    headers = 0
    succeeded = 0
    failed = 0
    for name in files:
        start_ms = time.time() * 1000
        try:
            with _open_source(name, rewind) as handle:
                if show_headers:
                    if headers:
                        out.write("\n")
                    out.write(CONFIG["header"].format(name=name) + "\n")
                    headers += 1
                units = process(name, handle, out)
        except BrokenPipeError:
            # The reader of out went away; that ends the run, not just this source.
            raise
        except OSError as e:
            failed += 1
            err.write(f"{name}: {e.strerror or e}\n")
            latency_ms = round(time.time() * 1000 - start_ms, 2)
            _log(
                "WARN",
                event,
                name,
                detail=str(e),
                metrics=f"latency_ms={latency_ms} status=error",
            )
            continue
        succeeded += 1
        latency_ms = round(time.time() * 1000 - start_ms, 2)
        _log(
            "INFO",
            event,
            name,
            metrics=f"latency_ms={latency_ms} status=success units={units}",
        )
    return succeeded, failed


# --- tail ---


def _tail_source(handle: BinaryIO, spec: CountSpec, byte_mode: bool, out: TextIO) -> int:
    """Resolve spec against one source and emit its tail."""
    if byte_mode:
        total = handle.seek(0, io.SEEK_END)
        return _emit_bytes(handle, _resolve(spec, total), total, out)
    total_lines, _ = _count_extents(handle)
    return _emit_lines(handle, _resolve(spec, total_lines), total_lines, out)


def _tail_impl(
    files: list[str],
    spec: CountSpec,
    byte_mode: bool = False,
    quiet: bool = False,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> tuple[int, int]:
    """Write the tail of each source.

    CLI: tail
    MCP: tail

    Returns (succeeded, failed) source counts.
    """
    return _run_sources(
        "tail",
        files,
        lambda name, handle, o: _tail_source(handle, spec, byte_mode, o),
        quiet=quiet,
        rewind=True,
        out=sys.stdout if out is None else out,
        err=sys.stderr if err is None else err,
    )


# --- head ---


def _head_source(handle: BinaryIO, lines: int, nbytes: int | None, out: TextIO) -> int:
    if nbytes is not None:
        data = handle.read(nbytes)
        out.write(data.decode("utf-8", errors="replace"))
        return len(data)
    written = 0
    for line in handle:
        if written >= lines:
            break
        out.write(line.decode("utf-8", errors="replace"))
        written += 1
    return written


def _head_impl(
    files: list[str],
    lines: int = 10,
    nbytes: int | None = None,
    quiet: bool = False,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> tuple[int, int]:
    """Write the first lines (or bytes) of each source.

    CLI: head
    MCP: head

    Returns (succeeded, failed) source counts.
    """
    assert lines > 0, f"lines must be positive, got {lines}"
    assert nbytes is None or nbytes > 0, f"bytes must be positive, got {nbytes}"
    return _run_sources(
        "head",
        files,
        lambda name, handle, o: _head_source(handle, lines, nbytes, o),
        quiet=quiet,
        rewind=False,
        out=sys.stdout if out is None else out,
        err=sys.stderr if err is None else err,
    )


# --- wc ---


class WcCounts(NamedTuple):
    num_lines: int
    num_words: int
    num_bytes: int
    num_chars: int


def _count_text(handle: BinaryIO) -> WcCounts:
    """Count lines, words, bytes and characters in one pass."""
    lines = words = nbytes = chars = 0
    for line in handle:
        text = line.decode("utf-8", errors="replace")
        lines += 1
        words += len(text.split())
        nbytes += len(line)
        chars += len(text)
    return WcCounts(lines, words, nbytes, chars)


def _format_counts(counts: WcCounts, selected: tuple[bool, ...], name: str) -> str:
    width = CONFIG["wc_width"]
    cells = "".join(f"{n:>{width}}" for n, on in zip(counts, selected) if on)
    return f"{cells}\n" if name == "-" else f"{cells} {name}\n"


def _wc_impl(
    files: list[str],
    lines: bool = False,
    words: bool = False,
    nbytes: bool = False,
    chars: bool = False,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> tuple[int, int]:
    """Print line, word, byte and char counts per source, plus a total row.

    With no selection, lines, words and bytes are shown.

    CLI: wc
    MCP: wc

    Returns (succeeded, failed) source counts.
    """
    assert not (nbytes and chars), "bytes and chars are mutually exclusive"
    if not (lines or words or nbytes or chars):
        lines = words = nbytes = True
    selected = (lines, words, nbytes, chars)
    out = sys.stdout if out is None else out
    totals = [0, 0, 0, 0]

    def _process(name: str, handle: BinaryIO, o: TextIO) -> int:
        counts = _count_text(handle)
        for i, n in enumerate(counts):
            totals[i] += n
        o.write(_format_counts(counts, selected, name))
        return counts.num_lines

    result = _run_sources(
        "wc",
        files,
        _process,
        quiet=True,
        rewind=False,
        out=out,
        err=sys.stderr if err is None else err,
    )
    if len(files) > 1:
        out.write(_format_counts(WcCounts(*totals), selected, "total"))
    return result


# --- cut ---

CUT_MODES = ("bytes", "chars", "fields")


def _parse_index(token: str) -> int:
    if _POSITIVE_RE.fullmatch(token) is None or int(token) == 0:
        raise ValueError(f'illegal list value: "{token}"')
    return int(token)


def _parse_pos(value: str) -> list[slice]:
    """Parse a cut list such as "1,3-5,7-" or "-2" into 0-based slices.

    Positions are 1-based. "N-" runs to the end of the line and "-N" starts
    at the first position. In "N-M", N must be lower than M. Order is kept
    as given, duplicates included.
    """
    positions: list[slice] = []
    for part in value.split(","):
        m = _RANGE_RE.fullmatch(part)
        if m is None or part == "-":
            n = _parse_index(part)
            positions.append(slice(n - 1, n))
            continue
        lo, hi = m.groups()
        if not lo:
            positions.append(slice(0, _parse_index(hi)))
        elif not hi:
            positions.append(slice(_parse_index(lo) - 1, None))
        else:
            start, end = _parse_index(lo), _parse_index(hi)
            if start >= end:
                raise ValueError(
                    f"First number in range ({start}) must be lower than second number ({end})"
                )
            positions.append(slice(start - 1, end))
    return positions


def _extract_bytes(line: bytes, positions: list[slice]) -> str:
    return b"".join(line[s] for s in positions).decode("utf-8", errors="replace")


def _extract_chars(line: str, positions: list[slice]) -> str:
    return "".join(line[s] for s in positions)


def _extract_fields(line: str, positions: list[slice], delimiter: str) -> str:
    fields = line.split(delimiter)
    return delimiter.join(field for s in positions for field in fields[s])


def _cut_source(
    handle: BinaryIO, mode: str, positions: list[slice], delimiter: str, out: TextIO
) -> int:
    written = 0
    for line in handle:
        if line.endswith(b"\n"):
            line = line[:-1].removesuffix(b"\r")
        if mode == "bytes":
            out.write(_extract_bytes(line, positions) + "\n")
        else:
            text = line.decode("utf-8", errors="replace")
            if mode == "chars":
                out.write(_extract_chars(text, positions) + "\n")
            else:
                out.write(_extract_fields(text, positions, delimiter) + "\n")
        written += 1
    return written


def _cut_impl(
    files: list[str],
    mode: str,
    positions: list[slice],
    delimiter: str | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> tuple[int, int]:
    """Print selected bytes, characters or fields from every line of each source.

    CLI: cut
    MCP: cut

    Returns (succeeded, failed) source counts.
    """
    assert mode in CUT_MODES, f"mode must be one of {CUT_MODES}, got {mode!r}"
    assert positions, "at least one position is required"
    if delimiter is None:
        delimiter = CONFIG["cut_delimiter"]
    assert len(delimiter.encode()) == 1, f'delimiter "{delimiter}" must be a single byte'
    return _run_sources(
        "cut",
        files,
        lambda name, handle, o: _cut_source(handle, mode, positions, delimiter, o),
        quiet=True,
        rewind=False,
        out=sys.stdout if out is None else out,
        err=sys.stderr if err is None else err,
    )


# =============================================================================
# CLI INTERFACE
# =============================================================================
def _count_arg(token: str) -> CountSpec:
    try:
        return _parse_count(token)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid value '{e}'") from e


def _positive_arg(token: str) -> int:
    try:
        return _parse_positive(token)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid value '{e}'") from e


def _list_arg(token: str) -> list[slice]:
    try:
        return _parse_pos(token)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _delim_arg(token: str) -> str:
    if len(token.encode()) != 1:
        raise argparse.ArgumentTypeError(f'"{token}" must be a single byte')
    return token


def main():
    parser = argparse.ArgumentParser(
        description="Line and byte extraction over files or stdin: tail, head, wc, cut"
    )
    # -V (capital) for version: lowercase -v reserved for future --verbose flag alignment
    parser.add_argument("-V", "--version", action="version", version=CONFIG["version"])
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # --- mcp-stdio ---
    subparsers.add_parser("mcp-stdio", help="Run as MCP server")

    # --- tail ---
    p_tail = subparsers.add_parser("tail", help="Last lines or bytes of each file")
    p_tail.add_argument("files", nargs="*", default=["-"], help="Input file(s), - for stdin")
    g_tail = p_tail.add_mutually_exclusive_group()
    g_tail.add_argument(
        "-n",
        "--lines",
        type=_count_arg,
        default=None,
        help="Last N lines, or +N to start at line N (default: 10)",
    )
    g_tail.add_argument(
        "-c",
        "--bytes",
        type=_count_arg,
        default=None,
        help="Last N bytes, or +N to start at byte N",
    )
    p_tail.add_argument("-q", "--quiet", action="store_true", help="Suppress headers")

    # --- head ---
    p_head = subparsers.add_parser("head", help="First lines or bytes of each file")
    p_head.add_argument("files", nargs="*", default=["-"], help="Input file(s), - for stdin")
    g_head = p_head.add_mutually_exclusive_group()
    g_head.add_argument("-n", "--lines", type=_positive_arg, default=10)
    g_head.add_argument("-c", "--bytes", type=_positive_arg, default=None)
    p_head.add_argument("-q", "--quiet", action="store_true", help="Suppress headers")

    # --- wc ---
    p_wc = subparsers.add_parser("wc", help="Line, word, byte and char counts")
    p_wc.add_argument("files", nargs="*", default=["-"], help="Input file(s), - for stdin")
    p_wc.add_argument("-l", "--lines", action="store_true", help="Show line count")
    p_wc.add_argument("-w", "--words", action="store_true", help="Show word count")
    g_wc = p_wc.add_mutually_exclusive_group()
    g_wc.add_argument("-c", "--bytes", action="store_true", help="Show byte count")
    g_wc.add_argument("-m", "--chars", action="store_true", help="Show character count")

    # --- cut ---
    p_cut = subparsers.add_parser("cut", help="Selected bytes, chars or fields of each line")
    p_cut.add_argument("files", nargs="*", default=["-"], help="Input file(s), - for stdin")
    p_cut.add_argument(
        "-d",
        "--delim",
        type=_delim_arg,
        default=CONFIG["cut_delimiter"],
        help="Field delimiter (default: tab)",
    )
    g_cut = p_cut.add_mutually_exclusive_group(required=True)
    g_cut.add_argument("-b", "--bytes", type=_list_arg, help="Selected bytes, e.g. 1,3-5,7-")
    g_cut.add_argument("-c", "--chars", type=_list_arg, help="Selected characters")
    g_cut.add_argument("-f", "--fields", type=_list_arg, help="Selected fields")

    args = parser.parse_args()

    # --- Dispatch ---
    # Per-file open/read failures are reported on stderr and do not change the exit status.
    try:
        if args.command == "mcp-stdio":
            _run_mcp()

        elif args.command == "tail":
            if args.bytes is not None:
                _tail_impl(args.files, args.bytes, byte_mode=True, quiet=args.quiet)
            else:
                spec = args.lines
                if spec is None:
                    spec = _parse_count(CONFIG["default_lines"])
                _tail_impl(args.files, spec, quiet=args.quiet)

        elif args.command == "head":
            _head_impl(args.files, args.lines, args.bytes, args.quiet)

        elif args.command == "wc":
            _wc_impl(args.files, args.lines, args.words, args.bytes, args.chars)

        elif args.command == "cut":
            for mode in CUT_MODES:
                positions = getattr(args, mode)
                if positions is not None:
                    _cut_impl(args.files, mode, positions, args.delim)
                    break

        else:
            parser.print_help()
    except BrokenPipeError:
        # Downstream reader closed early: stop quietly with 128 + SIGPIPE, as coreutils does.
        _log("WARN", "broken_pipe", args.command or "unknown")
        sys.stdout = open(os.devnull, "w")
        sys.exit(141)
    except AssertionError as e:
        _log("ERROR", "contract_violation", str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        _log("ERROR", args.command or "unknown", str(e))
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


# =============================================================================
# FASTMCP SERVER
# =============================================================================
def _run_mcp():
    from fastmcp import FastMCP

    mcp = FastMCP("text")

    def _collect(run: Callable[[TextIO, TextIO], tuple[int, int]]) -> str:
        out, err = io.StringIO(), io.StringIO()
        run(out, err)
        errors = err.getvalue().strip()
        return f"ERROR: {errors}" if errors else out.getvalue()

    @mcp.tool()
    def tail(path: str, lines: str = "10", byte_count: str = "") -> str:
        """Show the tail of a file by lines or bytes.

        Args:
            path: File path to read
            lines: Last N lines, or +N to start at line N (default: 10)
            byte_count: Last N bytes, or +N to start at byte N; overrides lines when set
        """
        if path == "-":
            return "ERROR: stdin is the MCP transport; pass a file path"
        token = byte_count or lines
        try:
            spec = _parse_count(token)
        except ValueError:
            return f"ERROR: invalid value '{token}'"
        return _collect(lambda o, e: _tail_impl([path], spec, bool(byte_count), True, o, e))

    @mcp.tool()
    def head(path: str, lines: int = 10, byte_count: int = 0) -> str:
        """Show the first lines or bytes of a file.

        Args:
            path: File path to read
            lines: Number of lines to show (default: 10)
            byte_count: Number of bytes to show instead of lines (default: 0, off)
        """
        if path == "-":
            return "ERROR: stdin is the MCP transport; pass a file path"
        if lines <= 0 or byte_count < 0:
            return "ERROR: lines and byte_count must be positive"
        nbytes = byte_count or None
        return _collect(lambda o, e: _head_impl([path], lines, nbytes, True, o, e))

    @mcp.tool()
    def wc(
        path: str,
        lines: bool = False,
        words: bool = False,
        count_bytes: bool = False,
        chars: bool = False,
    ) -> str:
        """Count lines, words, bytes or characters in a file.

        With nothing selected, shows lines, words and bytes.

        Args:
            path: File path to count
            lines: Show line count
            words: Show word count
            count_bytes: Show byte count
            chars: Show character count (cannot combine with count_bytes)
        """
        if path == "-":
            return "ERROR: stdin is the MCP transport; pass a file path"
        if count_bytes and chars:
            return "ERROR: count_bytes and chars are mutually exclusive"
        return _collect(lambda o, e: _wc_impl([path], lines, words, count_bytes, chars, o, e))

    @mcp.tool()
    def cut(
        path: str,
        byte_list: str = "",
        char_list: str = "",
        field_list: str = "",
        delimiter: str = "\t",
    ) -> str:
        """Print selected bytes, characters or fields from each line of a file.

        Lists are 1-based and comma-separated: "1,3-5", "7-" (to end), "-2" (from start).
        Set exactly one of byte_list, char_list or field_list.

        Args:
            path: File path to read
            byte_list: Byte positions to select
            char_list: Character positions to select
            field_list: Field positions to select
            delimiter: Single-byte field delimiter (default: tab)
        """
        if path == "-":
            return "ERROR: stdin is the MCP transport; pass a file path"
        chosen = [(m, v) for m, v in zip(CUT_MODES, (byte_list, char_list, field_list)) if v]
        if len(chosen) != 1:
            return "ERROR: set exactly one of byte_list, char_list or field_list"
        if len(delimiter.encode()) != 1:
            return f'ERROR: delimiter "{delimiter}" must be a single byte'
        mode, value = chosen[0]
        try:
            positions = _parse_pos(value)
        except ValueError as e:
            return f"ERROR: {e}"
        return _collect(lambda o, e: _cut_impl([path], mode, positions, delimiter, o, e))

    print("text MCP server starting...", file=sys.stderr)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
