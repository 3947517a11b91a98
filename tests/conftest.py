import io
import os
import sys
import tempfile

import pytest

# Keep the TSV log out of scripts/ while testing; must be set before sft_text is imported.
os.environ.setdefault("SFB_LOG_DIR", tempfile.mkdtemp(prefix="sft_text_logs_"))


@pytest.fixture
def write_file(tmp_path):
    """Write bytes to a file under tmp_path and return its path as str."""

    def _write(name: str, data: bytes) -> str:
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)

    return _write


@pytest.fixture
def stdin_bytes(monkeypatch):
    """Replace sys.stdin with a text wrapper over the given bytes."""

    def _set(data: bytes) -> None:
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))

    return _set


@pytest.fixture
def run_cli(monkeypatch):
    """Run sft_text.main() with the given argv tail."""
    import sft_text

    def _run(*argv: str) -> None:
        monkeypatch.setattr(sys, "argv", ["sft_text.py", *argv])
        sft_text.main()

    return _run
