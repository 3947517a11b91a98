"""Tests for cut list parsing, extraction and the cut subcommand."""

import io

import pytest

from sft_text import (
    _cut_impl,
    _extract_bytes,
    _extract_chars,
    _extract_fields,
    _parse_pos,
)


class TestParsePos:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1", [slice(0, 1)]),
            ("01", [slice(0, 1)]),
            ("1,3", [slice(0, 1), slice(2, 3)]),
            ("001,0003", [slice(0, 1), slice(2, 3)]),
            ("1-3", [slice(0, 3)]),
            ("1,7,3-5", [slice(0, 1), slice(6, 7), slice(2, 5)]),
            ("15,19-20", [slice(14, 15), slice(18, 20)]),
            ("3-", [slice(2, None)]),
            ("-2", [slice(0, 2)]),
            ("-2,4-", [slice(0, 2), slice(3, None)]),
        ],
    )
    def test_valid(self, value, expected):
        assert _parse_pos(value) == expected

    @pytest.mark.parametrize(
        "value, bad",
        [
            ("", ""),
            ("0", "0"),
            ("0-1", "0"),
            ("+1", "+1"),
            ("+1-2", "+1-2"),
            ("1-+2", "1-+2"),
            ("1,a", "a"),
            ("1-a", "1-a"),
            ("a-1", "a-1"),
            ("-", "-"),
            ("1,", ""),
            ("1-1-1", "1-1-1"),
            ("-0", "0"),
        ],
    )
    def test_illegal_list_value(self, value, bad):
        with pytest.raises(ValueError) as exc:
            _parse_pos(value)
        assert str(exc.value) == f'illegal list value: "{bad}"'

    @pytest.mark.parametrize("value, lo, hi", [("1-1", 1, 1), ("2-1", 2, 1)])
    def test_range_must_increase(self, value, lo, hi):
        with pytest.raises(ValueError) as exc:
            _parse_pos(value)
        assert str(exc.value) == f"First number in range ({lo}) must be lower than second number ({hi})"


class TestExtract:
    def test_chars(self):
        assert _extract_chars("", [slice(0, 1)]) == ""
        assert _extract_chars("ábc", [slice(0, 1)]) == "á"
        assert _extract_chars("ábc", [slice(0, 1), slice(2, 3)]) == "ác"
        assert _extract_chars("ábc", [slice(2, 3), slice(1, 2)]) == "cb"
        assert _extract_chars("ábc", [slice(0, 1), slice(1, 2), slice(4, 5)]) == "áb"
        assert _extract_chars("ábc", [slice(1, None)]) == "bc"

    def test_bytes(self):
        line = "ábc".encode()
        assert _extract_bytes(line, [slice(0, 1)]) == "\ufffd"
        assert _extract_bytes(line, [slice(0, 2)]) == "á"
        assert _extract_bytes(line, [slice(0, 3)]) == "áb"
        assert _extract_bytes(line, [slice(3, 4), slice(2, 3)]) == "cb"
        assert _extract_bytes(line, [slice(0, 2), slice(5, 6)]) == "á"

    def test_fields(self):
        assert _extract_fields("a,b,c,d", [slice(0, 1), slice(2, None)], ",") == "a,c,d"
        assert _extract_fields("a\tb", [slice(1, 2)], "\t") == "b"
        assert _extract_fields("a\tb", [slice(4, 5)], "\t") == ""


def test_cut_impl_strips_line_endings(write_file):
    path = write_file("f.txt", b"ab\r\ncd\nef")
    out, err = io.StringIO(), io.StringIO()
    assert _cut_impl([path], "chars", [slice(1, None)], out=out, err=err) == (1, 0)
    assert out.getvalue() == "b\nd\nf\n"
    assert err.getvalue() == ""


def test_cut_impl_rejects_unknown_mode():
    with pytest.raises(AssertionError):
        _cut_impl(["-"], "words", [slice(0, 1)])


class TestCutCli:
    def test_fields_with_delimiter(self, run_cli, write_file, capsys):
        path = write_file("f.csv", b"name,age,city\nann,31,oslo\n")
        run_cli("cut", "-d", ",", "-f", "1,3", path)
        assert capsys.readouterr().out == "name,city\nann,oslo\n"

    def test_default_tab_delimiter(self, run_cli, write_file, capsys):
        run_cli("cut", "-f", "2-", write_file("f.tsv", b"a\tb\tc\n"))
        assert capsys.readouterr().out == "b\tc\n"

    def test_chars_open_start(self, run_cli, write_file, capsys):
        run_cli("cut", "-c", "-2", write_file("f.txt", "ábc\r\nxyz".encode()))
        assert capsys.readouterr().out == "áb\nxy\n"

    def test_bytes(self, run_cli, write_file, capsys):
        run_cli("cut", "-b", "2-3", write_file("f.txt", b"hello\n"))
        assert capsys.readouterr().out == "el\n"

    def test_stdin(self, run_cli, stdin_bytes, capsys):
        stdin_bytes(b"one two\n")
        run_cli("cut", "-d", " ", "-f", "2")
        assert capsys.readouterr().out == "two\n"

    def test_missing_file_continues_without_headers(self, run_cli, write_file, tmp_path, capsys):
        a = write_file("a.txt", b"abc\n")
        missing = str(tmp_path / "missing.txt")
        run_cli("cut", "-c", "1", missing, a)
        captured = capsys.readouterr()
        assert captured.out == "a\n"
        assert captured.err == f"{missing}: No such file or directory\n"

    def test_illegal_list_is_argument_error(self, run_cli, write_file, capsys):
        with pytest.raises(SystemExit) as exc:
            run_cli("cut", "-f", "0", write_file("f.txt", b"x\n"))
        assert exc.value.code == 2
        assert 'illegal list value: "0"' in capsys.readouterr().err

    def test_multibyte_delimiter_rejected(self, run_cli, write_file, capsys):
        with pytest.raises(SystemExit) as exc:
            run_cli("cut", "-d", "ab", "-f", "1", write_file("f.txt", b"x\n"))
        assert exc.value.code == 2
        assert '"ab" must be a single byte' in capsys.readouterr().err

    def test_selection_required(self, run_cli, write_file):
        with pytest.raises(SystemExit) as exc:
            run_cli("cut", write_file("f.txt", b"x\n"))
        assert exc.value.code == 2

    def test_selections_exclusive(self, run_cli, write_file):
        with pytest.raises(SystemExit) as exc:
            run_cli("cut", "-b", "1", "-c", "1", write_file("f.txt", b"x\n"))
        assert exc.value.code == 2
