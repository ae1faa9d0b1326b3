"""Tests for the programmatic entrypoint (textscan.api)."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from textscan import api
from textscan.api import search
from textscan.core.config import ScanConfig
from textscan.errors import PathTypeError


@pytest.fixture()
def a_txt(tmp_path: Path) -> Path:
    f = tmp_path / "a.txt"
    f.write_text("foo\nbar\nfoobar\n")
    return f


class TestSearchSingleFile:
    def test_plain_output(self, a_txt: Path) -> None:
        out = io.StringIO()

        summary = search(ScanConfig(root=a_txt, pattern="foo"), out=out)

        assert out.getvalue() == f"{a_txt}:foo\n{a_txt}:foobar\n"
        assert summary.matches == 2
        assert summary.ok

    def test_line_numbers(self, a_txt: Path) -> None:
        out = io.StringIO()

        search(ScanConfig(root=a_txt, pattern="foo", line_numbers=True), out=out)

        assert out.getvalue() == f"{a_txt}:0:foo\n{a_txt}:2:foobar\n"

    def test_file_ignores_recursive_flag(self, a_txt: Path) -> None:
        out = io.StringIO()

        summary = search(ScanConfig(root=a_txt, pattern="bar", recursive=True), out=out)

        assert summary.matches == 2

    def test_read_failure_is_reported_not_raised(
        self, a_txt: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def denied(path, pattern):
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr(api, "scan_file", denied)
        out, err = io.StringIO(), io.StringIO()

        summary = search(ScanConfig(root=a_txt, pattern="foo"), out=out, err=err)

        assert out.getvalue() == ""
        assert err.getvalue() == f"{a_txt}: error: Permission denied\n"
        assert not summary.ok


class TestSearchDirectory:
    def test_directory_requires_recursive(self, tmp_path: Path) -> None:
        with pytest.raises(PathTypeError) as excinfo:
            search(ScanConfig(root=tmp_path, pattern="x"), out=io.StringIO())

        assert str(excinfo.value) == f"{tmp_path.name}: is a directory"

    def test_recursive_search(self, tmp_path: Path) -> None:
        (tmp_path / "x.txt").write_text("needle\n")
        (tmp_path / "y.txt").write_text("hay\n")
        out = io.StringIO()

        summary = search(
            ScanConfig(root=tmp_path, pattern="needle", recursive=True), out=out
        )

        assert out.getvalue() == f"{tmp_path / 'x.txt'}:needle\n"
        assert summary.files == 2
        assert summary.matches == 1

    def test_missing_root(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError) as excinfo:
            search(ScanConfig(root=tmp_path / "nope", pattern="x"))

        assert excinfo.value.filename == str(tmp_path / "nope")


def test_permission_denied_root_is_not_reported_as_missing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = tmp_path / "secret.txt"
    target.write_text("x\n")
    real_stat = Path.stat

    def denied_stat(self, *args, **kwargs):
        if self == target:
            raise PermissionError(13, "Permission denied", str(self))
        return real_stat(self, *args, **kwargs)

    monkeypatch.setattr(Path, "stat", denied_stat)

    with pytest.raises(PermissionError):
        search(ScanConfig(root=target, pattern="x"), out=io.StringIO())
