"""
Tests for the fresh file writer.
"""

import os
from pathlib import Path

import pytest

from jlic.core.errors import FileIOError, PathConflict
from jlic.core.services.fresh_file import fresh_file, write_file


class TestFreshFile:
    def test_creates_new_file(self, tmp_path: Path):
        path = tmp_path / "LICENSE.md"
        with fresh_file(path) as fh:
            fh.write("hello")
        assert path.read_text() == "hello"

    def test_replaces_existing_file(self, tmp_path: Path):
        path = tmp_path / "LICENSE.md"
        path.write_text("old content that is much longer than the new one")
        with fresh_file(path) as fh:
            fh.write("new")
        assert path.read_text() == "new"

    def test_warns_when_replacing(self, tmp_path: Path, caplog):
        path = tmp_path / "LICENSE.md"
        path.write_text("old")
        with caplog.at_level("WARNING", logger="jlic.core.services.fresh_file"):
            fresh_file(path).close()
        assert "was removed" in caplog.text

    def test_directory_is_conflict(self, tmp_path: Path):
        target = tmp_path / "LICENSE.md"
        target.mkdir()
        (target / "keep.txt").write_text("keep")
        with pytest.raises(PathConflict, match="not a file"):
            fresh_file(target)
        assert target.is_dir()
        assert (target / "keep.txt").read_text() == "keep"

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_dangling_symlink_is_conflict(self, tmp_path: Path):
        target = tmp_path / "LICENSE.md"
        target.symlink_to(tmp_path / "missing")
        with pytest.raises(PathConflict):
            fresh_file(target)
        assert target.is_symlink()

    def test_missing_parent_is_io_error(self, tmp_path: Path):
        with pytest.raises(FileIOError, match="Cannot create"):
            fresh_file(tmp_path / "no" / "such" / "dir" / "LICENSE.md")


class TestWriteFile:
    def test_second_write_wins(self, tmp_path: Path):
        path = tmp_path / "LICENSE.md"
        assert write_file(path, "first write\n") is False
        assert write_file(path, "second\n") is True
        assert path.read_text() == "second\n"

    def test_writes_utf8(self, tmp_path: Path):
        path = tmp_path / "LICENSE.md"
        write_file(path, "Zoë Müller\n")
        assert path.read_bytes() == "Zoë Müller\n".encode("utf-8")

    def test_directory_untouched(self, tmp_path: Path):
        target = tmp_path / "out"
        target.mkdir()
        with pytest.raises(PathConflict):
            write_file(target, "x")
        assert target.is_dir()

    def test_failed_write_keeps_old_file(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "Cargo.toml"
        path.write_text("[package]\nname = \"demo\"\n")

        def disk_full(src, dst):
            raise OSError(28, "No space left on device")

        monkeypatch.setattr(os, "replace", disk_full)
        with pytest.raises(FileIOError, match="No space left"):
            write_file(path, "[package]\n")
        assert path.read_text() == "[package]\nname = \"demo\"\n"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["Cargo.toml"]

    def test_no_temp_file_left_behind(self, tmp_path: Path):
        path = tmp_path / "LICENSE.md"
        write_file(path, "one\n")
        write_file(path, "two\n")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["LICENSE.md"]

    @pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
    def test_replaced_file_keeps_mode(self, tmp_path: Path):
        path = tmp_path / "Cargo.toml"
        path.write_text("old\n")
        path.chmod(0o640)
        write_file(path, "new\n")
        assert path.stat().st_mode & 0o777 == 0o640

    def test_missing_parent_is_io_error(self, tmp_path: Path):
        with pytest.raises(FileIOError):
            write_file(tmp_path / "no" / "such" / "LICENSE.md", "x")
