"""Tests for site file enumeration."""

import logging
from pathlib import Path

import pytest

from stratus_site.site_files import SiteFile, content_type_for, enumerate_site_files


class TestEnumerateSiteFiles:
  """Test enumerate_site_files."""

  def test_lists_top_level_files(self, tmp_path: Path) -> None:
    (tmp_path / "b.html").write_text("b")
    (tmp_path / "a.html").write_text("a")

    files = enumerate_site_files(tmp_path)

    assert files == [
      SiteFile(key="a.html", source=tmp_path / "a.html", content_type="text/html"),
      SiteFile(key="b.html", source=tmp_path / "b.html", content_type="text/html"),
    ]

  def test_sorted_by_name(self, tmp_path: Path) -> None:
    for name in ["zeta.html", "alpha.css", "mid.png"]:
      (tmp_path / name).write_bytes(b"x")

    files = enumerate_site_files(tmp_path)

    assert [f.key for f in files] == ["alpha.css", "mid.png", "zeta.html"]

  def test_skips_subdirectories(
    self, tmp_path: Path, caplog: pytest.LogCaptureFixture
  ) -> None:
    """Subdirectories are never declared as objects."""
    (tmp_path / "index.html").write_text("home")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "logo.png").write_bytes(b"png")

    with caplog.at_level(logging.WARNING):
      files = enumerate_site_files(tmp_path)

    assert [f.key for f in files] == ["index.html"]
    assert "assets" in caplog.text

  def test_empty_directory(self, tmp_path: Path) -> None:
    assert enumerate_site_files(tmp_path) == []

  def test_missing_directory(self, tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
      enumerate_site_files(tmp_path / "missing")

  def test_path_is_a_file(self, tmp_path: Path) -> None:
    path = tmp_path / "index.html"
    path.write_text("home")

    with pytest.raises(NotADirectoryError):
      enumerate_site_files(path)


class TestContentType:
  """Test content type derivation from file extensions."""

  @pytest.mark.parametrize(
    ("name", "expected"),
    [
      ("index.html", "text/html"),
      ("style.css", "text/css"),
      ("logo.png", "image/png"),
      ("photo.jpg", "image/jpeg"),
      ("data.json", "application/json"),
    ],
  )
  def test_known_extensions(self, name: str, expected: str) -> None:
    assert content_type_for(name) == expected

  def test_unknown_extension(self) -> None:
    assert content_type_for("blob.unknownext") == "application/octet-stream"

  def test_no_extension(self) -> None:
    assert content_type_for("CNAME") == "application/octet-stream"
