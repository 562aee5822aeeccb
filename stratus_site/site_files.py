"""Local website files to publish into the site bucket."""

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class SiteFile:
  """A single file uploaded to the bucket root."""

  key: str
  source: Path
  content_type: str


def content_type_for(name: str) -> str:
  """Guess the Content-Type header for a file name from its extension."""
  content_type, _ = mimetypes.guess_type(name)
  return content_type or DEFAULT_CONTENT_TYPE


def enumerate_site_files(site_dir: Path | str) -> list[SiteFile]:
  """List the files directly inside ``site_dir``, sorted by name.

  Subdirectories are not uploaded; they are skipped with a warning.

  Raises:
    FileNotFoundError: If ``site_dir`` does not exist.
    NotADirectoryError: If ``site_dir`` is not a directory.
  """
  site_dir = Path(site_dir)
  if not site_dir.exists():
    raise FileNotFoundError(f"Site directory not found: {site_dir}")
  if not site_dir.is_dir():
    raise NotADirectoryError(f"Site path is not a directory: {site_dir}")

  files: list[SiteFile] = []
  for entry in sorted(site_dir.iterdir(), key=lambda p: p.name):
    if entry.is_dir():
      logger.warning("Skipping subdirectory %s, only top-level files are published", entry)
      continue

    files.append(
      SiteFile(
        key=entry.name,
        source=entry,
        content_type=content_type_for(entry.name),
      )
    )

  logger.info("Found %d site files in %s", len(files), site_dir)
  return files
