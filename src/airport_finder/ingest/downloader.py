"""Download OurAirports database files.

Each file is streamed into ``<name>.download`` next to its target and
renamed into place once complete, so an interrupted download never
leaves a truncated CSV behind.

Typical usage:
    from airport_finder.ingest.downloader import download_database

    failures = download_database("data")
    for filename, error in failures:
        print(f"{filename}: {error}")
"""

import logging
import os
from pathlib import Path
from urllib import request
from urllib.error import URLError

from tqdm import tqdm

from airport_finder.core.config import OURAIRPORTS_BASE_URL, OURAIRPORTS_FILES

logger = logging.getLogger(__name__)

TEMP_EXTENSION = ".download"
CHUNK_SIZE = 64 * 1024
TIMEOUT_S = 60


def download_file(url: str, output_path: Path, show_progress: bool = True) -> int:
    """Download a file from URL to output path.

    Args:
        url: URL to download from.
        output_path: Final path of the file.
        show_progress: Display a progress bar on stderr.

    Returns:
        Number of bytes written.

    Raises:
        URLError: If the request fails.
        OSError: If the file cannot be written.
    """
    temp_path = output_path.with_name(output_path.name + TEMP_EXTENSION)
    written = 0

    try:
        with request.urlopen(url, timeout=TIMEOUT_S) as response, open(temp_path, "wb") as f:
            length = response.headers.get("Content-Length")
            total = int(length) if length and length.isdigit() else None
            with tqdm(
                desc=output_path.name,
                total=total,
                unit="B",
                unit_scale=True,
                unit_divisor=1024,
                disable=not show_progress,
            ) as progress:
                while chunk := response.read(CHUNK_SIZE):
                    f.write(chunk)
                    written += len(chunk)
                    progress.update(len(chunk))
        os.replace(temp_path, output_path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise

    return written


def download_database(
    target_dir: str | Path,
    base_url: str = OURAIRPORTS_BASE_URL,
    files: dict[str, str] | None = None,
    show_progress: bool = True,
) -> list[tuple[str, Exception]]:
    """Download every configured OurAirports file.

    A failed file is logged and recorded; the remaining files are still
    downloaded.

    Args:
        target_dir: Directory to write files into (created if missing).
        base_url: Base URL the filenames are appended to.
        files: File-key to filename mapping (defaults to OURAIRPORTS_FILES).
        show_progress: Display progress bars.

    Returns:
        List of (filename, error) for files that failed.
    """
    files = files if files is not None else OURAIRPORTS_FILES
    target_dir = Path(target_dir)
    target_dir.mkdir(parents=True, exist_ok=True)

    failures: list[tuple[str, Exception]] = []
    for filename in files.values():
        url = base_url + filename
        output_path = target_dir / filename
        logger.info("Downloading %s", url)
        try:
            size = download_file(url, output_path, show_progress)
        except (URLError, OSError, ValueError) as e:
            logger.error("Failed to download %s: %s", url, e)
            failures.append((filename, e))
            continue
        logger.info("Downloaded %s (%.2f MB)", output_path.name, size / (1024 * 1024))

    return failures


def missing_files(target_dir: str | Path, files: dict[str, str] | None = None) -> list[str]:
    """List configured filenames not yet present in target_dir."""
    files = files if files is not None else OURAIRPORTS_FILES
    target_dir = Path(target_dir)
    return [filename for filename in files.values() if not (target_dir / filename).exists()]
