from __future__ import annotations

import logging
import os
import shutil
import zipfile

from ..errors import ExtractionError

logger = logging.getLogger(__name__)


def _dest_for(root: str, member: str) -> str:
    # Containment is checked lexically so symlinked folders inside the game dir still work.
    candidate = os.path.normpath(os.path.join(root, member))
    try:
        inside = os.path.commonpath([root, candidate]) == root and candidate != root
    except ValueError:
        inside = False  # different drives on Windows
    if not inside:
        raise ExtractionError(f"Archive entry escapes target directory: {member}")
    return candidate


def extract_zip(archive_path: str, dest_dir: str) -> int:
    """Extract every file entry into ``dest_dir``, overwriting existing files.

    Directory entries are skipped; parent directories are created as needed.
    Returns the number of files written. Any failure, including a locked or
    unwritable destination file, raises ExtractionError.
    """

    root = os.path.normpath(os.path.abspath(dest_dir))
    count = 0
    try:
        with zipfile.ZipFile(archive_path) as zf:
            for info in zf.infolist():
                if info.is_dir():
                    continue
                out = _dest_for(root, info.filename)
                os.makedirs(os.path.dirname(out), exist_ok=True)
                with zf.open(info) as src, open(out, "wb") as dst:
                    shutil.copyfileobj(src, dst)
                count += 1
    except ExtractionError:
        raise
    except zipfile.BadZipFile as e:
        raise ExtractionError(f"Not a valid zip archive: {archive_path}: {e}") from e
    except OSError as e:
        raise ExtractionError(f"Unable to write {e.filename or dest_dir} (is the game running?): {e}") from e
    except (zipfile.LargeZipFile, NotImplementedError, RuntimeError) as e:
        raise ExtractionError(f"Unsupported archive entry in {archive_path}: {e}") from e

    logger.info("Extracted %d files into %s", count, root)
    return count
