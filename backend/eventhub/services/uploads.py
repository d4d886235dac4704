import logging
import shutil
import time
from pathlib import Path

from fastapi import UploadFile

logger = logging.getLogger(__name__)

# URL prefix the static mount in main.py serves uploads under
PUBLIC_PREFIX = "uploads"

def generate_filename(original_name: str | None) -> str:
    """Time-derived name keeping the original extension.

    Two uploads in the same millisecond get the same name; that is accepted.
    """
    suffix = Path(original_name or "").suffix
    return f"{int(time.time() * 1000)}{suffix}"

def save_upload(upload: UploadFile, directory: str | Path) -> str:
    """Write the upload to disk and return the path recorded on the event."""
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    filename = generate_filename(upload.filename)
    with (target_dir / filename).open("wb") as out:
        shutil.copyfileobj(upload.file, out)
    logger.info("Stored upload %s as %s", upload.filename, filename)
    return f"{PUBLIC_PREFIX}/{filename}"
