import shutil
from pathlib import Path
from typing import Union

from .log import to_log

PathLike = Union[str, Path]


def is_file(filepath: PathLike) -> bool:
    """True if the file exists. A missing file is logged and reported, anything else is raised."""
    try:
        Path(filepath).stat()
        return True
    except FileNotFoundError:
        to_log(f"file {filepath} does not exist", "error")
        return False
    except OSError as e:
        to_log(e, "error")
        raise


def ensure_folder(folder: PathLike) -> bool:
    """
    Returns True if the folder was already there, False if it had to be created.
    Creation is idempotent, so concurrent callers may race on it.
    """
    folder = Path(folder)
    try:
        if folder.exists():
            return True
        folder.mkdir(parents=True, exist_ok=True)
        to_log("output folder created. Processing favicons...", "info")
        return False
    except OSError as e:
        to_log(f"error creating folder {folder}: {e}", "error")
        raise


def copy_file(source: PathLike, destination: PathLike) -> None:
    try:
        shutil.copyfile(source, destination)
        to_log(f"{Path(source).name} copied successfully", "info")
    except OSError as e:
        to_log(f"error copy source file {source}: {e}", "error")
        raise
