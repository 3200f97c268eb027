"""Working-directory and file helpers used for loading assets."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from ethrl.core.logger import log

PathLike = Union[str, "os.PathLike[str]"]


def set_file_path(path: PathLike) -> None:
    """Change the working directory that asset paths are resolved against."""
    os.chdir(path)


def get_file_path() -> str:
    return os.getcwd()


def file_exists(path: PathLike) -> bool:
    return Path(path).exists()


def get_file_size(path: PathLike) -> int:
    """Size of the file in bytes; raises FileNotFoundError if it is missing."""
    if not file_exists(path):
        raise FileNotFoundError(f"no such file: {path}")
    return Path(path).stat().st_size


def read_file(path: PathLike) -> str:
    """Return the whole text of the file; raises FileNotFoundError if it is missing."""
    if not file_exists(path):
        log("Error could not read file %s", str(path))
        raise FileNotFoundError(f"no such file: {path}")
    return Path(path).read_text(encoding="utf-8")