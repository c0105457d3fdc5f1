"""
Text file input/output for the file resolve operation.

Implements:
- Input validation (existence, regular file, size bound)
- UTF-8 reads and writes that leave line endings as they are
- Atomic writes: the document goes to a temporary file next to the
  destination and is renamed over it only once fully written, with the
  permissions of the file it replaces
"""

import os
import stat
import tempfile
from ssmresolve.exceptions import InputError, OutputError
from ssmresolve.lib.log import LOG


def file_validate(path: str, max_size: int) -> None:
    """Check that `path` names a readable-sized regular file.

    Args:
        path: Input file path
        max_size: Largest accepted size in bytes

    Raises:
        InputError: If the path is empty, missing, not a file or too large
    """
    if not path:
        raise InputError("input file name is not provided")

    if not os.path.exists(path):
        raise InputError(f"File not found: {path}")

    if not os.path.isfile(path):
        raise InputError(f"Not a regular file: {path}")

    size: int = os.path.getsize(path)
    if size > max_size:
        raise InputError(f"File too large: {path} ({size} bytes, limit {max_size})")


def file_mode(path: str) -> int:
    """Permission bits for a document written to `path`.

    An existing file keeps its mode; a new one follows the umask.
    """
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask: int = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def text_read(path: str) -> str:
    """Read a UTF-8 text file, keeping its line endings.

    Raises:
        InputError: If the file cannot be read or decoded
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise InputError(f"File is not valid UTF-8: {path}") from e
    except OSError as e:
        raise InputError(f"Error reading file {path}: {e}") from e


def text_write(text: str, path: str) -> None:
    """Atomically replace `path` with `text`.

    Readers of `path` see either its previous content or the complete new
    document, never a partial write.

    Raises:
        OutputError: If the file cannot be written
    """
    directory: str = os.path.dirname(os.path.abspath(path))
    temp_path: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=directory,
            prefix=f".{os.path.basename(path)}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            temp_path = f.name
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(temp_path, file_mode(path))
        os.replace(temp_path, path)
        temp_path = None
        LOG(f"Wrote resolved document to {path}")
    except OSError as e:
        raise OutputError(f"Error writing file {path}: {e}") from e
    finally:
        if temp_path is not None and os.path.exists(temp_path):
            os.remove(temp_path)
