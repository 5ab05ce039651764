"""
Atomic file writing.
"""

import os
import tempfile
from pathlib import Path


def atomic_write(path: Path, data: str, newline: str = "\n", errors: str = "strict") -> None:
    """
    Atomically replace the contents of a file.

    The data is written to a temporary file in the same directory, flushed to
    disk, then renamed over the target. Permission bits of an existing target
    are carried over to the new file. A symlinked target is followed, so the
    link stays in place and the file it points to is updated.

    Args:
        path: Target file path
        data: Text to write (encoded as UTF-8)
        newline: Newline translation passed to open(); use "" to write the
            text exactly as given
        errors: Encoding error handler; "surrogateescape" writes back bytes that
            were read with the same handler unchanged
    """
    path = Path(os.path.realpath(path))

    # New files get the conventional rw-r--r-- instead of mkstemp's private 0600
    mode = 0o644
    try:
        mode = path.stat().st_mode & 0o777
    except FileNotFoundError:
        pass

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", errors=errors, newline=newline) as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())

        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        # Leave the original untouched and drop the partial temp file
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
