import logging
import os
import stat
from pathlib import Path
from typing import Iterator

from .errors import WalkError


def iter_mail_files(root) -> Iterator[Path]:
    """Yield every regular file below root, descending into subdirectories.

    Every file is treated as a mail, not only those in cur/ and new/.
    Entries are visited in name order so two walks of an unchanged tree
    yield the same sequence.
    """
    root = Path(root)
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise WalkError(root, f"error reading dir names: {e.strerror or e}") from e

    for entry in entries:
        path = Path(entry.path)
        try:
            mode = entry.stat().st_mode
        except OSError as e:
            raise WalkError(path, f"stat: {e.strerror or e}") from e

        if stat.S_ISDIR(mode):
            yield from iter_mail_files(path)
        elif stat.S_ISREG(mode):
            yield path
        else:
            logging.warning(f"⏩ Skipped (not a regular file): {path}")
