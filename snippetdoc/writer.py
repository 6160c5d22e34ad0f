from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from .exceptions import WriteFailed

logger = logging.getLogger("snippetdoc")


def write_document(directory: Union[str, Path], name: str, content: str) -> Path:
    """Atomically replace ``directory/name`` with ``content``.

    The text goes to a sibling ``.tmp`` file first and is moved over the
    target with :func:`os.replace`, so readers see either the old document or
    the new one.

    Raises:
        WriteFailed: If the document could not be written.
    """
    target = Path(directory) / name
    tmp_path = target.with_name(f".{target.name}.tmp")

    try:
        with open(tmp_path, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, target)
    except OSError as exc:
        try:
            tmp_path.unlink()
        except OSError:
            pass
        raise WriteFailed(name, exc.strerror or str(exc)) from exc

    logger.info("Generated %s (%d bytes)", target, len(content.encode("utf-8")))
    return target


__all__ = ["write_document"]
