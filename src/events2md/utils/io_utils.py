#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/utils/io_utils.py
"""I/O utilities for writing rendered Markdown.

Rendered Markdown is always text; this module writes it to a file path or to a
text or binary stream, encoding as UTF-8 where needed.

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from events2md.exceptions import OutputWriteError


def _is_binary_stream(output: IO[bytes] | IO[str]) -> bool:
    # Concrete types first, then io base classes, then the mode attribute of file objects
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_text(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered text to a path or stream.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Can be:
        - str or Path: Writes content to file at that path (UTF-8)
        - IO[bytes]: Writes UTF-8 encoded content to a binary file-like object
        - IO[str]: Writes content to a text file-like object

    Raises
    ------
    OutputWriteError
        If the file at the given path cannot be written
    TypeError
        If the output type is not supported

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_text("# Title", buffer)
        >>> buffer.getvalue()
        b'# Title'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if _is_binary_stream(output):
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        cast(IO[str], output).write(content)


__all__ = ["write_text"]
