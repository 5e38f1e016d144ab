"""
Async data file read/write helpers.

Blocking file IO runs in the default executor so callers can await it
from the event loop.
"""

import asyncio
import os
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


async def read_data_file(data_file_path: PathLike, encoding: str = 'utf-8') -> str:
    """
    Read a local data file as text.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the content does not match the encoding
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None, lambda: Path(data_file_path).read_text(encoding=encoding))


async def write_data_file(data_file_path: PathLike, content: str, encoding: str = 'utf-8') -> None:
    """
    Write text to a local data file, replacing any existing content.

    The text is encoded before the file is touched and written through a
    temporary file, so a failed write leaves the existing file intact.

    Raises:
        OSError: If the file cannot be written
        UnicodeEncodeError: If the content cannot be encoded
    """
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(
        None, lambda: _write_bytes(Path(data_file_path), content.encode(encoding)))


def _write_bytes(path: Path, data: bytes) -> None:
    temp_path = path.with_name(f"{path.name}.tmp")
    try:
        with open(temp_path, 'wb') as f:
            f.write(data)
        os.replace(temp_path, path)
    except OSError:
        if temp_path.exists():
            temp_path.unlink()
        raise


def get_data_file_type(data_url: str) -> str:
    """
    Get the data file type (trailing dot-extension) of a path or url.

    Unlike Path.suffix this keeps dot-files such as '.env' typed.

    Returns:
        Extension including the dot, or '' when there is none
    """
    dot_index = data_url.rfind('.')
    return data_url[dot_index:] if dot_index >= 0 else ''
