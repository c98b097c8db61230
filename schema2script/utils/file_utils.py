"""
Common file utilities used across the application.
Consolidates output writing, upload storage and path reporting.
"""
import os
from pathlib import Path


def make_relative_path(file_path: str, base_path: str) -> str:
    """
    Make a file path relative to a base path, with error handling.

    Args:
        file_path: Absolute file path
        base_path: Base path to make relative to

    Returns:
        Relative path or original path if conversion fails
    """
    if not file_path or not base_path:
        return file_path

    try:
        return os.path.relpath(file_path, base_path)
    except (ValueError, OSError):
        # Return original path if relative path conversion fails
        return file_path


def write_file_content(file_path: str | Path, content: str):
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, 'w', encoding='utf-8') as f:
        f.write(content)


def write_bytes_content(file_path: str | Path, content: bytes):
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, 'wb') as f:
        f.write(content)


def safe_filename(filename: str) -> str:
    """Strip any directory components from a client-supplied file name."""
    name = os.path.basename((filename or '').replace('\\', '/'))
    return name or 'schema'
