#!/usr/bin/env python3
"""
Security utilities for safe palette file access
"""

import pathlib

from .constants import MAX_PALETTE_FILE_SIZE


class SecurityError(Exception):
    """Raised when a security violation is detected"""
    pass


def _check_path_format(file_path_str):
    """Reject URI schemes and UNC paths"""
    if any(file_path_str.startswith(scheme) for scheme in ["file:", "http:", "https:", "ftp:", "sftp:"]):
        raise SecurityError(f"URI schemes not allowed: {file_path_str}")

    if file_path_str.startswith("\\\\") or "\\\\?\\" in file_path_str:
        raise SecurityError(f"UNC paths not allowed: {file_path_str}")


def validate_file_path(file_path, base_dir=None, max_size=MAX_PALETTE_FILE_SIZE):
    """
    Validate a palette file path before opening it

    Args:
        file_path: Path to validate
        base_dir: Optional base directory to restrict access to
        max_size: Maximum allowed file size in bytes (default 16MB)

    Returns:
        Absolute path if valid

    Raises:
        SecurityError: If path is invalid or unsafe
    """
    file_path_str = str(file_path)
    _check_path_format(file_path_str)

    try:
        path = pathlib.Path(file_path).resolve()
    except (ValueError, RuntimeError) as e:
        raise SecurityError(f"Invalid path: {e}")

    # If base_dir is specified, ensure path is within it
    if base_dir:
        base = pathlib.Path(base_dir).resolve()
        try:
            path.relative_to(base)
        except ValueError:
            raise SecurityError(f"Path outside allowed directory: {path}")

    if path.exists():
        if not path.is_file():
            raise SecurityError(f"Path is not a file: {path}")

        file_size = path.stat().st_size
        if file_size > max_size:
            raise SecurityError(f"File too large: {file_size} bytes (max {max_size})")

    return str(path)
