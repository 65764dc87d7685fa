"""
Helper Utilities Module.

Generic helpers shared by the input, pipeline and output modules.

Functions:
    - ensure_directory: Create directory if it doesn't exist
    - get_file_extension: Extract file extension safely
    - format_duration: Render elapsed seconds for log output
"""

from pathlib import Path
from typing import Union


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists.

    Returns:
        Path object pointing to the directory.

    Raises:
        PermissionError: If directory cannot be created due to permissions.

    Example:
        >>> ensure_directory("outputs/reports")
        PosixPath('outputs/reports')
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def get_file_extension(filepath: Union[str, Path]) -> str:
    """
    Extract the file extension from a filepath.

    Returns the extension in lowercase, including the dot.
    Returns empty string if no extension exists.

    Example:
        >>> get_file_extension("invoices.CSV")
        ".csv"
        >>> get_file_extension("noextension")
        ""
    """
    return Path(filepath).suffix.lower()


def format_duration(seconds: float) -> str:
    """
    Format an elapsed duration for log messages.

    Example:
        >>> format_duration(0.4321)
        "432ms"
        >>> format_duration(75.5)
        "1m15.50s"
    """
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    minutes, secs = divmod(seconds, 60)
    if minutes:
        return f"{int(minutes)}m{secs:.2f}s"
    return f"{secs:.2f}s"
