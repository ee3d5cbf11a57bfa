"""Source file discovery."""

from codescope.scan.files import DEFAULT_SKIP_DIRS, find_source_files

__all__ = ["DEFAULT_SKIP_DIRS", "find_source_files"]
