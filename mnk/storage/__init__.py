"""
Storage - Persisted game logs.

The only thing written to disk is the text log a player chooses to save.
"""

from .log_file import LogWriteError, log_file_name, save_logs

__all__ = [
    "LogWriteError",
    "log_file_name",
    "save_logs",
]
