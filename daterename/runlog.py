"""Per-run log: an append-only file in the target folder, echoed to stdout."""

import logging
import sys
from pathlib import Path

RUN_LOGGER_NAME = "daterename.run"
FILE_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def open_run_log(directory: Path, log_name: str = "daterename.log", quiet: bool = False) -> logging.Logger:
    """
    Set up the run logger.

    Args:
        directory (Path): Folder being renamed; the log file lives there.
        log_name (str): Name of the log file.
        quiet (bool): If True nothing is echoed to the console.

    Returns:
        logging.Logger: A logger writing to the log file (and stdout).
    """
    run_log = logging.getLogger(RUN_LOGGER_NAME)
    close_run_log(run_log)
    run_log.setLevel(logging.INFO)
    run_log.propagate = False

    file_handler = logging.FileHandler(str(directory / log_name), mode="a", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    run_log.addHandler(file_handler)

    if not quiet:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(logging.Formatter("%(message)s"))
        run_log.addHandler(console)
    return run_log


def close_run_log(run_log: logging.Logger) -> None:
    for handler in list(run_log.handlers):
        run_log.removeHandler(handler)
        handler.close()
