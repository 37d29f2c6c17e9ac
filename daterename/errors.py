"""Errors raised by the renamer and the exit codes the CLI maps them to."""

# Exit codes
EXIT_OK = 0
EXIT_PARTIAL_FAILURE = 1  # at least one file could not be backed up or renamed
EXIT_USAGE = 2  # argparse's own code for bad arguments
EXIT_MISSING_DIRECTORY = 3
EXIT_NOT_A_DIRECTORY = 4
EXIT_UNWRITABLE_DIRECTORY = 5  # the run log can't be created in the folder
EXIT_INTERRUPTED = 130


class DateRenameError(Exception):
    """Base error for the project."""


class FatalInputError(DateRenameError):
    """Bad input detected before anything was touched. Ends the run."""
    exit_code = EXIT_USAGE


class MissingDirectoryError(FatalInputError):
    exit_code = EXIT_MISSING_DIRECTORY


class NotADirectoryInputError(FatalInputError):
    exit_code = EXIT_NOT_A_DIRECTORY


class UnwritableDirectoryError(FatalInputError):
    exit_code = EXIT_UNWRITABLE_DIRECTORY
