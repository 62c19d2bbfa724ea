"""Exceptions raised by css-usage. The CLI turns them into exit codes."""


class CssUsageError(Exception):
    """Base class for fatal, user-facing errors"""


class MissingDependencyError(CssUsageError):
    """An optional library needed for this input is not installed"""


class NoStylesheetsError(CssUsageError):
    """None of the stylesheet inputs resolved to a file"""


def raise_walk_error(err):
    """os.walk onerror hook: an unreadable directory is fatal, not skipped"""
    raise err
