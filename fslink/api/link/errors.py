"""Exceptions raised by the link store and applier."""


class FslinkError(Exception):
    """Base class for all fslink failures reported to the user."""


class ProjectNotFoundError(FslinkError):
    """No directory holding .fslink between the start directory and the filesystem root."""


class DatabaseCorruptError(FslinkError):
    """The links database is not valid JSON or holds invalid records."""


class DatabaseWriteError(FslinkError):
    """The links database could not be written."""


class DuplicateTargetError(FslinkError):
    """The target path is already tracked by another entry."""


class EntryNotFoundError(FslinkError):
    """No entry matches the given id or target path."""


class SourceNotFoundError(FslinkError):
    """The link source does not exist."""


class TargetExistsError(FslinkError):
    """The target path is occupied by something the tool does not own."""


class TargetLinkMismatchError(TargetExistsError):
    """The target path is a symlink to a different source."""


class UnsupportedLinkKindError(FslinkError):
    """The link kind cannot be used with the source (hard links to directories)."""


class LinkApplyError(FslinkError):
    """A filesystem operation failed or did not leave the expected result."""
