"""What the filesystem holds at a link target."""

from enum import Enum


class TargetState(str, Enum):
    """State of a target path relative to the entry that owns it.

    MISSING: nothing exists at the target
    LINKED: the target is this entry's link to its source
    DANGLING: the target is a symlink to the entry's source, which no longer exists
    FOREIGN: anything else (regular file, directory, link to another source)
    """

    MISSING = "missing"
    LINKED = "linked"
    DANGLING = "dangling"
    FOREIGN = "foreign"
