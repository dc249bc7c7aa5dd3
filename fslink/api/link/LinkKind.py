"""Link kind enum."""

from enum import Enum


class LinkKind(str, Enum):
    """Kind of filesystem link an entry manages."""

    SOFT = "soft"
    HARD = "hard"

    def __str__(self) -> str:
        return self.value
