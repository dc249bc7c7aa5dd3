"""Link API domain."""

from .._output_schemas.link import (
    LinkApplyOutput,
    LinkCheckOutput,
    LinkCreateOutput,
    LinkInitOutput,
    LinkListOutput,
    LinkRemoveOutput,
    LinkToggleOutput,
)

__all__ = [
    "LinkApplyOutput",
    "LinkCheckOutput",
    "LinkCreateOutput",
    "LinkInitOutput",
    "LinkListOutput",
    "LinkRemoveOutput",
    "LinkToggleOutput",
]
