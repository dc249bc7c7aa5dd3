"""Validate a command's output dict against its registered schema."""

from collections.abc import Callable
from typing import Any

# Importing the schema modules registers them
from ._output_schemas import config as _config_schemas  # noqa: F401
from ._output_schemas import link as _link_schemas  # noqa: F401
from ._output_schemas._registry import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate and normalize output for an API command function.

    The domain is the package holding the command module (fslink.api.<domain>.cmd_x)
    and the command name is the function name without its "cmd_" prefix.

    Raises:
        ValueError: If no schema is registered or the output does not match it
    """
    target = getattr(func, "__wrapped__", func)
    domain = target.__module__.split(".")[-2]
    command_name = target.__name__.removeprefix("cmd_")

    schema = get_output_schema(domain, command_name)
    if schema is None:
        raise ValueError(f"No output schema registered for {domain}.{command_name}")

    try:
        return schema.model_validate(output).model_dump(mode="python")
    except Exception as e:
        raise ValueError(f"{domain}.{command_name}: {e}") from e
