"""Helpers that build or walk small data structures inside templates."""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from forge_ui.exceptions import TemplateHelperException


def make_dict(*values: Any) -> dict[str, Any]:
    """Build a dict from alternating key/value arguments.

    Raises:
        TemplateHelperException: On an odd number of arguments or a non-string key
    """
    if len(values) % 2 != 0:
        raise TemplateHelperException("invalid dict call", details={"arg_count": len(values)})

    result: dict[str, Any] = {}
    for key, value in zip(values[::2], values[1::2]):
        if not isinstance(key, str):
            raise TemplateHelperException("dict keys must be strings", details={"key_type": type(key).__name__})
        result[key] = value
    return result


def merge_dict(*values: Any) -> dict[str, Any]:
    """Build a dict from a mix of key/value pairs and whole mappings.

    A string argument consumes the next argument as its value; a mapping
    argument is merged in. Later entries win.

    Raises:
        TemplateHelperException: On no arguments, a dangling key or any other argument type
    """
    if not values:
        raise TemplateHelperException("invalid dict call")

    result: dict[str, Any] = {}
    i = 0
    while i < len(values):
        item = values[i]
        if isinstance(item, str):
            i += 1
            if i == len(values):
                raise TemplateHelperException("specify the key for non array values", details={"key": item})
            result[item] = values[i]
        elif isinstance(item, Mapping):
            result.update(item)
        else:
            raise TemplateHelperException("dict values must be maps", details={"value_type": type(item).__name__})
        i += 1
    return result


def iter_list(items: Iterable[Any] | None) -> Iterator[Any]:
    """Lazily yield the elements of a list-like value in order."""
    if items is None:
        return
    yield from items


def contain(values: Iterable[int], target: int) -> bool:
    return target in values
