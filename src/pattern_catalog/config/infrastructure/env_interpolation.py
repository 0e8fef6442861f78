"""${ENV_VAR} references inside raw YAML config data."""

import os
import re
from collections.abc import Callable, Iterator

_REFERENCE = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def _strings(data: RawValue) -> Iterator[str]:
    """Yield every string value in the tree, depth first."""
    match data:
        case str():
            yield data
        case list():
            for item in data:
                yield from _strings(item)
        case dict():
            for value in data.values():
                yield from _strings(value)


def _map_strings(data: RawValue, transform: Callable[[str], str]) -> RawValue:
    match data:
        case str():
            return transform(data)
        case list():
            return [_map_strings(item, transform) for item in data]
        case dict():
            return {key: _map_strings(value, transform) for key, value in data.items()}
        case _:
            return data


def collect_missing_vars(data: RawValue) -> list[str]:
    """Names of referenced env vars that are unset, in first-seen order, without repeats."""
    unset = (
        found["name"]
        for text in _strings(data)
        for found in _REFERENCE.finditer(text)
        if found["name"] not in os.environ
    )
    return list(dict.fromkeys(unset))


def interpolate(data: RawValue) -> RawValue:
    """Return a copy of *data* with every ${ENV_VAR} replaced by its value.

    Every referenced variable must be set; check with `collect_missing_vars` first.
    """
    return _map_strings(
        data, lambda text: _REFERENCE.sub(lambda found: os.environ[found["name"]], text)
    )
