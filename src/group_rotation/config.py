"""Search configuration files.

A config file is a JSON object holding any subset of the ``SearchConfig``
fields; missing fields keep their defaults. Command-line overrides are
applied on top of the file.
"""

import json
from dataclasses import fields
from pathlib import Path

from .models import SearchConfig

CONFIG_KEYS = frozenset(f.name for f in fields(SearchConfig))


def merge_config(base: SearchConfig, overrides: dict) -> SearchConfig:
    """Return ``base`` with the non-None entries of ``overrides`` applied."""
    unknown = sorted(set(overrides) - CONFIG_KEYS)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    for key, value in overrides.items():
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Config key {key!r} must be an integer, got {value!r}")
    data = base.to_dict()
    data.update({k: v for k, v in overrides.items() if v is not None})
    return SearchConfig.from_dict(data)


def save_config(config: SearchConfig, path: str | Path) -> None:
    """Save the search configuration to a JSON file."""
    path = Path(path)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(config.to_dict(), f, indent=2)


def load_config(path: str | Path | None = None, **overrides) -> SearchConfig:
    """Load a search configuration, falling back to defaults.

    ``path`` may be None to start from the defaults. Keyword overrides set to
    None are ignored, so optional command-line flags can be passed as-is.
    """
    config = SearchConfig()
    if path is not None:
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path.name}: expected a JSON object")
        config = merge_config(config, data)
    return merge_config(config, overrides)
