"""
Resolution of the ``PAYMILL_*`` settings from the process environment, a
``.env`` file and explicit overrides.

Only keys carrying the ``PAYMILL_`` prefix are collected. Each resolved value
remembers which layer supplied it, so configuration errors can point at the
place that needs fixing without echoing the (possibly secret) value.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Tuple

__all__ = [
    "ENV_PREFIX",
    "SOURCE_ENVIRONMENT",
    "SOURCE_OVERRIDE",
    "PaymillEnvironment",
    "build_environment",
    "read_env_file",
]

ENV_PREFIX = "PAYMILL_"

SOURCE_ENVIRONMENT = "environment"
SOURCE_OVERRIDE = "override"


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def read_env_file(path: str, prefix: str = ENV_PREFIX) -> Dict[str, str]:
    """
    Return the ``prefix``-ed assignments found in a ``.env`` file.

    A missing file yields an empty mapping. ``export`` prefixes and matching
    outer quotes are removed; a key assigned twice keeps its last value.
    """
    try:
        data = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}

    values: Dict[str, str] = {}
    for raw_line in data.splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key.startswith(prefix):
            values[key] = _strip_quotes(value.strip())
    return values


@dataclass(frozen=True)
class PaymillEnvironment:
    """
    Resolved ``PAYMILL_*`` variables together with the layer each came from.
    """

    variables: Mapping[str, str]
    sources: Mapping[str, str] = field(default_factory=dict)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.variables.get(key, default)

    def source(self, key: str) -> Optional[str]:
        return self.sources.get(key)

    def describe(self) -> str:
        """``KEY=<source>`` pairs, sorted by key. Values are never included."""
        if not self.sources:
            return "no PAYMILL_* settings found"
        return ", ".join(f"{key}=<{self.sources[key]}>" for key in sorted(self.sources))


def _prefixed(items: Iterable[Tuple[str, str]], prefix: str) -> Iterable[Tuple[str, str]]:
    return ((key, value) for key, value in items if key.startswith(prefix))


def build_environment(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
    prefix: str = ENV_PREFIX,
) -> PaymillEnvironment:
    """
    Resolve the client settings.

    ``base`` defaults to :data:`os.environ` and wins over ``env_file``, which
    only fills keys still missing (set it to ``None`` to skip the file).
    ``overrides`` always win.
    """
    variables: Dict[str, str] = {}
    sources: Dict[str, str] = {}

    for key, value in _prefixed((os.environ if base is None else base).items(), prefix):
        variables[key] = value
        sources[key] = SOURCE_ENVIRONMENT

    if env_file is not None:
        for key, value in read_env_file(env_file, prefix).items():
            if key not in variables:
                variables[key] = value
                sources[key] = f"file {env_file}"

    for key, value in _prefixed((overrides or {}).items(), prefix):
        variables[key] = value
        sources[key] = SOURCE_OVERRIDE

    return PaymillEnvironment(variables=variables, sources=sources)
