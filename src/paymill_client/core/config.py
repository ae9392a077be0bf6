"""
Configuration objects and helpers for the PAYMILL client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

from .environment import build_environment
from .errors import ConfigError

__all__ = [
    "ConfigError",
    "DEFAULT_API_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "PaymillConfig",
    "PaymillParameters",
    "load_paymill_config",
]

DEFAULT_API_URL = "https://api.paymill.com/v2.1"
DEFAULT_TIMEOUT_SECONDS = 30

_PARAMETER_TO_ENV_KEY = {
    "api_key": "PAYMILL_API_KEY",
    "api_url": "PAYMILL_API_URL",
    "timeout_seconds": "PAYMILL_TIMEOUT_SECONDS",
}


@dataclass(frozen=True)
class PaymillParameters:
    """
    Explicit parameter bundle for constructing :class:`PaymillConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_paymill_config`.
    """

    api_key: Optional[str] = None
    api_url: Optional[str] = None
    timeout_seconds: Optional[int | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = str(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[PaymillParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        overrides[_PARAMETER_TO_ENV_KEY[key]] = str(value)
    return overrides


def _normalize_api_key(raw_key: Optional[str]) -> str:
    key = (raw_key or "").strip()
    if not key:
        raise ConfigError("PAYMILL_API_KEY must be provided")
    return key


def _normalize_api_url(raw_url: str) -> str:
    url = raw_url.strip().rstrip("/")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"PAYMILL_API_URL is not a valid http(s) URL: '{raw_url}'")
    return url


def _parse_timeout(raw_timeout: str) -> int:
    try:
        timeout = int(raw_timeout)
    except ValueError as exc:
        raise ConfigError(
            f"PAYMILL_TIMEOUT_SECONDS must be an integer, got '{raw_timeout}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("PAYMILL_TIMEOUT_SECONDS must be greater than zero")
    return timeout


@dataclass(frozen=True)
class PaymillConfig:
    """
    Immutable client settings, injected into every service at construction.
    """

    api_key: str
    api_url: str = DEFAULT_API_URL
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    def __repr__(self) -> str:
        return (
            f"PaymillConfig(api_key='***', api_url={self.api_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r})"
        )

    @property
    def auth(self) -> tuple[str, str]:
        """HTTP Basic credentials: the API key with an empty password."""
        return (self.api_key, "")

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "PaymillConfig":
        return cls(
            api_key=_normalize_api_key(values.get("PAYMILL_API_KEY")),
            api_url=_normalize_api_url(values.get("PAYMILL_API_URL", DEFAULT_API_URL)),
            timeout_seconds=_parse_timeout(
                values.get("PAYMILL_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
            ),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[PaymillParameters] = None,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout_seconds: Optional[int | str] = None,
    ) -> "PaymillConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "api_key": api_key,
                "api_url": api_url,
                "timeout_seconds": timeout_seconds,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        try:
            return cls.from_mapping(environment.variables)
        except ConfigError as exc:
            raise ConfigError(
                f"{exc.message} (resolved from: {environment.describe()})",
                details={"sources": dict(environment.sources)},
            ) from exc


def load_paymill_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[PaymillParameters] = None,
    api_key: Optional[str] = None,
    api_url: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
) -> PaymillConfig:
    """
    Convenience wrapper that mirrors :meth:`PaymillConfig.from_env`.

    The configuration can be provided entirely through environment variables,
    a ``.env`` file, direct keyword arguments, or any combination of the three.
    """
    return PaymillConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        api_key=api_key,
        api_url=api_url,
        timeout_seconds=timeout_seconds,
    )
