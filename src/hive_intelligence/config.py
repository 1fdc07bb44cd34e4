"""
Configuration helpers for the Hive Intelligence plugin.

Two sources can provide :class:`HiveSettings`:

* The host agent configuration handed to :meth:`HivePlugin.initialize`, where the
  credential lives at ``settings.secrets.HIVE_API_KEY``. Use
  :func:`settings_from_agent_config` for this path.
* A TOML secrets file. The lookup order is:

  1. Explicit ``HIVE_SECRETS_PATH`` environment variable.
  2. Project-relative ``.secrets/secret.toml`` (from CWD and the project root).
  3. Project-relative ``.secrets/secrets.toml``.
  4. Fallback to ``.secrets/secrets.example.toml`` for scaffolding values.

  Values are read from the ``[hive]`` section; ``HIVE_API_KEY`` in the
  environment fills in a missing key. Use :func:`load_secrets`.

A missing credential is a valid configuration: the plugin then answers every
query with mocked text instead of calling the remote endpoint.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional

DEFAULT_ENDPOINT = "https://api.hiveintelligence.xyz/v1/search"
DEFAULT_TEMPERATURE = 0.5
DEFAULT_INCLUDE_DATA_SOURCES = False
DEFAULT_USER_AGENT = "HivePythonPlugin/1.0"
AGENT_SECRET_KEY = "HIVE_API_KEY"


def _looks_like_placeholder(value: str) -> bool:
    trimmed = value.strip()
    return not trimmed or (trimmed.startswith("<") and trimmed.endswith(">"))


def _clean_key(value: object) -> Optional[str]:
    if not isinstance(value, str) or _looks_like_placeholder(value):
        return None
    return value.strip()


@dataclass(frozen=True, slots=True)
class HiveSettings:
    """Credential and request parameters for the Hive Intelligence search endpoint."""

    api_key: Optional[str] = None
    endpoint: str = DEFAULT_ENDPOINT
    temperature: float = DEFAULT_TEMPERATURE
    include_data_sources: bool = DEFAULT_INCLUDE_DATA_SOURCES
    timeout: Optional[float] = None
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        object.__setattr__(self, "api_key", _clean_key(self.api_key))

    @property
    def has_credential(self) -> bool:
        return self.api_key is not None


@dataclass(slots=True)
class SecretsBundle:
    """Lightweight container for parsed secret values."""

    source_path: Optional[Path]
    data: Dict[str, Dict[str, object]]
    hive: HiveSettings = field(default_factory=HiveSettings)


def _lookup(container: Any, key: str) -> Any:
    if container is None:
        return None
    if isinstance(container, Mapping):
        return container.get(key)
    return getattr(container, key, None)


def settings_from_agent_config(agent_config: Any) -> HiveSettings:
    """
    Build settings from a host agent configuration.

    The credential is read from ``settings.secrets.HIVE_API_KEY``. Both mappings
    and attribute-style objects are accepted at every level; anything missing
    along the way yields settings without a credential.
    """

    secrets = _lookup(_lookup(agent_config, "settings"), "secrets")
    return HiveSettings(api_key=_lookup(secrets, AGENT_SECRET_KEY))


def _discover_project_root() -> Optional[Path]:
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / "pyproject.toml").is_file():
            return parent
    return None


def _candidate_paths() -> Iterable[Path]:
    env_override = os.getenv("HIVE_SECRETS_PATH")
    if env_override:
        yield Path(env_override).expanduser()

    search_roots = [Path.cwd()]
    package_root = _discover_project_root()
    if package_root and package_root not in search_roots:
        search_roots.append(package_root)

    for base in search_roots:
        secrets_dir = base / ".secrets"
        for filename in ("secret.toml", "secrets.toml", "secrets.example.toml"):
            yield secrets_dir / filename


def _load_toml(path: Path) -> Dict[str, Dict[str, object]]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _extract_hive_settings(raw: Mapping[str, object]) -> HiveSettings:
    section = raw.get("hive", {})
    if not isinstance(section, Mapping):
        section = {}

    api_key = _clean_key(section.get("api_key")) or _clean_key(os.getenv(AGENT_SECRET_KEY))
    endpoint = section.get("endpoint")
    temperature = section.get("temperature")
    include_data_sources = section.get("include_data_sources")
    timeout = section.get("timeout")
    user_agent = section.get("user_agent")

    return HiveSettings(
        api_key=api_key,
        endpoint=endpoint if isinstance(endpoint, str) and endpoint else DEFAULT_ENDPOINT,
        temperature=float(temperature) if isinstance(temperature, (int, float)) and not isinstance(temperature, bool) else DEFAULT_TEMPERATURE,
        include_data_sources=include_data_sources if isinstance(include_data_sources, bool) else DEFAULT_INCLUDE_DATA_SOURCES,
        timeout=float(timeout) if isinstance(timeout, (int, float)) and not isinstance(timeout, bool) else None,
        user_agent=user_agent if isinstance(user_agent, str) and user_agent else DEFAULT_USER_AGENT,
    )


def load_secrets(strict: bool = False) -> SecretsBundle:
    """
    Attempt to load secrets from the configured locations.

    Parameters
    ----------
    strict:
        When ``True`` the function raises ``FileNotFoundError`` if no secrets file is
        discovered. Defaults to ``False`` so development environments fall back to
        the ``HIVE_API_KEY`` environment variable or mocked mode.
    """

    for path in _candidate_paths():
        if path.is_file():
            data = _load_toml(path)
            return SecretsBundle(source_path=path, data=data, hive=_extract_hive_settings(data))

    if strict:
        raise FileNotFoundError("No secrets file found. Configure HIVE_SECRETS_PATH or .secrets/secret.toml.")

    return SecretsBundle(source_path=None, data={}, hive=_extract_hive_settings({}))
