"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups. ``AppConfig.from_env`` builds one from
environment variables, optionally merged with a dotenv file.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path

from essentio.errors import ConfigurationError

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


def load_env_file(path: str | Path) -> dict[str, str]:
    """Parse a dotenv file of ``KEY=VALUE`` lines.

    Blank lines and ``#`` comments are skipped, an optional ``export``
    prefix is dropped and matching surrounding quotes are stripped.
    A missing file yields an empty dict.
    """
    env_path = Path(path)
    if not env_path.is_file():
        return {}

    values: dict[str, str] = {}
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip().removeprefix("export ").strip()
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        values[key] = value
    return values


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    msg = f"{name} must be a boolean, got {value!r}"
    raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, base_path="/srv/app")
    """

    debug: bool = False

    # Directory ``App.from_base()`` resolves against
    base_path: str | Path = "."

    # Templates
    template_dir: str | Path = "templates"
    autoescape: bool = True

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        prefix: str = "ESSENTIO_",
        env_file: str | Path | None = None,
    ) -> "AppConfig":
        """Build a config from ``{prefix}{FIELD}`` variables.

        Values from *env_file* are used first; *environ* (default
        ``os.environ``) overrides them. Unknown variables are ignored.
        """
        source: dict[str, str] = {}
        if env_file is not None:
            source.update(load_env_file(env_file))
        source.update(os.environ if environ is None else environ)

        overrides: dict[str, object] = {}
        for f in fields(cls):
            key = f"{prefix}{f.name.upper()}"
            if key not in source:
                continue
            value = source[key]
            overrides[f.name] = _parse_bool(key, value) if f.type in (bool, "bool") else value
        return cls(**overrides)
