"""Persistent settings for mediastamp.

Settings live in ``$XDG_CONFIG_HOME/mediastamp/config.toml`` (``~/.config`` when
XDG_CONFIG_HOME is unset), read with tomli and written with tomli-w. The only
setting today is ``exiftool.command``:

    [exiftool]
    command = "/opt/homebrew/bin/exiftool"

Any setting can be overridden per process with an environment variable named
after its dotted key (``MEDIASTAMP_EXIFTOOL_COMMAND``) and per invocation with
a CLI option.
"""

import contextlib
import os
from pathlib import Path
from typing import Any, TypeVar, cast

import tomli
import tomli_w

_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
CONFIG_DIR = _xdg_config_home / "mediastamp"
CONFIG_FILE = CONFIG_DIR / "config.toml"

ENV_PREFIX = "MEDIASTAMP_"

EXIFTOOL_COMMAND_KEY = "exiftool.command"
DEFAULT_EXIFTOOL_COMMAND = "exiftool"

T = TypeVar("T")

_TRUE_STRINGS = {"1", "true", "yes", "on"}


def load_config() -> dict[str, Any]:
    """Return the parsed config file, or an empty table when there is none."""
    if not CONFIG_FILE.exists():
        return {}
    with CONFIG_FILE.open("rb") as f:
        return tomli.load(f)


def save_setting(key: str, value: Any) -> None:
    """Write *value* under dotted *key*, keeping every other setting.

    Args:
        key: Dotted key, e.g. ``"exiftool.command"``. Missing tables are
            created.
        value: Any TOML-serializable value.
    """
    data = load_config()
    *tables, leaf = key.split(".")
    table = data
    for name in tables:
        table = table.setdefault(name, {})
    table[leaf] = value
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    with CONFIG_FILE.open("wb") as f:
        tomli_w.dump(data, f)


def env_var_for(key: str) -> str:
    """Environment variable overriding dotted *key*.

    ``"exiftool.command"`` maps to ``MEDIASTAMP_EXIFTOOL_COMMAND``.
    """
    return ENV_PREFIX + key.replace(".", "_").upper()


def _find(data: dict[str, Any], key: str) -> Any | None:
    node: Any = data
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node


def _as_type_of(default: T, value: Any) -> T:
    """Convert *value* to *default*'s type; unconvertible values give *default*."""
    if isinstance(default, bool):
        if isinstance(value, str):
            return cast(T, value.strip().lower() in _TRUE_STRINGS)
        return cast(T, value) if isinstance(value, bool) else default
    if isinstance(default, (int, float)):
        with contextlib.suppress(TypeError, ValueError):
            return cast(T, type(default)(value))
        return default
    if isinstance(default, str):
        return cast(T, str(value))
    return cast(T, value)


def resolve_setting(key: str, *, default: T, cli_value: T | None = None) -> T:
    """Resolve *key* with precedence CLI > environment > config file > default.

    Args:
        key: Dotted key path, e.g. ``"exiftool.command"``.
        default: Fallback value; also decides the type env and file values
            are converted to.
        cli_value: Value given on the command line, ``None`` when omitted.

    Returns:
        The first value found, in precedence order.
    """
    if cli_value is not None:
        return cli_value

    from_env = os.environ.get(env_var_for(key))
    if from_env is not None:
        return _as_type_of(default, from_env)

    from_file = _find(load_config(), key)
    if from_file is not None:
        return _as_type_of(default, from_file)

    return default


def get_exiftool_command(cli_value: str | None = None) -> str:
    """The exiftool executable to run, after CLI/env/config overrides."""
    return resolve_setting(
        EXIFTOOL_COMMAND_KEY, default=DEFAULT_EXIFTOOL_COMMAND, cli_value=cli_value
    )


def set_exiftool_command(command: str) -> None:
    """Persist *command* as the default exiftool executable."""
    save_setting(EXIFTOOL_COMMAND_KEY, command)
