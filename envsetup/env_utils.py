"""Reading and writing of .env and .env.example files."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Mapping, Union

PathLike = Union[str, "os.PathLike[str]"]

_QUOTE_TRIGGERS = frozenset(' #="$\\`\n\r')


@dataclass(frozen=True)
class EnvVar:
    """A variable declared in a .env.example template."""

    key: str
    description: str = ""
    example_value: str = ""


def _unquote(value: str) -> str:
    """Strip surrounding double quotes and undo the basic escapes."""
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        inner = value[1:-1]
        inner = inner.replace("\\\\", "\\")
        return inner.replace('\\"', '"')
    return value


def _meaningful_lines(path: PathLike) -> Iterator[str]:
    """Yield stripped lines that are neither blank nor comments."""
    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.strip()
            if line and not line.startswith("#"):
                yield line


def read_env_vars_from_file(path: PathLike) -> list[EnvVar]:
    """Parse a .env.example template into a list of EnvVar entries."""
    env_vars: list[EnvVar] = []
    for line in _meaningful_lines(path):
        key_value, sep, comment = line.partition("#")
        description = comment.strip() if sep else ""
        key_value = key_value.strip()

        key, has_value, raw_value = key_value.partition("=")
        key = key.strip()
        example_value = _unquote(raw_value.strip()) if has_value else ""

        if key:
            env_vars.append(EnvVar(key, description, example_value))
    return env_vars


def _format_value(value: str) -> str:
    if value and not (_QUOTE_TRIGGERS & set(value)):
        return value
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f'"{escaped}"'


def write_env_file(values: Mapping[str, str], path: PathLike = ".env") -> None:
    """Create or overwrite a .env file holding the given values."""
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        for key, value in values.items():
            handle.write(f"{key}={_format_value(value)}\n")


def read_existing_env_file(path: PathLike) -> dict[str, str]:
    """Read key/value pairs from a .env file; a missing file gives an empty dict."""
    values: dict[str, str] = {}
    try:
        lines = list(_meaningful_lines(path))
    except FileNotFoundError:
        return values
    except OSError as exc:
        raise OSError(f"error opening {path}: {exc}") from exc

    for line in lines:
        key, sep, value = line.partition("=")
        if sep:
            values[key.strip()] = _unquote(value)
    return values


def backup_env_file(src: PathLike, dst: PathLike) -> None:
    """Copy src to dst and flush the copy to disk."""
    try:
        source = open(src, "rb")
    except OSError as exc:
        raise OSError(f"failed to open source file {src}: {exc}") from exc

    with source:
        try:
            destination = open(dst, "wb")
        except OSError as exc:
            raise OSError(f"failed to create destination file {dst}: {exc}") from exc
        with destination:
            try:
                shutil.copyfileobj(source, destination)
            except OSError as exc:
                raise OSError(f"failed to copy from {src} to {dst}: {exc}") from exc
            try:
                destination.flush()
                os.fsync(destination.fileno())
            except OSError as exc:
                raise OSError(f"failed to sync destination file {dst}: {exc}") from exc


__all__ = [
    "EnvVar",
    "read_env_vars_from_file",
    "write_env_file",
    "read_existing_env_file",
    "backup_env_file",
    "Path",
]