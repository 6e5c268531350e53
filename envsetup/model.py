"""Collecting, diffing and saving .env values based on a .env.example template."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Sequence, Union

from envsetup.env_utils import (
    EnvVar,
    backup_env_file,
    read_env_vars_from_file,
    read_existing_env_file,
    write_env_file,
)

EXAMPLE_FILE = ".env.example"
ENV_FILE = ".env"
BACKUP_FILE = ".env.old"
NO_CHANGES = "No changes to apply to .env file."


class SetupError(Exception):
    """Raised when the .env setup cannot proceed."""


def build_diff(
    env_vars: Sequence[EnvVar],
    existing: Mapping[str, str],
    collected: Mapping[str, str],
) -> list[str]:
    """Describe how collected values differ from existing ones, one line per change."""
    lines: list[str] = []
    for env_var in env_vars:
        key = env_var.key
        new_value = collected.get(key, "")
        if key not in existing:
            lines.append(f'+ Added: {key}="{new_value}"')
            continue
        old_value = existing[key]
        if new_value == old_value:
            continue
        if new_value == "":
            lines.append(f'~ Cleared: {key} (was "{old_value}")')
        else:
            lines.append(f'~ Changed: {key}: "{old_value}" -> "{new_value}"')
    return lines


class EnvSetup:
    """State of one setup session for the .env file in a directory."""

    def __init__(self, directory: Union[str, "os.PathLike[str]"] = ".") -> None:
        self.directory = Path(directory)
        self.env_vars: list[EnvVar] = []
        self.existing: dict[str, str] = {}
        self.diff_summary = ""
        self.values_to_save: dict[str, str] | None = None

    @property
    def env_path(self) -> Path:
        return self.directory / ENV_FILE

    @property
    def backup_path(self) -> Path:
        return self.directory / BACKUP_FILE

    def load(self) -> None:
        """Read the template and any existing .env file."""
        try:
            self.env_vars = read_env_vars_from_file(self.directory / EXAMPLE_FILE)
        except OSError as exc:
            raise SetupError(
                f"Error reading {EXAMPLE_FILE}: {exc}. "
                "Please create one to use as a template."
            ) from exc
        if not self.env_vars:
            raise SetupError(f"No environment variables found in {EXAMPLE_FILE}.")

        try:
            self.existing = read_existing_env_file(self.env_path)
        except OSError as exc:
            print(f"Warning: could not read existing .env file to prefill: {exc}")
            self.existing = {}

    def initial_values(self) -> dict[str, str]:
        """Values to prefill: the existing value, or the example when that is empty."""
        values: dict[str, str] = {}
        for env_var in self.env_vars:
            value = self.existing.get(env_var.key, "")
            if not value and env_var.example_value:
                value = env_var.example_value
            values[env_var.key] = value
        return values

    def prepare(self, values: Mapping[str, str]) -> bool:
        """Record the values to save and their diff; return whether anything changed."""
        collected: dict[str, str] = {}
        for env_var in self.env_vars:
            value = values.get(env_var.key)
            if not isinstance(value, str):
                raise SetupError(f"error: could not read value for key {env_var.key}")
            collected[env_var.key] = value

        diff = build_diff(self.env_vars, self.existing, collected)
        if not diff:
            self.diff_summary = NO_CHANGES
            self.values_to_save = None
            return False

        self.values_to_save = collected
        self.diff_summary = "\n".join(diff)
        return True

    def _backup(self) -> None:
        try:
            is_dir = self.env_path.is_dir()
            exists = self.env_path.exists()
        except OSError as exc:
            print(f"Warning: Error checking .env for backup: {exc}")
            return
        if not exists:
            return
        if is_dir:
            print("Warning: .env exists but is a directory. Skipping backup.")
            return
        print("\nBacking up existing .env to .env.old...")
        try:
            backup_env_file(self.env_path, self.backup_path)
        except OSError as exc:
            print(f"Warning: Failed to backup .env: {exc}")
        else:
            print("Successfully backed up .env to .env.old.")

    def save(self) -> None:
        """Back up any existing .env and write the prepared values."""
        if self.values_to_save is None:
            raise SetupError("error: no prepared values to save")
        self._backup()
        try:
            write_env_file(self.values_to_save, self.env_path)
        except OSError as exc:
            print(f"\nError writing .env file: {exc}")
            raise SetupError(f"error writing .env file: {exc}") from exc
        print("\n✅ Successfully updated the .env file!")