# config_manager.py - JSON config manager

import json
import os

from rich.console import Console
from rich.table import Table
from rich import box

DEFAULTS = {
    "list_all_token": "!",  # query token that dumps the whole index
    "sentence_end": ".",
    "subtrie_prefix": "- ",
    "log_level": "WARNING",
    "log_file": None,
}

# an empty marker would match every token
REQUIRED = ("list_all_token", "sentence_end")


class ConfigError(Exception):
    """Config file exists but could not be parsed."""


class Config:
    def __init__(self, path=None):
        self.path = path
        self.data = dict(DEFAULTS)
        if path:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"bad config file {self.path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"config file {self.path} must hold a JSON object")
        for key, val in loaded.items():
            self.set(key, val)

    def __getitem__(self, key):
        return self.data[key]

    def save(self, path=None):
        path = path or self.path
        if not path:
            raise ValueError("no config path to save to")
        with open(path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def show(self, console=None):
        console = console or Console()
        table = Table(title="Config", box=box.SIMPLE)
        table.add_column("Option", style="cyan")
        table.add_column("Value")
        for k, v in self.data.items():
            table.add_row(k, repr(v))
        console.print(table)

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"no such option: {key}")
        default = DEFAULTS[key]
        # None defaults take the value as given
        if default is not None and val is not None:
            val = type(default)(val)
        if key in REQUIRED and not val:
            raise ValueError(f"{key} must not be empty")
        self.data[key] = val
