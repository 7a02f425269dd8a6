# config_manager.py - JSON config manager

import json
import os

from lexicon_trie.utils.logger_utils import log

DEFAULTS = {
    "words_dir": "words",        # where bare word-list names are looked up
    "max_distance": 1,           # default budget for correction suggestions
    "max_results": 20,           # rows shown by the cli/tui
    "count_duplicates": True,    # re-inserting a word bumps the counter
    "prune_on_remove": False,    # drop dead branches after remove
    "color": True,
}

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


class Config:
    def __init__(self, path="lexicon_config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    stored = json.load(f)
            except (OSError, ValueError) as e:
                log.warning(f"config {self.path} unreadable, using defaults: {e}")
                return
            if isinstance(stored, dict):
                self.data.update({k: v for k, v in stored.items() if k in DEFAULTS})
        else:
            self.save()

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def __getitem__(self, key):
        return self.data[key]

    def show(self):
        """Rows of (key, value) for display."""
        return [(k, v) for k, v in self.data.items()]

    def set(self, key, val) -> bool:
        """Set an option, coerced to the default's type. False if rejected."""
        if key not in DEFAULTS:
            log.warning(f"config: no such option {key!r}")
            return False
        kind = type(DEFAULTS[key])
        try:
            if kind is bool and isinstance(val, str):
                low = val.strip().lower()
                if low in _TRUE:
                    val = True
                elif low in _FALSE:
                    val = False
                else:
                    raise ValueError(f"not a boolean: {val!r}")
            else:
                val = kind(val)
        except (TypeError, ValueError) as e:
            log.warning(f"config: bad value for {key}: {e}")
            return False
        self.data[key] = val
        self.save()
        return True
