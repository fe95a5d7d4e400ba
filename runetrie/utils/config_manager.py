# config_manager.py - JSON config for the benchmark harness

import json
import logging
import os

logger = logging.getLogger(__name__)


class Config:
    def __init__(self, path=None):
        self.path = path
        self.data = {
            "runs": 200,
            "warmup": 20,
            "alphabet": "ABC",        # search strings are built from these
            "noise_alphabet": "DEF",  # extra stored strings that never match a search
            "depth": 3,
        }
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("ignoring config %s: expected a JSON object", self.path)
            return
        for k, v in loaded.items():
            if k in self.data:
                self.set(k, v)
            else:
                logger.warning("unknown config option %r in %s", k, self.path)

    def save(self):
        if not self.path:
            raise ValueError("config has no path to save to")
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"no such option: {key}")
        self.data[key] = type(self.data[key])(val)

    def show(self):
        return "\n".join(f"{k:15} = {v}" for k, v in self.data.items())
