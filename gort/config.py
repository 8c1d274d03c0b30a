import configparser
import logging
import os
import shlex
from typing import List

DECODE_ERROR_POLICIES = ("skip", "warn", "fail")

OPTIONS = ("go_bin", "test_args", "on_decode_error", "log_level")


class Config:
    go_bin: str = "go"
    test_args: List[str] = None
    on_decode_error: str = "warn"
    log_level: str = "WARNING"

    def __init__(self):
        self.test_args = []

    def set(self, name, value):
        if value is None:
            return

        if name == "test_args" and isinstance(value, str):
            value = shlex.split(value)
        elif name == "on_decode_error" and value not in DECODE_ERROR_POLICIES:
            raise ValueError(f"invalid on_decode_error {value!r}, expected one of {', '.join(DECODE_ERROR_POLICIES)}")
        elif name == "log_level":
            value = value.upper()
            if not isinstance(logging.getLevelName(value), int):
                raise ValueError(f"invalid log_level {value!r}")

        setattr(self, name, value)

    def load_ini(self, fn):
        cfg = configparser.RawConfigParser()
        if not os.path.isfile(fn):
            raise Exception(f"gort config {fn} is not found")
        cfg.read(fn)

        if "gort" not in cfg:
            return

        for k, v in cfg["gort"].items():
            if k in OPTIONS:
                self.set(k, v)

    def load_env(self, environ=None):
        if environ is None:
            environ = os.environ

        for name in OPTIONS:
            self.set(name, environ.get(f"GORT_{name.upper()}"))
