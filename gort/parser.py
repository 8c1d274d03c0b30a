from typing import Union

import orjson

from .events import TestEvent

# json key -> (attribute, accepted types)
FIELDS = {
    "Action": ("action", (str,)),
    "Package": ("package", (str,)),
    "Test": ("test", (str,)),
    "Elapsed": ("elapsed", (int, float)),
    "Output": ("output", (str,)),
}


class DecodeError(ValueError):
    def __init__(self, msg, line):
        super().__init__(f"failed to decode JSON. {msg}")
        self.line = line


def parse_line(data: Union[str, bytes]) -> TestEvent:
    try:
        obj = orjson.loads(data)
    except orjson.JSONDecodeError as e:
        raise DecodeError(str(e), data) from e

    if not isinstance(obj, dict):
        raise DecodeError(f"expected an object, got {type(obj).__name__}", data)

    kwargs = {}
    for key, (attr, types) in FIELDS.items():
        value = obj.get(key)
        if value is None:
            continue
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, types):
            raise DecodeError(f"field {key} has invalid type {type(value).__name__}", data)
        kwargs[attr] = value

    if "elapsed" in kwargs:
        kwargs["elapsed"] = float(kwargs["elapsed"])

    return TestEvent(**kwargs)
