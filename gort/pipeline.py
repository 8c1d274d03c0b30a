import logging
from typing import List, Union

from .config import Config
from .fmt import is_relevant, render
from .parser import DecodeError, parse_line
from .sink import BaseSink

logger = logging.getLogger(__name__)


class EventPipeline:
    def __init__(self, cfg: Config, sinks: List[BaseSink]):
        self.cfg = cfg
        self.sinks = sinks

    def put(self, line: Union[str, bytes]):
        if not line.strip():
            return

        try:
            event = parse_line(line)
        except DecodeError as e:
            self.on_decode_error(e)
            return

        if not is_relevant(event):
            logger.debug("skip %s", event)
            return

        self.submit(event, render(event))

    def on_decode_error(self, e: DecodeError):
        policy = self.cfg.on_decode_error

        if policy == "fail":
            raise e

        if policy == "warn":
            logger.warning("%s: %r", e, e.line)
        else:
            logger.debug("skip undecodable line %r", e.line)

    def submit(self, event, text):
        for sink in self.sinks:
            sink.submit(event, text)

    def finish(self):
        for sink in self.sinks:
            sink.flush()
            sink.finish()
