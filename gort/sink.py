import sys

from .events import TestEvent


class BaseSink:
    def submit(self, event: TestEvent, text: str):
        pass

    def flush(self):
        pass

    def finish(self):
        pass


class ConsoleSink(BaseSink):
    def __init__(self, stream=None):
        self.stream = stream or sys.stdout

    def submit(self, event: TestEvent, text: str):
        self.stream.write(text)
        self.stream.write("\n")

    def flush(self):
        self.stream.flush()

    def finish(self):
        self.flush()
