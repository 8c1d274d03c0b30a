import dataclasses

ACTION_PASS = "pass"
ACTION_FAIL = "fail"


@dataclasses.dataclass(frozen=True)
class TestEvent:
    """A single line of `go test -json` output."""

    __test__ = False

    action: str = ""
    package: str = ""
    test: str = ""
    elapsed: float = 0.0
    output: str = ""

    @property
    def passed(self):
        return self.action == ACTION_PASS

    @property
    def failed(self):
        return self.action == ACTION_FAIL

    @property
    def is_test(self):
        return self.test != ""

    def __str__(self):
        return f"TestEvent(action={self.action},package={self.package},test={self.test},elapsed={self.elapsed})"
