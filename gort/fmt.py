from .events import ACTION_FAIL, ACTION_PASS, TestEvent

COLOR_SUCCESS = "\033[32m"
COLOR_FAILURE = "\033[31m"
COLOR_RESET = "\033[0m"

GLYPH_PASS = "✓"
GLYPH_FAIL = "✗"

SUBTEST_SEPARATOR = "/"


def is_relevant(event: TestEvent) -> bool:
    """Only per-test pass/fail outcomes are shown; package summaries and
    run/output/skip events are not."""
    return event.action in (ACTION_PASS, ACTION_FAIL) and event.test != ""


def display_name(test: str) -> str:
    """
    Human-readable name of a test
    :param test: test name as reported by go test, e.g. "Parent_Test/Child_Case"
    :return: underscores replaced by spaces, parent prefix dropped ("Child Case")
    """
    name = test.replace("_", " ")
    if SUBTEST_SEPARATOR in name:
        name = name.split(SUBTEST_SEPARATOR, maxsplit=1)[1]
    return name


def render(event: TestEvent) -> str:
    if not is_relevant(event):
        raise ValueError(f"unable to render irrelevant event {event}")

    if event.passed:
        return f"{COLOR_SUCCESS}{GLYPH_PASS} {display_name(event.test)}{COLOR_RESET}"

    return f"{COLOR_FAILURE}{GLYPH_FAIL} {display_name(event.test)}{COLOR_RESET}"
