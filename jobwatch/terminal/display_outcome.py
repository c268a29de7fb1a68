from enum import Enum


class DisplayOutcome(Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"

    @property
    def exit_code(self) -> int:
        return 0 if self is DisplayOutcome.SUCCESS else 1

    def __bool__(self) -> bool:
        return self is DisplayOutcome.SUCCESS


def exit_on_failure(outcome: DisplayOutcome):
    """Terminate the process with a non-zero status if ``outcome`` is a failure."""
    if outcome is DisplayOutcome.FAILURE:
        raise SystemExit(outcome.exit_code)
