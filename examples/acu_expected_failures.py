"""Failing checks, to show diagnostics and the failure summary."""

from acunit import Suite

suite = Suite("expected_failures")


def check_positive(acu, value):
    acu.check(value > 0, f"got {value}")


@suite.test
def acu_three_is_not_four(acu):
    if not acu.check(3 == 4):
        return
    print("not reached")


@suite.test
def acu_helper_failure_stops_the_test(acu):
    if not acu.guard(check_positive, acu, -1):
        return
    print("not reached")


if __name__ == "__main__":
    suite.main()
