"""Checks with messages and checks delegated to a helper.

Run directly with ``python examples/acu_advanced_asserts.py``.
"""

from acunit import Suite

suite = Suite("advanced_asserts")


@suite.test
def acu_assert_with_message(acu):
    a = 1
    b = 1
    acu.check(a == b, "a and b are different")


# A helper that performs checks receives the engine from its caller.
def check_some_condition(acu):
    a = 1
    b = 1
    c = 2
    if not acu.check(a == b):
        return
    acu.check(a != c)


@suite.test
def acu_assert_no_fatal_failure(acu):
    if not acu.guard(check_some_condition, acu):
        return


if __name__ == "__main__":
    suite.main()
