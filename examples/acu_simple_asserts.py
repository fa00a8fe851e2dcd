"""Two passing checks, collected by ``acunit examples/``."""


def acu_integers_are_equal(acu):
    x = 3
    y = 3
    acu.check(x == y)


def acu_strings_are_not_equal(acu):
    s = "abc"
    t = "def"
    acu.check(s != t)
