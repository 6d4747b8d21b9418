import pytest


class ScriptedRandom:
    """정해진 순서대로 값을 돌려주는 난수원"""

    def __init__(self, floats=(), ints=()):
        self.floats = list(floats)
        self.ints = list(ints)

    def next_float(self):
        return self.floats.pop(0)

    def next_int(self, lo, hi):
        value = self.ints.pop(0)
        assert lo <= value < hi, f"{value} not in [{lo}, {hi})"
        return value


@pytest.fixture
def scripted():
    return ScriptedRandom
