import random


class RandomSource:
    """필드 하나가 공유하는 난수 생성기 (시드 고정 가능)"""

    def __init__(self, seed=None):
        self._rng = random.Random(seed)

    def next_float(self) -> float:
        return self._rng.random()

    def next_int(self, lo: int, hi: int) -> int:
        # [lo, hi) 반열린 구간
        return self._rng.randrange(lo, hi)
