from typing import Protocol


class RandomSourcePort(Protocol):
    def randint(self, a: int, b: int) -> int:
        """Uniform integer N such that a <= N <= b."""
