from dataclasses import dataclass


@dataclass(frozen=True)
class EdgeCandidate:
    """
    A detected colour transition inside a 1-D texture.

    position:  index i of the left sample of the pair (i, i + 1)
    magnitude: signed colour difference reported by the distance function
    """

    position: int
    magnitude: float

    @property
    def strength(self) -> float:
        return abs(self.magnitude)
