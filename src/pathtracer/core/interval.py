# core/interval.py
class Interval:
    """
    An open numeric range used to bound the parameter t along a ray.
    """
    __slots__ = ("min", "max")

    def __init__(self, min: float, max: float):
        self.min = min
        self.max = max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"
