import math
from typing import Sequence, Tuple
from stepsearch.search.base import (
    AlgorithmDescriptor,
    AlgorithmInfo,
    Number,
    SearchAlgorithm,
    SearchStep,
    StepProducer,
)


class InterpolationSearchProducer(StepProducer):
    """
    Interpolation Search step producer.

    Estimates where the target should sit inside `[low, high]` from the
    values at both ends, assuming a sorted and roughly uniform array. The
    search stops with NotFound as soon as the interval empties or the target
    falls outside `[arr[low], arr[high]]`.

    When every remaining value is equal the value span is zero; the span is
    then taken as 1, which places the probe at `low`.
    """

    def __init__(self, array: Sequence[Number], target: Number):
        super().__init__(array, target)
        self.low = 0
        self.high = len(self.snapshot) - 1

    def _in_bracket(self) -> bool:
        return (
            self.low <= self.high
            and self.snapshot[self.low] <= self.target <= self.snapshot[self.high]
        )

    def _estimate(self) -> int:
        low_value = self.snapshot[self.low]
        span = (self.snapshot[self.high] - low_value) or 1
        return self.low + math.floor((self.high - self.low) / span * (self.target - low_value))

    def _advance(self) -> SearchStep:
        if not self._in_bracket():
            return self._not_found()

        pos = self._estimate()
        step = self._compare(pos)
        if self.snapshot[pos] < self.target:
            self.low = pos + 1
        elif self.snapshot[pos] > self.target:
            self.high = pos - 1
        return step


class InterpolationSearch(SearchAlgorithm):
    descriptor = AlgorithmDescriptor(
        identifier="interpolation",
        display_name="Interpolation Search",
        explanation=AlgorithmInfo(
            how=(
                "Estimates the position of the target based on the value, like a smarter binary search. "
                "Works best on uniformly distributed sorted arrays."
            ),
            pros="O(log log n) for uniform data, faster than binary in best case.",
            cons="Requires sorted, uniformly distributed array.",
        ),
    )

    def create_producer(self, array: Sequence[Number], target: Number) -> InterpolationSearchProducer:
        return InterpolationSearchProducer(array, target)

    def comparison_bounds(self, n: int) -> Tuple[int, int]:
        if n <= 0:
            return 0, 0
        return 1, math.ceil(math.log2(n))
