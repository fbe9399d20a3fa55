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

BLOCK_PHASE = "blocks"
SCAN_PHASE = "scan"


class JumpSearchProducer(StepProducer):
    """
    Jump Search step producer.

    Works in two phases over a sorted array:

    1. Block probing: jumps `block_size = floor(sqrt(n))` elements at a time,
       probing the last element of each block while it is smaller than the
       target. Probe steps never carry an outcome.
    2. Scan: walks the block `[prev, min(curr, n))` element by element.

    Attributes:
        block_size (int): Jump length.
        prev (int): Start of the block that may hold the target.
        curr (int): End (exclusive) of that block.
        phase (str): Either BLOCK_PHASE or SCAN_PHASE.
        position (int): Next index to inspect during the scan.
    """

    def __init__(self, array: Sequence[Number], target: Number):
        super().__init__(array, target)
        n = len(self.snapshot)
        self.block_size = math.isqrt(n)
        self.prev = 0
        self.curr = self.block_size
        self.phase = BLOCK_PHASE
        self.position = 0

    def _advance(self) -> SearchStep:
        n = len(self.snapshot)
        if self.phase == BLOCK_PHASE:
            probe = min(self.curr, n) - 1
            if n > 0 and self.curr <= n and self.snapshot[probe] < self.target:
                self.prev = self.curr
                self.curr += self.block_size
                return self._compare(probe)
            self.phase = SCAN_PHASE
            self.position = self.prev

        if self.position < min(self.curr, n):
            index = self.position
            self.position += 1
            return self._compare(index)
        return self._not_found()


class JumpSearch(SearchAlgorithm):
    descriptor = AlgorithmDescriptor(
        identifier="jump",
        display_name="Jump Search",
        explanation=AlgorithmInfo(
            how="Checks elements at fixed intervals (blocks), then does linear search in the block where the target may be.",
            pros="Faster than linear for sorted arrays (O(√n)).",
            cons="Requires sorted array.",
        ),
    )

    def create_producer(self, array: Sequence[Number], target: Number) -> JumpSearchProducer:
        return JumpSearchProducer(array, target)

    def comparison_bounds(self, n: int) -> Tuple[int, int]:
        if n <= 0:
            return 0, 0
        return 1, 2 * math.ceil(math.sqrt(n))
