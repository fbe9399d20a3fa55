import time
import random
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from stepsearch.search.base import NOT_FOUND_INDEX, Number, SearchAlgorithm, SearchStep, StepProducer
from stepsearch.search.registry import DEFAULT_ALGORITHM, get_algorithm
from stepsearch.config.config import LOGGER_NAME
from stepsearch.driver.inputs import SessionStateError, random_array


@dataclass
class RunStats:
    """Cumulative statistics of the current run."""
    comparisons: int = 0
    elapsed: float = 0.0
    found: Optional[bool] = None
    index: int = NOT_FOUND_INDEX

    @property
    def result(self) -> str:
        if self.found is None:
            return "-"
        return f"Found at index {self.index}" if self.found else "Not found"


class SearchSession:
    """
    Run state of the visualizer.

    Holds the array, the selected algorithm and at most one active step
    producer. Starting a run, switching algorithm or resetting always drops
    the previous producer; nothing else has to be cancelled since producers
    own no resources.

    Attributes:
        algorithm (SearchAlgorithm): Algorithm used by the next run.
        array (List[Number]): Values shown and searched.
        original_array (List[Number]): Values restored by `reset()`.
        target (Optional[Number]): Target of the current run.
        stats (RunStats): Statistics of the current run.
        last_step (Optional[SearchStep]): Most recent step of the current run.
    """

    def __init__(
        self,
        algorithm: str = DEFAULT_ALGORITHM,
        array: Sequence[Number] = (),
        rng: Optional[random.Random] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.algorithm: SearchAlgorithm = get_algorithm(algorithm)
        self.array: List[Number] = list(array)
        self.original_array: List[Number] = list(array)
        self.target: Optional[Number] = None
        self.stats = RunStats()
        self.last_step: Optional[SearchStep] = None
        self.rng = rng or random.Random()
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self._producer: Optional[StepProducer] = None
        self._started_at = 0.0

    @property
    def running(self) -> bool:
        return self._producer is not None

    def set_array(self, values: Sequence[Number]) -> None:
        self._abandon("array replaced")
        self.array = list(values)
        self.original_array = list(values)
        self.stats = RunStats()
        self.last_step = None

    def randomize(self, min_length: int = 20, max_length: int = 30,
                  min_value: int = 1, max_value: int = 40) -> int:
        """Replace the array with random sorted values and return a target taken from it."""
        values, target = random_array(self.rng, min_length, max_length, min_value, max_value)
        self.set_array(values)
        self.logger.info("Generated random array of %d values, suggested target %s", len(values), target)
        return target

    def select_algorithm(self, identifier: str) -> bool:
        """
        Switch the algorithm used by the next run.

        Returns:
            bool: False when the algorithm was already selected, nothing is
            reset in that case.

        Raises:
            UnknownAlgorithmError: If the identifier is not registered.
        """
        algorithm = get_algorithm(identifier)
        if algorithm is self.algorithm:
            return False
        self.algorithm = algorithm
        self.reset()
        self.logger.info("Selected algorithm: %s", algorithm.descriptor.display_name)
        return True

    def start(self, target: Number) -> None:
        """
        Begin a new run over a copy of the current array.

        Raises:
            SessionStateError: If a run is already in progress.
        """
        if self.running:
            raise SessionStateError("A search is already running")

        self.target = target
        self.stats = RunStats()
        self.last_step = None
        self._producer = self.algorithm.create_producer(list(self.array), target)
        self._started_at = time.time()
        self.logger.info(
            "Starting %s for target %s over %d values",
            self.algorithm.identifier,
            target,
            len(self.array),
        )

    def step(self) -> Tuple[SearchStep, bool]:
        """
        Resume the active producer once and fold the step into the stats.

        Returns:
            Tuple[SearchStep, bool]: The step and whether more steps follow.

        Raises:
            SessionStateError: If no run is in progress.
        """
        if self._producer is None:
            raise SessionStateError("No search is running")

        step, has_more = self._producer.resume()
        self.last_step = step
        self.stats.comparisons = step.comparison_count
        self.stats.elapsed = time.time() - self._started_at
        self.logger.debug(
            "Step: comparing=%s comparisons=%d",
            list(step.comparing_indices),
            step.comparison_count,
        )

        if not has_more:
            self.stats.found = step.outcome.is_found
            self.stats.index = step.outcome.index
            self._producer = None
            self.logger.info(
                "%s finished: %s after %d comparisons (%.2fs)",
                self.algorithm.identifier,
                step.outcome,
                self.stats.comparisons,
                self.stats.elapsed,
            )
        return step, has_more

    def play(
        self,
        delay: float,
        on_step: Optional[Callable[[SearchStep, RunStats], None]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> RunStats:
        """
        Drive the active run to its terminal step.

        Args:
            delay: Seconds to wait between two resumes.
            on_step: Called with every step and the updated stats.
            sleep: Pacing function, `time.sleep` by default.

        Returns:
            RunStats: Statistics of the finished run.
        """
        has_more = True
        while has_more:
            step, has_more = self.step()
            if on_step is not None:
                on_step(step, self.stats)
            if has_more and delay > 0:
                sleep(delay)
        return self.stats

    def reset(self) -> None:
        """Abandon the current run and restore the original array."""
        self._abandon("reset")
        self.array = list(self.original_array)
        self.stats = RunStats()
        self.last_step = None

    def bounds(self) -> Tuple[int, int]:
        return self.algorithm.comparison_bounds(len(self.array))

    def _abandon(self, reason: str) -> None:
        if self._producer is not None:
            self.logger.info("Abandoning %s run: %s", self.algorithm.identifier, reason)
            self._producer = None
