import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple, Union

Number = Union[int, float]

NOT_FOUND_INDEX = -1


class SearchError(Exception):
    """Base exception for search engine errors."""
    pass


@dataclass(frozen=True)
class Outcome:
    """Definitive result carried by a terminal step."""
    is_found: bool
    index: int = NOT_FOUND_INDEX

    @classmethod
    def found(cls, index: int) -> "Outcome":
        return cls(True, index)

    @classmethod
    def not_found(cls) -> "Outcome":
        return cls(False, NOT_FOUND_INDEX)

    def __str__(self) -> str:
        return f"Found at index {self.index}" if self.is_found else "Not found"


@dataclass(frozen=True)
class SearchStep:
    """
    A single observation produced while a search is running.

    Attributes:
        snapshot (Tuple[Number, ...]): The array as seen by the algorithm.
        comparing_indices (Tuple[int, ...]): Indices under comparison, empty
            on terminal steps.
        comparison_count (int): Comparisons performed so far in this run.
        outcome (Optional[Outcome]): None while the search is ongoing.
    """
    snapshot: Tuple[Number, ...]
    comparing_indices: Tuple[int, ...] = ()
    comparison_count: int = 0
    outcome: Optional[Outcome] = None

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not None


@dataclass(frozen=True)
class AlgorithmInfo:
    how: str
    pros: str
    cons: str


@dataclass(frozen=True)
class AlgorithmDescriptor:
    identifier: str
    display_name: str
    explanation: AlgorithmInfo


class StepProducer(ABC):
    """
    StepProducer Abstract Base Class

    A step producer drives one search run one observable step at a time.
    Concrete producers keep their cursor state (bounds, phase, probe index)
    as plain attributes and implement `_advance()`, which performs exactly
    one comparison or one terminal determination.

    A comparison that hits the target is reported as an ordinary
    comparison-step; the following `resume()` returns the terminal Found
    step with the same comparison count.

    Args:
        array (Sequence[Number]): Values to search. Copied into an immutable
            tuple, the caller's sequence is never touched again.
        target (Number): Value to look for.

    Attributes:
        snapshot (Tuple[Number, ...]): Copy of the input shared by every step.
        target (Number): The searched value.
        comparisons (int): Comparisons performed so far.
        stats (dict): Run statistics (comparisons, time_taken).

    Abstract Methods:
        _advance():
            Performs one unit of work and returns the resulting step.
            Called only while the run is not finished and no match is
            pending.

    Methods:
        resume():
            Returns the next step and whether more steps follow.
        get_stats():
            Returns statistics about the run so far.
    """

    def __init__(self, array: Sequence[Number], target: Number):
        self.snapshot: Tuple[Number, ...] = tuple(array)
        self.target = target
        self.comparisons = 0
        self.stats = {"comparisons": 0, "time_taken": 0.0}
        self._match: Optional[int] = None
        self._terminal: Optional[SearchStep] = None
        self._start_time: Optional[float] = None

    @abstractmethod
    def _advance(self) -> SearchStep:
        pass

    def resume(self) -> Tuple[SearchStep, bool]:
        """
        Advance the run by one logical step.

        Returns:
            Tuple[SearchStep, bool]: The step and a flag that is False iff the
            step is terminal. Once the run has finished the terminal step is
            returned again.
        """
        if self._terminal is not None:
            return self._terminal, False
        if self._start_time is None:
            self._start_time = time.time()

        if self._match is not None:
            step = self._finish(Outcome.found(self._match))
        else:
            step = self._advance()

        self.stats["comparisons"] = self.comparisons
        self.stats["time_taken"] = time.time() - self._start_time
        if step.is_terminal:
            self._terminal = step
            return step, False
        return step, True

    @property
    def finished(self) -> bool:
        return self._terminal is not None

    def __iter__(self) -> Iterator[SearchStep]:
        return self

    def __next__(self) -> SearchStep:
        if self._terminal is not None:
            raise StopIteration
        step, _ = self.resume()
        return step

    def get_stats(self) -> dict:
        return self.stats

    def _compare(self, index: int, detect_match: bool = True) -> SearchStep:
        """Count one comparison at `index` and remember a hit for the next resume."""
        self.comparisons += 1
        if detect_match and self.snapshot[index] == self.target:
            self._match = index
        return SearchStep(self.snapshot, (index,), self.comparisons)

    def _finish(self, outcome: Outcome) -> SearchStep:
        return SearchStep(self.snapshot, (), self.comparisons, outcome)

    def _not_found(self) -> SearchStep:
        return self._finish(Outcome.not_found())


class SearchAlgorithm(ABC):
    """
    Interface shared by every registered search algorithm.

    An algorithm is stateless: it carries its display metadata and knows how
    to build a fresh `StepProducer` for an (array, target) pair and how many
    comparisons a run over `n` elements may take.
    """

    descriptor: AlgorithmDescriptor

    @property
    def identifier(self) -> str:
        return self.descriptor.identifier

    @abstractmethod
    def create_producer(self, array: Sequence[Number], target: Number) -> StepProducer:
        pass

    @abstractmethod
    def comparison_bounds(self, n: int) -> Tuple[int, int]:
        pass

    def search(self, array: Sequence[Number], target: Number) -> Outcome:
        """Run a producer to completion and return its outcome."""
        producer = self.create_producer(array, target)
        step, has_more = producer.resume()
        while has_more:
            step, has_more = producer.resume()
        return step.outcome
