"""
Bubble Sort Step Sequencer

Generates the complete, replayable trace of an adjacent-swap sort.

The whole sequence is computed up front and never patched: when the input
array or the speed changes the caller regenerates it. Each step carries a
full array snapshot so the playback controller can seek anywhere.
"""

from typing import Any, Dict, Iterable, List

from models.animation_step import AnimationStep
from models.enums import StepKind, LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.SEQUENCER)

DEFAULT_SPEED_MS = 1000
COMPLETE_DESCRIPTION = "Sorting complete!"


class StepSequencer:
    """
    Bubble sort trace generator

    Example:
        steps = StepSequencer.generate([5, 3, 8], 1000)
        # step 0: COMPARE [0, 1] -> (5, 3, 8) "Comparing 5 and 3"
        # step 1: SWAP    [0, 1] -> (3, 5, 8) "Swapping 5 and 3"
        # step 2: COMPARE [1, 2] -> (3, 5, 8) "Comparing 5 and 8"
        # step 3: COMPARE [0, 1] -> (3, 5, 8) "Comparing 3 and 5"
        # step 4: COMPLETE       -> (3, 5, 8) "Sorting complete!"
    """

    @staticmethod
    def generate(values: Iterable[int], speed_ms: int = DEFAULT_SPEED_MS) -> List[AnimationStep]:
        """
        Generate the bubble sort trace for values.

        Args:
            values: Input integers (never mutated)
            speed_ms: Per-step speed; delay of step k is k * speed_ms
                      (negative values are clamped to 0)

        Returns:
            Steps ending with exactly one COMPLETE step
        """
        if speed_ms < 0:
            log.warn(f"Negative speed {speed_ms}ms clamped to 0")
            speed_ms = 0

        array = [int(v) for v in values]
        n = len(array)
        steps: List[AnimationStep] = []

        def emit(kind: StepKind, indices, description: str) -> None:
            steps.append(AnimationStep(
                id=len(steps),
                kind=kind,
                indices=tuple(indices),
                array=tuple(array),
                description=description,
                delay=len(steps) * speed_ms,
            ))

        for i in range(n - 1):
            for j in range(n - i - 1):
                emit(StepKind.COMPARE, (j, j + 1), f"Comparing {array[j]} and {array[j + 1]}")

                if array[j] > array[j + 1]:
                    array[j], array[j + 1] = array[j + 1], array[j]
                    # Caption names the values in their post-swap positions
                    emit(StepKind.SWAP, (j, j + 1), f"Swapping {array[j + 1]} and {array[j]}")

        emit(StepKind.COMPLETE, (), COMPLETE_DESCRIPTION)

        log.debug(
            f"Generated {len(steps)} steps",
            length=n,
            speed_ms=speed_ms,
            swaps=swap_count(steps),
        )
        return steps

    @staticmethod
    def summary(steps: List[AnimationStep]) -> Dict[str, Any]:
        """Statistics shown next to the timeline"""
        last_delay = steps[-1].delay if steps else 0
        return {
            "total_steps": len(steps),
            "comparisons": comparison_count(steps),
            "swaps": swap_count(steps),
            "duration_ms": last_delay,
        }


def comparison_count(steps: List[AnimationStep]) -> int:
    return sum(1 for s in steps if s.kind == StepKind.COMPARE)


def swap_count(steps: List[AnimationStep]) -> int:
    return sum(1 for s in steps if s.kind == StepKind.SWAP)


def generate_steps(values: Iterable[int], speed_ms: int = DEFAULT_SPEED_MS) -> List[AnimationStep]:
    """Module-level shortcut for StepSequencer.generate"""
    return StepSequencer.generate(values, speed_ms)
