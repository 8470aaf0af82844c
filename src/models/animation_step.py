"""
Animation step model

One frame of a precomputed sorting trace. Every step stores a full snapshot
of the working array so playback can jump to any position without replaying
earlier steps.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from models.enums import StepKind


@dataclass(frozen=True)
class AnimationStep:
    """
    Immutable sorting step

    Attributes:
        id: Sequence-local ordinal, starts at 0
        kind: COMPARE, SWAP or COMPLETE
        indices: Pair of positions involved (empty for COMPLETE)
        array: Full array state after this step's effect
        description: Caption shown under the canvas
        delay: Scheduled offset in ms (ordinal × speed)
    """
    id: int
    kind: StepKind
    indices: Tuple[int, ...]
    array: Tuple[int, ...]
    description: str
    delay: int

    @property
    def key(self) -> str:
        """Stable string key for UI lists"""
        return f"step-{self.id}"

    @property
    def is_complete(self) -> bool:
        return self.kind == StepKind.COMPLETE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.key,
            "type": self.kind.value,
            "indices": list(self.indices),
            "array": list(self.array),
            "description": self.description,
            "delay": self.delay,
        }

    def __repr__(self):
        return f"AnimationStep({self.id}, {self.kind.name}, {list(self.indices)}, {list(self.array)})"
