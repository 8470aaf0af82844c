"""
Animation schemas - Pydantic models for step generation requests/responses
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from models.animation_step import AnimationStep


class StepsRequest(BaseModel):
    """Generate a bubble sort trace from a list or a comma-separated string"""
    numbers: Optional[List[int]] = Field(None, description="Input array")
    text: Optional[str] = Field(None, description="Comma-separated input, used when numbers is absent")
    speed_ms: int = Field(1000, ge=0, description="Per-step speed in milliseconds")

    class Config:
        json_schema_extra = {
            "examples": [
                {"numbers": [5, 3, 8], "speed_ms": 1000},
                {"text": "64, 34, 25, 12, 22, 11, 90", "speed_ms": 500}
            ]
        }


class AnimationStepResponse(BaseModel):
    id: str = Field(description="Sequence-local key (e.g., 'step-0')")
    type: str = Field(description="compare | swap | complete")
    indices: List[int]
    array: List[int] = Field(description="Full array snapshot after this step")
    description: str
    delay: int = Field(description="Offset in ms (ordinal × speed)")

    @classmethod
    def from_step(cls, step: AnimationStep) -> "AnimationStepResponse":
        return cls(**step.to_dict())


class StepSummary(BaseModel):
    total_steps: int
    comparisons: int
    swaps: int
    duration_ms: int


class StepsResponse(BaseModel):
    numbers: List[int]
    speed_ms: int
    steps: List[AnimationStepResponse]
    summary: StepSummary
