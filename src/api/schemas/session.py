"""
Session schemas - Pydantic models for visualization sessions and playback
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from api.schemas.animation import AnimationStepResponse, StepSummary
from api.schemas.command import ParsedCommandResponse


class PlaybackResponse(BaseModel):
    state: str = Field(description="IDLE | PLAYING | PAUSED | COMPLETE")
    position: int
    total_steps: int
    progress: float = Field(description="0.0 - 1.0")
    current_step: Optional[AnimationStepResponse] = None


class ChatMessageResponse(BaseModel):
    role: str
    content: str
    timestamp: str


class ControlsResponse(BaseModel):
    """Playback controls the canvas should show"""
    play: bool
    pause: bool
    reset: bool
    step_forward: bool
    step_backward: bool
    speed_control: bool


class DisplayResponse(BaseModel):
    show_timeline: bool = Field(description="Show the step timeline under the canvas")
    show_description: bool = Field(description="Show the current step caption")
    controls: ControlsResponse


class SessionResponse(BaseModel):
    id: str
    numbers: List[int]
    speed_ms: int
    visualization_type: str
    height_representation: bool
    layout: str
    features: List[str]
    summary: StepSummary
    playback: PlaybackResponse
    colors: List[str] = Field(description="Highlight colour per array position at the current step")
    display: DisplayResponse
    history: List[ChatMessageResponse]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionResponse":
        return cls.model_validate(data)


class MessageRequest(BaseModel):
    text: str = Field("", max_length=2000)


class ChatReplyResponse(BaseModel):
    command: ParsedCommandResponse
    response: str
    applied: bool = Field(description="Whether the session changed")
    session: SessionResponse


class SeekRequest(BaseModel):
    index: int = Field(description="Target step index (clamped to the sequence)")
