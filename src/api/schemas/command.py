"""
Command schemas - Pydantic models for the chat command endpoints
"""

from pydantic import BaseModel, Field
from typing import Any, Dict

from models.command import ParsedCommand


class CommandRequest(BaseModel):
    """Free-text instruction from the chat panel"""
    text: str = Field("", max_length=2000, description="User message, may be empty")

    class Config:
        json_schema_extra = {
            "example": {"text": "make it faster"}
        }


class ParsedCommandResponse(BaseModel):
    """Structured command; parameters only contain fields relevant to the action"""
    action: str = Field(description="Action tag (e.g., 'change_speed')")
    parameters: Dict[str, Any] = Field(default_factory=dict, description="Sparse action parameters")
    confidence: float = Field(description="Heuristic score, not a probability (can exceed 1.0)")
    original_text: str = Field(description="Input text exactly as received")

    @classmethod
    def from_command(cls, command: ParsedCommand) -> "ParsedCommandResponse":
        data = command.to_dict()
        return cls(
            action=data["action"],
            parameters=data["parameters"],
            confidence=data["confidence"],
            original_text=data["originalText"],
        )


class DescribeResponse(BaseModel):
    command: ParsedCommandResponse
    response: str = Field(description="Confirmation or clarification sentence")
