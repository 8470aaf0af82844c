"""
Command endpoints - Free-text chat instructions

Stateless: parse and describe a message without touching any session.
For applying a message to a visualization, see sessions.py.
"""

from fastapi import APIRouter, Depends
from api.schemas.command import CommandRequest, ParsedCommandResponse, DescribeResponse
from api.dependencies import get_service_container
from utils.logger import get_logger
from models.enums import LogCategory

log = get_logger().for_category(LogCategory.API)

router = APIRouter(prefix="/commands", tags=["Commands"])


@router.post(
    "/parse",
    response_model=ParsedCommandResponse,
    summary="Parse a chat message",
    description="Convert free text into a structured, confidence-scored command"
)
async def parse_command(
    request: CommandRequest,
    services = Depends(get_service_container)
) -> ParsedCommandResponse:
    """
    Parse free text.

    Never fails for any text: unrecognised input returns action "unknown"
    with confidence 0.
    """
    command = services.interpreter.parse(request.text)
    return ParsedCommandResponse.from_command(command)


@router.post(
    "/describe",
    response_model=DescribeResponse,
    summary="Parse and describe a chat message",
    description="Parse free text and return the assistant's confirmation sentence"
)
async def describe_command(
    request: CommandRequest,
    services = Depends(get_service_container)
) -> DescribeResponse:
    command = services.interpreter.parse(request.text)
    return DescribeResponse(
        command=ParsedCommandResponse.from_command(command),
        response=services.interpreter.describe(command)
    )
