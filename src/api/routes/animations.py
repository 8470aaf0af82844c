"""
Animation endpoints - Stateless step generation

Returns the complete bubble sort trace for an input array. The frontend
replays it locally; for server-side playback state, see sessions.py.
"""

from fastapi import APIRouter, Depends
from animations.bubble_sort import StepSequencer
from api.schemas.animation import StepsRequest, StepsResponse, AnimationStepResponse, StepSummary
from api.middleware.error_handler import InvalidNumbersError, InvalidSpeedError
from api.dependencies import get_service_container
from utils.number_input import parse_number_list
from utils.logger import get_logger
from models.enums import LogCategory

log = get_logger().for_category(LogCategory.API)

router = APIRouter(prefix="/animations", tags=["Animations"])


@router.post(
    "/bubble-sort",
    response_model=StepsResponse,
    summary="Generate bubble sort steps",
    description="Generate the compare/swap/complete trace for an input array"
)
async def generate_bubble_sort(
    request: StepsRequest,
    services = Depends(get_service_container)
) -> StepsResponse:
    """
    Generate steps.

    **Errors:**
    - 422: no numbers given, too many numbers, or speed outside configured limits
    """
    seq_cfg = services.config.sequencer

    if request.numbers is not None:
        numbers = request.numbers
    elif request.text is not None:
        numbers = parse_number_list(request.text)
    else:
        raise InvalidNumbersError("Either 'numbers' or 'text' is required")

    if len(numbers) > seq_cfg.max_input_length:
        raise InvalidNumbersError(
            f"At most {seq_cfg.max_input_length} numbers are supported, got {len(numbers)}",
            max_length=seq_cfg.max_input_length
        )

    if not seq_cfg.min_speed_ms <= request.speed_ms <= seq_cfg.max_speed_ms:
        raise InvalidSpeedError(request.speed_ms, seq_cfg.min_speed_ms, seq_cfg.max_speed_ms)

    steps = StepSequencer.generate(numbers, request.speed_ms)

    return StepsResponse(
        numbers=numbers,
        speed_ms=request.speed_ms,
        steps=[AnimationStepResponse.from_step(s) for s in steps],
        summary=StepSummary(**StepSequencer.summary(steps))
    )
