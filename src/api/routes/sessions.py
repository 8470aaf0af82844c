"""
Session endpoints - Chat-driven visualization sessions and playback

A session holds the numbers, speed and display options of one canvas plus
its playback position. Playback here is manual (tick/next/prev); timing is
left to the client.
"""

from fastapi import APIRouter, Depends, status
from api.schemas.session import (
    SessionResponse, MessageRequest, ChatReplyResponse, SeekRequest,
)
from api.schemas.command import ParsedCommandResponse
from api.middleware.error_handler import SessionNotFoundError, PlaybackActionError
from api.dependencies import get_service_container
from services.visualization_service import VisualizationSession
from utils.logger import get_logger
from models.enums import LogCategory

log = get_logger().for_category(LogCategory.API)

router = APIRouter(prefix="/sessions", tags=["Sessions"])

PLAYBACK_ACTIONS = {
    "play": lambda c: c.play(),
    "pause": lambda c: c.pause(),
    "toggle": lambda c: c.toggle(),
    "next": lambda c: c.next_step(),
    "prev": lambda c: c.prev_step(),
    "reset": lambda c: c.reset(),
    "tick": lambda c: c.tick(),
}


def _get_session(services, session_id: str) -> VisualizationSession:
    try:
        return services.sessions.get(session_id)
    except KeyError:
        raise SessionNotFoundError(session_id)


def _response(session: VisualizationSession) -> SessionResponse:
    return SessionResponse.from_dict(session.to_dict())


@router.post(
    "",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a session"
)
async def create_session(services = Depends(get_service_container)) -> SessionResponse:
    session = services.sessions.create()
    log.info(f"Session created via API: {session.id}")
    return _response(session)


@router.get("/{session_id}", response_model=SessionResponse, summary="Get session state")
async def get_session(session_id: str, services = Depends(get_service_container)) -> SessionResponse:
    return _response(_get_session(services, session_id))


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a session")
async def delete_session(session_id: str, services = Depends(get_service_container)) -> None:
    try:
        services.sessions.delete(session_id)
    except KeyError:
        raise SessionNotFoundError(session_id)


@router.post(
    "/{session_id}/messages",
    response_model=ChatReplyResponse,
    summary="Send a chat message",
    description="Parse the message, reply, and apply it to the session when confident enough"
)
async def send_message(
    session_id: str,
    request: MessageRequest,
    services = Depends(get_service_container)
) -> ChatReplyResponse:
    session = _get_session(services, session_id)
    reply = session.handle_message(request.text)
    return ChatReplyResponse(
        command=ParsedCommandResponse.from_command(reply.command),
        response=reply.response,
        applied=reply.applied,
        session=_response(session)
    )


@router.post("/{session_id}/playback/seek", response_model=SessionResponse, summary="Seek to a step")
async def seek(
    session_id: str,
    request: SeekRequest,
    services = Depends(get_service_container)
) -> SessionResponse:
    session = _get_session(services, session_id)
    session.controller.seek(request.index)
    return _response(session)


@router.post(
    "/{session_id}/playback/{action}",
    response_model=SessionResponse,
    summary="Playback control",
    description="play | pause | toggle | next | prev | reset | tick"
)
async def playback(
    session_id: str,
    action: str,
    services = Depends(get_service_container)
) -> SessionResponse:
    session = _get_session(services, session_id)
    handler = PLAYBACK_ACTIONS.get(action.lower())
    if handler is None:
        raise PlaybackActionError(action, sorted(PLAYBACK_ACTIONS))
    handler(session.controller)
    return _response(session)
