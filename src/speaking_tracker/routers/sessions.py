"""Session API endpoints."""

from fastapi import APIRouter, HTTPException, Query

from ..exceptions import SessionInUseError
from ..models.session import Session, SessionCreate, SessionUpdate
from ..repositories.session_repo import SessionRepository

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.post("", response_model=Session, status_code=201)
async def create_session(data: SessionCreate) -> Session:
    """Create a new session."""
    return await SessionRepository.create(data)


@router.get("", response_model=list[Session])
async def list_sessions(
    active: bool = Query(True),
    retired: bool = Query(True),
) -> list[Session]:
    """List sessions by name."""
    return await SessionRepository.list_all(active=active, retired=retired)


@router.get("/{session_id}", response_model=Session)
async def get_session(session_id: str) -> Session:
    """Get a session by ID."""
    session = await SessionRepository.get_by_id(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.put("/{session_id}", response_model=Session)
async def update_session(session_id: str, data: SessionUpdate) -> Session:
    """Update a session."""
    session = await SessionRepository.update(session_id, data)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.patch("/{session_id}/retire", response_model=Session)
async def retire_session(session_id: str, retired: bool = True) -> Session:
    """Retire a session, or bring it back with ``retired=false``."""
    session = await SessionRepository.set_retired(session_id, retired)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str) -> None:
    """Delete a session that has never been submitted."""
    try:
        deleted = await SessionRepository.delete(session_id)
    except SessionInUseError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Session not found")
