"""Submission API endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ..exceptions import DuplicateSubmissionError, ReferenceNotFoundError
from ..models.submission import Submission, SubmissionCreate, SubmissionUpdate
from ..repositories.submission_repo import SubmissionRepository

router = APIRouter(prefix="/submissions", tags=["Submissions"])


@router.post("", response_model=Submission, status_code=201)
async def create_submission(data: SubmissionCreate) -> Submission:
    """Submit a session to an event."""
    try:
        return await SubmissionRepository.create(data)
    except ReferenceNotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DuplicateSubmissionError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("", response_model=list[Submission])
async def list_submissions(
    event_id: Optional[str] = Query(None, alias="eventId"),
    session_id: Optional[str] = Query(None, alias="sessionId"),
) -> list[Submission]:
    """List submissions."""
    return await SubmissionRepository.list_all(event_id=event_id, session_id=session_id)


@router.get("/{submission_id}", response_model=Submission)
async def get_submission(submission_id: str) -> Submission:
    """Get a submission by ID."""
    submission = await SubmissionRepository.get_by_id(submission_id)
    if not submission:
        raise HTTPException(status_code=404, detail="Submission not found")
    return submission


@router.put("/{submission_id}", response_model=Submission)
async def update_submission(submission_id: str, data: SubmissionUpdate) -> Submission:
    """Change the state, name used or notes of a submission."""
    submission = await SubmissionRepository.update(submission_id, data)
    if not submission:
        raise HTTPException(status_code=404, detail="Submission not found")
    return submission


@router.delete("/{submission_id}", status_code=204)
async def delete_submission(submission_id: str) -> None:
    """Delete a submission."""
    deleted = await SubmissionRepository.delete(submission_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Submission not found")
