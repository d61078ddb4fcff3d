from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from fastapi import APIRouter, HTTPException, Request

from apps.api.schemas.reminders import (
    ReminderResponse,
    ReminderView,
    ReminderWriteRequest,
)
from packages.core.errors import IdSpaceExhaustedError
from packages.core.reminders.models import Reminder
from packages.core.reminders.store import ReminderStore


router = APIRouter(prefix="/reminders", tags=["reminders"])


@contextmanager
def _store(request: Request) -> Iterator[ReminderStore]:
    # Sync routes run in the threadpool; one request at a time touches the store.
    with request.app.state.reminder_lock:
        yield request.app.state.reminder_store


def _to_response(reminder: Reminder) -> ReminderResponse:
    return ReminderResponse(
        id=reminder.id,
        text=reminder.text,
        date=reminder.date,
        completed=reminder.completed,
    )


def _require(store: ReminderStore, reminder_id: str) -> Reminder:
    reminder = store.get(reminder_id)
    if reminder is None:
        raise HTTPException(status_code=404, detail="Reminder not found")
    return reminder


@router.post("", response_model=ReminderResponse)
def create(payload: ReminderWriteRequest, request: Request) -> ReminderResponse:
    with _store(request) as store:
        try:
            reminder_id = store.create(payload.text, payload.date)
        except IdSpaceExhaustedError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        return _to_response(_require(store, reminder_id))


@router.get("", response_model=List[ReminderResponse])
def list_all(request: Request, view: Optional[ReminderView] = None) -> List[ReminderResponse]:
    with _store(request) as store:
        if view is ReminderView.completed:
            reminders = store.filter_completed()
        elif view is ReminderView.pending:
            reminders = store.filter_pending()
        elif view is ReminderView.due_today:
            reminders = store.filter_due_today()
        else:
            reminders = store.get_all()
    return [_to_response(reminder) for reminder in reminders]


@router.get("/{reminder_id}", response_model=ReminderResponse)
def get(reminder_id: str, request: Request) -> ReminderResponse:
    with _store(request) as store:
        return _to_response(_require(store, reminder_id))


@router.put("/{reminder_id}", response_model=ReminderResponse)
def update(
    reminder_id: str, payload: ReminderWriteRequest, request: Request
) -> ReminderResponse:
    with _store(request) as store:
        if not store.update(reminder_id, payload.text, payload.date):
            raise HTTPException(status_code=404, detail="Reminder not found")
        return _to_response(_require(store, reminder_id))


@router.post("/{reminder_id}/complete", response_model=ReminderResponse)
def complete(reminder_id: str, request: Request) -> ReminderResponse:
    with _store(request) as store:
        if not store.mark_completed(reminder_id):
            raise HTTPException(status_code=404, detail="Reminder not found")
        return _to_response(_require(store, reminder_id))


@router.post("/{reminder_id}/uncomplete", response_model=ReminderResponse)
def uncomplete(reminder_id: str, request: Request) -> ReminderResponse:
    with _store(request) as store:
        if not store.unmark_completed(reminder_id):
            raise HTTPException(status_code=404, detail="Reminder not found")
        return _to_response(_require(store, reminder_id))


@router.delete("/{reminder_id}")
def delete(reminder_id: str, request: Request) -> Dict[str, Any]:
    with _store(request) as store:
        if not store.remove(reminder_id):
            raise HTTPException(status_code=404, detail="Reminder not found")
    return {"status": "deleted", "id": reminder_id}
