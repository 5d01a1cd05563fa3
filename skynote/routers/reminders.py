from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from skynote.core.errors import (
    BackendUnavailable,
    BackendWriteFailure,
    CorruptData,
    IndexOutOfRange,
    InvalidInput,
)
from skynote.services.reminder_store import ReminderStore

router = APIRouter(prefix="/reminders", tags=["reminders"])


class ReminderIn(BaseModel):
    title: str = ""
    description: str = ""


def _get_store(request: Request) -> ReminderStore:
    store = getattr(getattr(request.app, "state", None), "reminder_store", None)
    if store is None:
        raise RuntimeError("ReminderStore not configured")
    if not store.ready:
        raise HTTPException(503, "Reminder storage is unavailable")
    return store


def _listing(store: ReminderStore) -> dict:
    return {"reminders": [r.to_dict() for r in store.reminders]}


@router.get("")
def list_reminders(request: Request):
    return _listing(_get_store(request))


@router.post("", status_code=201)
async def add_reminder(payload: ReminderIn, request: Request):
    store = _get_store(request)
    try:
        reminder = await store.add(payload.title, payload.description)
    except InvalidInput as exc:
        raise HTTPException(422, exc.message)
    except BackendWriteFailure:
        raise HTTPException(503, "Reminder added but not saved; retry POST /reminders/persist")
    return reminder.to_dict()


@router.delete("/{index}")
async def remove_reminder(index: int, request: Request):
    store = _get_store(request)
    try:
        removed = await store.remove_at(index)
    except IndexOutOfRange:
        raise HTTPException(404, "Reminder not found")
    except BackendWriteFailure:
        raise HTTPException(503, "Reminder removed but not saved; retry POST /reminders/persist")
    return removed.to_dict()


@router.post("/persist")
async def persist_reminders(request: Request):
    store = _get_store(request)
    try:
        await store.persist()
    except BackendWriteFailure:
        raise HTTPException(503, "Reminder storage is unavailable")
    return _listing(store)


@router.post("/reload")
async def reload_reminders(request: Request):
    store = _get_store(request)
    try:
        await store.load()
    except CorruptData:
        raise HTTPException(500, "Stored reminders are corrupt")
    except BackendUnavailable:
        raise HTTPException(503, "Reminder storage is unavailable")
    return _listing(store)
