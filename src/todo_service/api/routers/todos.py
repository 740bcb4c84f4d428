"""
todo_service.api.routers.todos

Todo resource endpoints.

Responsibilities:
- Validate request bodies before any storage call (strict pydantic models).
- Delegate list/create/update/delete to the Storage Client.
- Shape rows into `TodoResponse` and map "no row" on update to 404.
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Path
from pydantic import BaseModel, ConfigDict, Field, field_validator
from starlette.status import HTTP_201_CREATED

from todo_service.api.deps import storage_dep
from todo_service.db.client import StorageClient
from todo_service.errors import NotFound

router = APIRouter(prefix="/todos", tags=["todos"])

# Ids are SERIAL (int4) in PostgreSQL; anything outside that range can never match a row.
MAX_TODO_ID = 2**31 - 1


class _TodoBody(BaseModel):
    # strict: "completed": "yes" or "title": 5 is a 422, not a coercion.
    model_config = ConfigDict(strict=True)

    title: str = Field(min_length=1)

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be blank")
        return v


class TodoCreateRequest(_TodoBody):
    completed: bool = False


class TodoUpdateRequest(_TodoBody):
    completed: bool


class TodoResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    completed: bool
    created_at: datetime


class SuccessResponse(BaseModel):
    success: bool = True


@router.get("", response_model=list[TodoResponse])
async def list_todos(storage: StorageClient = Depends(storage_dep)) -> list[TodoResponse]:
    return [TodoResponse.model_validate(t) for t in await storage.list_todos()]


@router.post("", response_model=TodoResponse, status_code=HTTP_201_CREATED)
async def create_todo(
    body: TodoCreateRequest,
    storage: StorageClient = Depends(storage_dep),
) -> TodoResponse:
    todo = await storage.create_todo(body.title, body.completed)
    return TodoResponse.model_validate(todo)


@router.put("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    body: TodoUpdateRequest,
    todo_id: int = Path(ge=1, le=MAX_TODO_ID),
    storage: StorageClient = Depends(storage_dep),
) -> TodoResponse:
    # Full replacement: both fields are required by TodoUpdateRequest.
    todo = await storage.update_todo(todo_id, body.title, body.completed)
    if todo is None:
        raise NotFound("todo not found")
    return TodoResponse.model_validate(todo)


@router.delete("/{todo_id}", response_model=SuccessResponse)
async def delete_todo(
    todo_id: int = Path(ge=1, le=MAX_TODO_ID),
    storage: StorageClient = Depends(storage_dep),
) -> SuccessResponse:
    # Idempotent: a missing id is still a success.
    await storage.delete_todo(todo_id)
    return SuccessResponse()
