# interfaces/api.py
import logging
from typing import List

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from application.commands import CommandDispatcher
from application.ports import TaskStore
from domain.exceptions import InvalidInput, NotFound
from infrastructure.memory_store import InMemoryTaskStore
from schemas.task import CommandRequest, TaskCreate, TaskResponse, TaskUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")
store = InMemoryTaskStore()


def get_task_store() -> TaskStore:
    return store


@router.get("/todos", response_model=List[TaskResponse])
async def list_tasks(tasks: TaskStore = Depends(get_task_store)):
    return [TaskResponse.from_task(task) for task in tasks.list()]


@router.post("/todos", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(payload: TaskCreate, response: Response, tasks: TaskStore = Depends(get_task_store)):
    created = tasks.add(payload.name, payload.deadline)
    response.headers["Location"] = f"/api/todos/{created.id}"
    return TaskResponse.from_task(created)


@router.post("/todos/sort")
async def sort_tasks(option: int, tasks: TaskStore = Depends(get_task_store)):
    tasks.sort_by_option(option)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/todos/{task_id}", response_model=TaskResponse)
async def get_task(task_id: int, tasks: TaskStore = Depends(get_task_store)):
    return TaskResponse.from_task(tasks.get(task_id))


@router.delete("/todos/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: int, tasks: TaskStore = Depends(get_task_store)):
    tasks.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/todos/{task_id}", response_model=TaskResponse)
async def update_task(task_id: int, payload: TaskUpdate, tasks: TaskStore = Depends(get_task_store)):
    if not payload.has_any():
        raise HTTPException(status_code=400, detail="Provide name and/or deadline")
    updated = tasks.edit(task_id, payload.name, payload.deadline)
    return TaskResponse.from_task(updated)


@router.post("/todos/{task_id}/toggle", response_model=TaskResponse)
async def toggle_task_completion(task_id: int, tasks: TaskStore = Depends(get_task_store)):
    updated = tasks.toggle(task_id)
    logger.info(f"Task {task_id} toggled to completed = {updated.completed}")
    return TaskResponse.from_task(updated)


@router.post("/console", response_class=PlainTextResponse)
async def exec_plain(request: Request, tasks: TaskStore = Depends(get_task_store)):
    body = (await request.body()).decode("utf-8", errors="replace")
    result = CommandDispatcher(tasks).execute(body)
    return PlainTextResponse(result.text, status_code=result.status_code)


@router.post("/console/json", response_class=PlainTextResponse)
async def exec_json(payload: CommandRequest, tasks: TaskStore = Depends(get_task_store)):
    result = CommandDispatcher(tasks).execute(payload.command)
    return PlainTextResponse(result.text, status_code=result.status_code)


@router.get("/health")
async def health(tasks: TaskStore = Depends(get_task_store)):
    return {"status": "ok", "tasks": tasks.count()}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidInput)
    async def invalid_input(request: Request, exc: InvalidInput):
        logger.info(f"Invalid input on {request.url.path}: {exc}")
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def validation_failed(request: Request, exc: RequestValidationError):
        errors = [f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()]
        return JSONResponse(status_code=400, content={"detail": "; ".join(errors)})

    @app.exception_handler(NotFound)
    async def not_found(request: Request, exc: NotFound):
        return JSONResponse(status_code=404, content={"detail": "Task not found"})

    @app.exception_handler(Exception)
    async def server_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
