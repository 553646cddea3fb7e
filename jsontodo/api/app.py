from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from jsontodo.api.models import TodoCreate, TodoUpdate
from jsontodo.core.repository import TodoRepository
from jsontodo.core.exceptions import (
    StorageException,
    TodoNotFoundException,
    TodoValidationException,
)
from jsontodo.contrib.factory import create_repository
from jsontodo.settings import TodoSettings, todo_settings
from typing import Optional
import jsontodo
import logging

logger = logging.getLogger(__name__)


def get_repository(request: Request) -> TodoRepository:
    return request.app.state.repository


def list_todos(repository: TodoRepository = Depends(get_repository)):
    return [record.to_record() for record in repository.list()]


def create_todo(
    body: Optional[TodoCreate] = None,
    repository: TodoRepository = Depends(get_repository),
):
    todo = repository.create(text=body.text if body else None)
    return todo.to_dict()


def update_todo(
    todo_id: str,
    body: Optional[TodoUpdate] = None,
    repository: TodoRepository = Depends(get_repository),
):
    # Only the fields sent by the client are applied, even when their value is false.
    changes = body.model_dump(exclude_unset=True) if body else {}
    todo = repository.update(id=todo_id, changes=changes)
    return todo.to_dict()


def delete_todo(todo_id: str, repository: TodoRepository = Depends(get_repository)):
    repository.delete(id=todo_id)
    return Response(status_code=204)


async def on_validation_error(request: Request, exc: TodoValidationException):
    return JSONResponse(status_code=400, content={"message": exc.message})


async def on_not_found(request: Request, exc: TodoNotFoundException):
    return JSONResponse(status_code=404, content={"message": "Todo not found."})


async def on_storage_error(request: Request, exc: StorageException):
    logger.error(str(exc))
    return JSONResponse(
        status_code=500, content={"message": "Todo storage is unavailable."}
    )


async def on_lock_timeout(request: Request, exc: TimeoutError):
    logger.warning("Timed out waiting for the write lock: %s", exc)
    return JSONResponse(status_code=503, content={"message": "Todo storage is busy."})


def create_app(
    repository: "Optional[TodoRepository]" = None,
    settings: "TodoSettings" = todo_settings,
) -> "FastAPI":
    """Builds the API application.

    Endpoints are plain functions, so FastAPI runs them in its thread pool and requests can
    interleave. The repository's write lock decides whether they may overwrite each other.

    Args:
        repository (Optional[TodoRepository]): Repository used by the endpoints. If not given, one is
            created from the settings.
        settings (TodoSettings): Settings used when creating the repository.
    """
    if repository is None:
        repository = create_repository(settings=settings)

    app = FastAPI(title="Todo API", version=jsontodo.__version__)
    app.state.repository = repository
    app.add_middleware(
        CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"]
    )

    app.add_api_route("/api/todos", list_todos, methods=["GET"])
    app.add_api_route("/api/todos", create_todo, methods=["POST"], status_code=201)
    app.add_api_route("/api/todos/{todo_id}", update_todo, methods=["PUT"])
    app.add_api_route(
        "/api/todos/{todo_id}", delete_todo, methods=["DELETE"], status_code=204
    )

    app.add_exception_handler(TodoValidationException, on_validation_error)
    app.add_exception_handler(TodoNotFoundException, on_not_found)
    app.add_exception_handler(StorageException, on_storage_error)
    app.add_exception_handler(TimeoutError, on_lock_timeout)

    return app
