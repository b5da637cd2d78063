"""Todo endpoints."""

from uuid import UUID

from fastapi import APIRouter, Request, Response, status

from todo_api.core import Err, Ok

from ..dependencies import TodoServiceDep
from ..exceptions import BadRequestError, NotFoundError
from ..schemas import TodoCreate, TodoResponse, TodoUpdate

TODO_PREFIX = "/api/Todo"

router = APIRouter(prefix=TODO_PREFIX, tags=["todos"])


def _parse_todo_id(raw_id: str) -> UUID:
    """Parse a path id, treating malformed ids as unknown ones.

    Raises:
        NotFoundError: If the id is not a valid UUID
    """
    try:
        return UUID(raw_id)
    except ValueError as e:
        raise NotFoundError("Todo", raw_id) from e


@router.get(
    "",
    response_model=list[TodoResponse],
    summary="List todos",
)
async def list_todos(service: TodoServiceDep) -> list[TodoResponse]:
    """List every todo. Order is not guaranteed."""
    todos = await service.list_all()
    return [TodoResponse.from_domain(todo) for todo in todos]


@router.get(
    "/{todo_id}",
    response_model=TodoResponse,
    summary="Get todo",
)
async def get_todo(todo_id: str, service: TodoServiceDep) -> TodoResponse:
    """Get a single todo.

    Args:
        todo_id: Todo UUID
        service: Todo service

    Returns:
        The todo

    Raises:
        NotFoundError: If the id is malformed or unknown
    """
    todo = await service.get_by_id(_parse_todo_id(todo_id))
    if todo is None:
        raise NotFoundError("Todo", todo_id)
    return TodoResponse.from_domain(todo)


@router.post(
    "",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create todo",
)
async def create_todo(
    body: TodoCreate,
    request: Request,
    response: Response,
    service: TodoServiceDep,
) -> TodoResponse:
    """Create a todo.

    Args:
        body: Todo creation request
        request: Current request, used to build the Location header
        response: Outgoing response
        service: Todo service

    Returns:
        Created todo (201 Created)

    Raises:
        BadRequestError: If the description is missing or invalid
    """
    result = await service.create(body.descricao, completed=bool(body.completo))

    match result:
        case Ok(todo):
            response.headers["Location"] = str(request.url_for("get_todo", todo_id=str(todo.id)))
            return TodoResponse.from_domain(todo)
        case Err(error):
            raise BadRequestError(error.message, detail=f"Invalid field: {error.field}")


@router.put(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update todo",
)
async def update_todo(todo_id: str, body: TodoUpdate, service: TodoServiceDep) -> Response:
    """Partially update a todo.

    Only the fields present in the body are changed.

    Args:
        todo_id: Todo UUID
        body: Fields to change
        service: Todo service

    Returns:
        Empty response (204 No Content)

    Raises:
        NotFoundError: If the todo does not exist
        BadRequestError: If the new description is invalid
    """
    result = await service.update(
        _parse_todo_id(todo_id),
        description=body.description_change(),
        completed=body.completed_change(),
    )

    match result:
        case Ok(True):
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Ok(False):
            raise NotFoundError("Todo", todo_id)
        case Err(error):
            raise BadRequestError(error.message, detail=f"Invalid field: {error.field}")


@router.patch(
    "/{todo_id}/toggle",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Toggle todo completion",
)
async def toggle_todo(todo_id: str, service: TodoServiceDep) -> Response:
    """Flip the completion flag of a todo.

    Raises:
        NotFoundError: If the todo does not exist
    """
    if not await service.toggle_completed(_parse_todo_id(todo_id)):
        raise NotFoundError("Todo", todo_id)
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete todo",
)
async def delete_todo(todo_id: str, service: TodoServiceDep) -> Response:
    """Delete a todo.

    Raises:
        NotFoundError: If the todo does not exist
    """
    if not await service.delete_by_id(_parse_todo_id(todo_id)):
        raise NotFoundError("Todo", todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
