import logging

from fastapi import APIRouter, Depends, Form, HTTPException
from fastapi.responses import RedirectResponse

from context import RequestContext, get_context
from rendering import render
from todos import operations
from todos.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["todos"])

_COMPLETED_VALUES = {"true": True, "false": False}


def _redirect_to_list(list_id: int) -> RedirectResponse:
    return RedirectResponse(url=f"/lists/{list_id}", status_code=303)


@router.post("/lists/{list_id}/addtodo")
def add_todo(list_id: int, todo_name: str = Form(""), ctx: RequestContext = Depends(get_context)):
    """Adds a todo, or re-renders the list page with the validation error."""
    todo_name = todo_name.strip()
    try:
        operations.add_todo(ctx.session, list_id, todo_name)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except ValidationError as exc:
        ctx.flash_failure(exc.message)
        todo_list = operations.get_list(ctx.session, list_id)
        return render(ctx, "list.html", status_code=422, list=todo_list, todo_name=todo_name)

    ctx.flash_success("The todo has been added.")
    return _redirect_to_list(list_id)


@router.post("/lists/{list_id}/all")
def complete_all(list_id: int, ctx: RequestContext = Depends(get_context)):
    """Marks every todo in the list complete."""
    try:
        operations.complete_all(ctx.session, list_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    ctx.flash_success("All todos have been marked completed.")
    return _redirect_to_list(list_id)


@router.post("/lists/{list_id}/{todo_id}/delete")
def delete_todo(list_id: int, todo_id: int, ctx: RequestContext = Depends(get_context)):
    """Removes one todo from the list."""
    try:
        operations.delete_todo(ctx.session, list_id, todo_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    ctx.flash_success("The todo has been deleted.")
    return _redirect_to_list(list_id)


@router.post("/lists/{list_id}/{todo_id}/complete")
def set_todo_complete(
    list_id: int,
    todo_id: int,
    completed: str = Form(...),
    ctx: RequestContext = Depends(get_context),
):
    """Marks a todo complete or incomplete from the form's completed="true"/"false" field."""
    value = _COMPLETED_VALUES.get(completed.strip().lower())
    if value is None:
        logger.warning("Rejected completed=%r for todo %d in list %d", completed, todo_id, list_id)
        raise HTTPException(status_code=400, detail="completed must be 'true' or 'false'")

    try:
        operations.set_todo_complete(ctx.session, list_id, todo_id, value)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    ctx.flash_success("The todo has been updated.")
    return _redirect_to_list(list_id)
