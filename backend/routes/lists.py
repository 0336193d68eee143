from fastapi import APIRouter, Depends, Form, HTTPException
from fastapi.responses import RedirectResponse

from context import RequestContext, get_context
from rendering import render
from todos import operations
from todos.errors import NotFoundError, ValidationError

router = APIRouter(tags=["lists"])


def _load_list(ctx: RequestContext, list_id: int):
    try:
        return operations.get_list(ctx.session, list_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=303)


# ---------- Pages ----------

@router.get("/")
def index():
    """Sends the bare root to the list overview."""
    return _redirect("/lists")


@router.get("/lists")
def view_lists(ctx: RequestContext = Depends(get_context)):
    """Shows every list, incomplete ones first, with remaining/total counts."""
    return render(ctx, "lists.html", lists=ctx.session.lists)


# Registered before /lists/{list_id} so "new" is not parsed as an id
@router.get("/lists/new")
def new_list_form(ctx: RequestContext = Depends(get_context)):
    """Shows the empty new-list form."""
    return render(ctx, "new_list.html", list_name="")


@router.get("/lists/{list_id}")
def view_list(list_id: int, ctx: RequestContext = Depends(get_context)):
    """Shows one list and its todos, or 404s on an unknown id."""
    return render(ctx, "list.html", list=_load_list(ctx, list_id), todo_name="")


@router.get("/lists/{list_id}/edit")
def edit_list_form(list_id: int, ctx: RequestContext = Depends(get_context)):
    """Shows the rename form prefilled with the current name."""
    todo_list = _load_list(ctx, list_id)
    return render(ctx, "edit_list.html", list=todo_list, list_name=todo_list.name)


# ---------- Mutations ----------

@router.post("/lists")
def create_list(list_name: str = Form(""), ctx: RequestContext = Depends(get_context)):
    """Creates a list, or re-renders the form with the validation error."""
    list_name = list_name.strip()
    try:
        operations.create_list(ctx.session, list_name)
    except ValidationError as exc:
        ctx.flash_failure(exc.message)
        return render(ctx, "new_list.html", status_code=422, list_name=list_name)

    ctx.flash_success("The list has been created.")
    return _redirect("/lists")


@router.post("/lists/{list_id}")
def rename_list(list_id: int, list_name: str = Form(""), ctx: RequestContext = Depends(get_context)):
    """Renames a list, or re-renders the edit form with the validation error."""
    todo_list = _load_list(ctx, list_id)
    list_name = list_name.strip()
    try:
        operations.rename_list(ctx.session, list_id, list_name)
    except ValidationError as exc:
        ctx.flash_failure(exc.message)
        return render(ctx, "edit_list.html", status_code=422, list=todo_list, list_name=list_name)

    ctx.flash_success("The list name has been edited.")
    return _redirect(f"/lists/{list_id}")


@router.post("/lists/{list_id}/delete")
def delete_list(list_id: int, ctx: RequestContext = Depends(get_context)):
    """Removes a list and returns to the overview."""
    try:
        removed = operations.delete_list(ctx.session, list_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    ctx.flash_success(f"The list '{removed.name}' has been deleted.")
    return _redirect("/lists")
