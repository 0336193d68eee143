"""
Jinja2 page rendering.

render() pulls the pending flash messages off the session so each one is
shown exactly once, and exposes the derived-view helpers to every template.
"""

from fastapi.templating import Jinja2Templates

import config
from context import RequestContext
from todos.views import is_list_complete, sort_lists, sort_todos, todo_ratio

templates = Jinja2Templates(directory=config.TEMPLATES_DIR)
templates.env.globals.update(
    todo_ratio=todo_ratio,
    is_list_complete=is_list_complete,
    sort_lists=sort_lists,
    sort_todos=sort_todos,
)


def render(ctx: RequestContext, name: str, status_code: int = 200, **values):
    success, failure = ctx.pop_flash()
    values.update(success=success, failure=failure)
    return templates.TemplateResponse(ctx.request, name, values, status_code=status_code)
