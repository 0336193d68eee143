"""
List and todo CRUD over a single Session.

Every operation takes the session explicitly and mutates it in place.
Lookups by id go through get_list / get_todo, which raise NotFoundError
instead of returning None, so a bad id can never silently do nothing.

Ids are assigned as (max existing id + 1), or 0 for the first entity, so
an id freed by a delete is reused only if it was the highest one.
"""

import logging
from typing import Optional

from models.session import Session
from models.todo import Todo, TodoList
from todos.errors import NotFoundError, ValidationError
from todos.validation import error_for_list_name, error_for_todo_name

logger = logging.getLogger(__name__)


# ---------- Lookups ----------

def find_list(session: Session, list_id: int) -> Optional[TodoList]:
    return next((l for l in session.lists if l.id == list_id), None)


def find_todo(todo_list: TodoList, todo_id: int) -> Optional[Todo]:
    return next((t for t in todo_list.todos if t.id == todo_id), None)


def get_list(session: Session, list_id: int) -> TodoList:
    todo_list = find_list(session, list_id)
    if todo_list is None:
        raise NotFoundError("List", list_id)
    return todo_list


def get_todo(todo_list: TodoList, todo_id: int) -> Todo:
    todo = find_todo(todo_list, todo_id)
    if todo is None:
        raise NotFoundError("Todo", todo_id)
    return todo


def _next_id(items) -> int:
    return max((item.id for item in items), default=-1) + 1


# ---------- Lists ----------

def create_list(session: Session, name: str) -> TodoList:
    error = error_for_list_name(name, session.lists)
    if error:
        logger.warning("Rejected list name %r: %s", name, error)
        raise ValidationError(error)

    todo_list = TodoList(id=_next_id(session.lists), name=name)
    session.lists.append(todo_list)
    logger.info("Session %s created list %d", session.session_id, todo_list.id)
    return todo_list


def rename_list(session: Session, list_id: int, new_name: str) -> TodoList:
    todo_list = get_list(session, list_id)
    error = error_for_list_name(new_name, session.lists, current_name=todo_list.name)
    if error:
        logger.warning("Rejected rename of list %d to %r: %s", list_id, new_name, error)
        raise ValidationError(error)

    todo_list.name = new_name
    logger.info("Session %s renamed list %d", session.session_id, list_id)
    return todo_list


def delete_list(session: Session, list_id: int) -> TodoList:
    todo_list = get_list(session, list_id)
    session.lists.remove(todo_list)
    logger.info("Session %s deleted list %d", session.session_id, list_id)
    return todo_list


# ---------- Todos ----------

def add_todo(session: Session, list_id: int, name: str) -> Todo:
    todo_list = get_list(session, list_id)
    error = error_for_todo_name(name)
    if error:
        logger.warning("Rejected todo name %r: %s", name, error)
        raise ValidationError(error)

    todo = Todo(id=_next_id(todo_list.todos), name=name)
    todo_list.todos.append(todo)
    logger.info("Session %s added todo %d to list %d", session.session_id, todo.id, list_id)
    return todo


def delete_todo(session: Session, list_id: int, todo_id: int) -> Todo:
    todo_list = get_list(session, list_id)
    todo = get_todo(todo_list, todo_id)
    todo_list.todos.remove(todo)
    logger.info("Session %s deleted todo %d from list %d", session.session_id, todo_id, list_id)
    return todo


def set_todo_complete(session: Session, list_id: int, todo_id: int, value: bool) -> Todo:
    todo = get_todo(get_list(session, list_id), todo_id)
    todo.complete = value
    logger.info("Session %s set todo %d in list %d complete=%s", session.session_id, todo_id, list_id, value)
    return todo


def complete_all(session: Session, list_id: int) -> TodoList:
    todo_list = get_list(session, list_id)
    for todo in todo_list.todos:
        todo.complete = True
    logger.info("Session %s completed all todos in list %d", session.session_id, list_id)
    return todo_list
