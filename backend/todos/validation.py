"""
Name checks for lists and todos.

Each check returns an error message, or None when the name is acceptable.
Names are compared exactly as given; callers strip whitespace first.
"""

from typing import Optional

from models.todo import TodoList

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 100


def _valid_length(name: str) -> bool:
    return NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH


def error_for_list_name(name: str, lists: list[TodoList], current_name: Optional[str] = None) -> Optional[str]:
    """
    Checks a new list name against the length bounds and the names already in use.
    Keeping a list's current name is always allowed, so a rename to the same
    value never fails.
    """
    if current_name is not None and name == current_name:
        return None
    if not _valid_length(name):
        return f"List name must be from {NAME_MIN_LENGTH} to {NAME_MAX_LENGTH} characters."
    if any(todo_list.name == name for todo_list in lists):
        return "List name already used."
    return None


def error_for_todo_name(name: str) -> Optional[str]:
    if not _valid_length(name):
        return f"Todo name must be from {NAME_MIN_LENGTH} to {NAME_MAX_LENGTH} characters."
    return None
