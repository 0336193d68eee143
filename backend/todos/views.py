"""
Derived values used by the templates: progress counts, completion state
and display ordering.
"""

from models.todo import Todo, TodoList


def todo_ratio(todo_list: TodoList) -> tuple[int, int]:
    """Returns (incomplete todos, total todos)."""
    total = len(todo_list.todos)
    remaining = sum(1 for todo in todo_list.todos if not todo.complete)
    return remaining, total


def is_list_complete(todo_list: TodoList) -> bool:
    """An empty list is never complete."""
    return bool(todo_list.todos) and all(todo.complete for todo in todo_list.todos)


def sort_lists(lists: list[TodoList]) -> list[TodoList]:
    # sorted() is stable, so each group keeps its original order
    return sorted(lists, key=is_list_complete)


def sort_todos(todos: list[Todo]) -> list[Todo]:
    return sorted(todos, key=lambda todo: todo.complete)
