"""Tests for the derived values shown on list pages."""

from models.todo import Todo, TodoList
from todos.views import is_list_complete, sort_lists, sort_todos, todo_ratio


def _list(list_id: int, *flags: bool) -> TodoList:
    todos = [Todo(id=i, name=f"todo {i}", complete=flag) for i, flag in enumerate(flags)]
    return TodoList(id=list_id, name=f"list {list_id}", todos=todos)


class TestTodoRatio:

    def test_one_of_three_complete(self):
        assert todo_ratio(_list(0, True, False, False)) == (2, 3)

    def test_empty_list(self):
        assert todo_ratio(_list(0)) == (0, 0)


class TestIsListComplete:

    def test_empty_list_is_not_complete(self):
        assert is_list_complete(_list(0)) is False

    def test_all_complete(self):
        assert is_list_complete(_list(0, True, True)) is True

    def test_partially_complete(self):
        assert is_list_complete(_list(0, True, False)) is False


class TestSortLists:

    def test_complete_lists_move_to_end_stably(self):
        lists = [
            _list(0, True),
            _list(1, False),
            _list(2, True, True),
            _list(3),
            _list(4, False, True),
        ]
        assert [l.id for l in sort_lists(lists)] == [1, 3, 4, 0, 2]

    def test_input_not_mutated(self):
        lists = [_list(0, True), _list(1, False)]
        sort_lists(lists)
        assert [l.id for l in lists] == [0, 1]


def test_sort_todos_puts_complete_last():
    todo_list = _list(0, True, False, True, False)
    assert [t.id for t in sort_todos(todo_list.todos)] == [1, 3, 0, 2]
