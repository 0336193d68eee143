from models.session import Session
from models.todo import Todo, TodoList

__all__ = ["Session", "Todo", "TodoList"]
