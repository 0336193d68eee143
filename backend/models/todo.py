from pydantic import BaseModel, Field


class Todo(BaseModel):
    id: int
    name: str           # 1-100 chars, stripped
    complete: bool = False


class TodoList(BaseModel):
    id: int
    name: str           # 1-100 chars, unique within the session (case-sensitive)
    todos: list[Todo] = Field(default_factory=list)
