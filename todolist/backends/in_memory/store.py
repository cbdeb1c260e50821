from todolist.core.store import BaseTodoStore
from todolist.core.metadata import Todo
from typing import List


class InMemoryTodoStore(BaseTodoStore):
    initial_id = 1

    def __init__(self):
        super().__init__()
        self._db: "List[Todo]" = []
        self._next_id = self.initial_id

    def _get_todos(self) -> "List[Todo]":
        return self._db

    def _append_todo(self, todo: "Todo"):
        self._db.append(todo)

    def _replace_todos(self, todos: "List[Todo]"):
        self._db = list(todos)

    def _take_next_id(self) -> "int":
        next_id = self._next_id
        self._next_id += 1
        return next_id

    def reset(self):
        self._db = []
        self._next_id = self.initial_id
