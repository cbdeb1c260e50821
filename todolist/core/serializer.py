from typing import Dict, List, Iterable, TYPE_CHECKING
from abc import ABC, abstractmethod

if TYPE_CHECKING:
    from todolist.core.metadata import Todo


class BaseTodoSerializer(ABC):

    """Abstract class that converts todos to dictionaries of primitive types."""

    @abstractmethod
    def serialize(self, todo: "Todo") -> "Dict":
        """Converts a single todo.

        Args:
            todo (Todo): Todo to be serialized.
        """

    def serialize_many(self, todos: "Iterable[Todo]") -> "List[Dict]":
        """Converts a sequence of todos, keeping their order.

        Args:
            todos (Iterable[Todo]): Todos to be serialized.
        """
        return [self.serialize(todo=todo) for todo in todos]


class TodoJSONSerializer(BaseTodoSerializer):

    """Produces the JSON shape exposed by the API: {"id": int, "text": str, "done": bool}."""

    def serialize(self, todo: "Todo") -> "Dict":
        return {"id": todo.id, "text": todo.text, "done": todo.done}
