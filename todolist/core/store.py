from typing import List, Any, Optional, Dict
from abc import ABC, abstractmethod
from .metadata import Todo
from .exceptions import ValidationException, TodoNotFoundException
import logging

logger = logging.getLogger(__name__)


class BaseTodoStore(ABC):
    """Abstract class that encapsulates the access to the collection of todos.

    The rules shared by every backend (validation on creation, trimming, id assignment and
    filtering of completed items) live here. Backends only implement the storage primitives.
    """

    def __repr__(self):  # pragma: no cover
        return f"{self.__class__.__name__}()"

    @abstractmethod
    def _get_todos(self) -> "List[Todo]":
        """Returns the stored todos in insertion order. The list returned is the one held by
        the backend, callers must not modify it."""

    @abstractmethod
    def _append_todo(self, todo: "Todo"):
        """Adds a todo to the end of the collection.

        Args:
            todo (Todo): The todo being stored.
        """

    @abstractmethod
    def _replace_todos(self, todos: "List[Todo]"):
        """Replaces the whole collection.

        Args:
            todos (List[Todo]): The new collection, in the order it should be kept.
        """

    @abstractmethod
    def _take_next_id(self) -> "int":
        """Returns the next identifier and advances the counter. Identifiers are never reused."""

    @abstractmethod
    def reset(self):
        """Empties the collection and restarts the identifier counter. Only meant for tests."""

    def list(self) -> "List[Todo]":
        """Returns all the todos in insertion order."""
        return list(self._get_todos())

    def add(self, text: "Any") -> "Todo":
        """Creates a new todo.

        Args:
            text (Any): The text of the todo. Must be a string that is not empty after trimming.

        Raises:
            ValidationException: If the text is missing, is not a string or is blank.

        Returns:
            Todo: The created todo.
        """
        if not isinstance(text, str) or text.strip() == "":
            raise ValidationException("Text is required")

        todo = Todo(id=self._take_next_id(), text=text.strip(), done=False)
        self._append_todo(todo)
        logger.info("Added todo %d", todo.id)
        return todo

    def get(self, id: "int") -> "Todo":
        """Returns the todo with the given id.

        Raises:
            TodoNotFoundException: If there is no such todo.
        """
        for todo in self._get_todos():
            if todo.id == id:
                return todo

        raise TodoNotFoundException(id=id)

    def update(self, id: "int", updates: "Dict[str, Any]") -> "Optional[Todo]":
        """Changes the text and/or the completion flag of a todo in place.

        The text is trimmed but, unlike in add, an empty result is accepted. Values with an
        unexpected type are ignored, as are unknown keys.

        Args:
            id (int): Identifier of the todo.
            updates (Dict[str, Any]): May contain "text" (str) and "done" (bool).

        Returns:
            Optional[Todo]: The updated todo or None if it doesn't exist.
        """
        try:
            todo = self.get(id=id)
        except TodoNotFoundException:
            return None

        text = updates.get("text")
        if isinstance(text, str):
            todo.text = text.strip()

        done = updates.get("done")
        if isinstance(done, bool):
            todo.done = done

        logger.info("Updated todo %d", todo.id)
        return todo

    def clear_completed(self) -> "List[Todo]":
        """Removes the completed todos, keeping the order of the remaining ones.

        Returns:
            List[Todo]: The remaining todos.
        """
        todos = self._get_todos()
        remaining = [todo for todo in todos if not todo.done]
        removed = len(todos) - len(remaining)
        self._replace_todos(remaining)
        if removed:
            logger.info("Cleared %d completed todos", removed)
        return self.list()
