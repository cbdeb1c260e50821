from .store import InMemoryTodoStore
