class ValidationException(Exception):
    def __init__(self, message: "str"):
        super().__init__(message)
        self.message = message


class TodoNotFoundException(Exception):
    def __init__(self, id: "int"):
        super(TodoNotFoundException, self).__init__(f"Todo with ID '{id}' not found.")
        self.id = id
