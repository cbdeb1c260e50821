class Todo:
    """A single list item.

    Attributes:
        id (int): Identifier assigned by the store when the item is created. Never changes.
        text (str): The trimmed description of the item.
        done (bool): Whether the item was completed.
    """

    id: "int"
    text: "str"
    done: "bool"

    def __init__(self, id: "int", text: "str", done: "bool" = False):
        self.id = id
        self.text = text
        self.done = done

    def __repr__(self):  # pragma: no cover
        return f"Todo(id={self.id}, text='{self.text}', done={self.done})"

    def __eq__(self, other: "object"):
        if not isinstance(other, Todo):
            return NotImplemented

        return (
            self.id == other.id and self.text == other.text and self.done == other.done
        )

    def __hash__(self):
        return hash(self.id)
