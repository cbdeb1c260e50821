from flask import Flask, Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest, MethodNotAllowed, NotFound
from todolist.core.exceptions import ValidationException, TodoNotFoundException
from todolist.core.serializer import BaseTodoSerializer, TodoJSONSerializer
from todolist.core.store import BaseTodoStore
from todolist.core.validation import (
    validate_new_todo,
    validate_todo_updates,
    parse_todo_id,
)
from todolist.settings import TodoListSettings, create_store
from typing import Optional
import os
import logging

logger = logging.getLogger(__name__)

STATIC_FOLDER = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")

api = Blueprint("todos", __name__, url_prefix="/api")


def get_store() -> "BaseTodoStore":
    return current_app.extensions["todolist"]["store"]


def get_serializer() -> "BaseTodoSerializer":
    return current_app.extensions["todolist"]["serializer"]


def _read_body():
    # Missing bodies and non-JSON content types are read as no body
    if not request.is_json or not request.get_data():
        return None

    try:
        return request.get_json()
    except BadRequest:
        raise ValidationException("Invalid JSON body")


@api.route("/todos", methods=["GET"])
def list_todos():
    todos = get_store().list()
    return jsonify(get_serializer().serialize_many(todos=todos))


@api.route("/todos", methods=["POST"])
def create_todo():
    result = validate_new_todo(_read_body())
    if not result.is_valid:
        raise ValidationException(result.error)

    todo = get_store().add(text=result.value)
    return jsonify(get_serializer().serialize(todo=todo)), 201


@api.route("/todos/completed", methods=["DELETE"])
def clear_completed_todos():
    todos = get_store().clear_completed()
    return jsonify(get_serializer().serialize_many(todos=todos))


@api.route("/todos/<raw_id>", methods=["PUT"])
def update_todo(raw_id):
    todo_id = parse_todo_id(raw_id)
    if todo_id is None:
        raise TodoNotFoundException(id=raw_id)

    updates = validate_todo_updates(_read_body()).value
    todo = get_store().update(id=todo_id, updates=updates)
    if todo is None:
        raise TodoNotFoundException(id=todo_id)

    return jsonify(get_serializer().serialize(todo=todo))


@api.errorhandler(ValidationException)
def handle_validation_error(error: "ValidationException"):
    logger.info("Rejected todo: %s", error.message)
    return jsonify({"error": error.message}), 400


@api.errorhandler(TodoNotFoundException)
def handle_todo_not_found(error: "TodoNotFoundException"):
    logger.info("Todo %s not found", error.id)
    return jsonify({"error": "Todo not found"}), 404


def handle_not_found(error: "NotFound"):
    if request.path.startswith(api.url_prefix + "/"):
        return jsonify({"error": "Not found"}), 404
    return error


def handle_method_not_allowed(error: "MethodNotAllowed"):
    if request.path.startswith(api.url_prefix + "/"):
        response = jsonify({"error": "Method not allowed"})
        response.status_code = 405
        response.headers["Allow"] = ", ".join(error.valid_methods or [])
        return response
    return error


def create_app(
    store: "Optional[BaseTodoStore]" = None,
    settings: "Optional[TodoListSettings]" = None,
    serializer: "Optional[BaseTodoSerializer]" = None,
) -> "Flask":
    """Builds the web application.

    Args:
        store (Optional[BaseTodoStore]): The store the requests operate on. When missing, the one
            configured in the settings is created.
        settings (Optional[TodoListSettings]): Settings to use. Read from the environment when missing.
        serializer (Optional[BaseTodoSerializer]): Converts todos to JSON. Defaults to TodoJSONSerializer.

    Returns:
        Flask: The application. The store is available at app.extensions["todolist"]["store"].
    """
    if settings is None:
        settings = TodoListSettings()

    if store is None:
        store = create_store(settings=settings)

    if serializer is None:
        serializer = TodoJSONSerializer()

    app = Flask(__name__, static_folder=STATIC_FOLDER, static_url_path="")
    app.config["TESTING"] = settings.TESTING
    app.json.sort_keys = False
    app.extensions["todolist"] = {
        "store": store,
        "serializer": serializer,
        "settings": settings,
    }

    app.register_blueprint(api)
    app.register_error_handler(NotFound, handle_not_found)
    app.register_error_handler(MethodNotAllowed, handle_method_not_allowed)

    @app.route("/")
    def index():
        return app.send_static_file("index.html")

    return app
