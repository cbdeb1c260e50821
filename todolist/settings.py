from werkzeug.utils import import_string
from typing import Dict, Any, Mapping, Optional
import os

DEFAULTS: "Dict[str, Any]" = {
    "HOST": "127.0.0.1",
    "PORT": 3000,
    "TESTING": False,
    "STORE_CLASS": "todolist.backends.in_memory.InMemoryTodoStore",
}

IMPORT_STRINGS = ["STORE_CLASS"]

ENVIRONMENT_VARIABLES = {
    "HOST": "TODOLIST_HOST",
    "PORT": "PORT",
    "STORE_CLASS": "TODOLIST_STORE_CLASS",
}


def perform_import(val, setting_name):
    """
    If the given setting is a string import notation,
    then perform the necessary import.
    """
    if val is None:
        return None
    elif isinstance(val, str):
        return import_from_string(val, setting_name)
    return val


def import_from_string(val, setting_name):
    """
    Attempt to import a class from a string representation.
    """
    try:
        return import_string(val)
    except ImportError as e:
        msg = "Could not import '%s' for setting '%s'. %s: %s." % (
            val,
            setting_name,
            e.__class__.__name__,
            e,
        )
        raise ImportError(msg)


def parse_port(val) -> "int":
    try:
        port = int(val)
    except (TypeError, ValueError):
        raise ValueError("Invalid port: '%s'" % (val,))

    if not 0 <= port <= 65535:
        raise ValueError("Invalid port: '%s'" % (val,))
    return port


def settings_from_env(environ: "Optional[Mapping[str, str]]" = None) -> "Dict[str, Any]":
    """Reads the user settings from environment variables. Unset or empty variables fall
    back to the defaults."""
    if environ is None:
        environ = os.environ

    user_settings: "Dict[str, Any]" = {}
    for attr, env_name in ENVIRONMENT_VARIABLES.items():
        value = environ.get(env_name)
        if value:
            user_settings[attr] = value

    if environ.get("TODOLIST_ENV") == "test":
        user_settings["TESTING"] = True

    return user_settings


class TodoListSettings:
    """
    A settings object that allows the settings to be accessed as
    properties. For example:

        from todolist.settings import TodoListSettings
        settings = TodoListSettings(user_settings={"PORT": 8080})
        print(settings.PORT)

    When user_settings isn't given, they are read from the environment.
    """

    def __init__(
        self,
        user_settings: "Optional[Mapping[str, Any]]" = None,
        defaults=DEFAULTS,
        import_strings=IMPORT_STRINGS,
    ):
        self.defaults = defaults
        self.import_strings = import_strings
        if user_settings is None:
            user_settings = settings_from_env()
        self._user_settings = dict(user_settings)

    def __getattr__(self, attr):
        if attr not in self.defaults:
            raise AttributeError("Invalid setting: '%s'" % attr)

        try:
            val = self._user_settings[attr]
        except KeyError:
            val = self.defaults[attr]

        # Coerce import strings into classes
        if attr in self.import_strings:
            val = perform_import(val, attr)

        if attr == "PORT":
            val = parse_port(val)

        # Cache the result
        setattr(self, attr, val)
        return val


def create_store(settings: "TodoListSettings"):
    """Instantiates the store class configured in the settings."""
    store_class = settings.STORE_CLASS
    return store_class()
