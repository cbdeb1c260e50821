import unittest
import unittest.mock
from flask import Flask
from todolist.__main__ import main
from todolist.settings import TodoListSettings


class MainTest(unittest.TestCase):
    def test_test_mode_does_not_listen(self):
        with unittest.mock.patch.object(Flask, "run") as run:
            app = main(settings=TodoListSettings(user_settings={"TESTING": True}))

        run.assert_not_called()
        self.assertTrue(app.config["TESTING"])

    def test_runs_server_on_configured_port(self):
        settings = TodoListSettings(user_settings={"PORT": "5055"})
        with unittest.mock.patch.object(Flask, "run") as run:
            main(settings=settings)

        run.assert_called_once_with(host="127.0.0.1", port=5055)
