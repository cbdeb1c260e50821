import os


def pytest_configure(config):
    os.environ["TODOLIST_ENV"] = "test"
