import unittest
import unittest.mock
from todolist.backends.in_memory import InMemoryTodoStore
from todolist.settings import TodoListSettings, settings_from_env, create_store


class SettingsTest(unittest.TestCase):
    def test_defaults(self):
        settings = TodoListSettings(user_settings={})
        self.assertEqual(settings.HOST, "127.0.0.1")
        self.assertEqual(settings.PORT, 3000)
        self.assertFalse(settings.TESTING)
        self.assertIs(settings.STORE_CLASS, InMemoryTodoStore)

    def test_from_env(self):
        user_settings = settings_from_env(
            {"PORT": "8080", "TODOLIST_HOST": "0.0.0.0", "TODOLIST_ENV": "test"}
        )
        settings = TodoListSettings(user_settings=user_settings)
        self.assertEqual(settings.PORT, 8080)
        self.assertEqual(settings.HOST, "0.0.0.0")
        self.assertTrue(settings.TESTING)

    def test_empty_env_values_use_defaults(self):
        user_settings = settings_from_env({"PORT": "", "TODOLIST_ENV": "production"})
        self.assertEqual(user_settings, {})

    def test_reads_os_environ(self):
        with unittest.mock.patch.dict("os.environ", {"PORT": "4000"}):
            settings = TodoListSettings()
        self.assertEqual(settings.PORT, 4000)

    def test_invalid_port(self):
        for port in ["abc", "-1", "70000"]:
            with self.subTest(port=port):
                settings = TodoListSettings(user_settings={"PORT": port})
                with self.assertRaises(ValueError):
                    settings.PORT

    def test_invalid_setting(self):
        settings = TodoListSettings(user_settings={})
        with self.assertRaises(AttributeError):
            settings.UNKNOWN

    def test_bad_store_class(self):
        settings = TodoListSettings(user_settings={"STORE_CLASS": "todolist.nothing.Store"})
        with self.assertRaises(ImportError) as context:
            settings.STORE_CLASS
        self.assertIn("STORE_CLASS", str(context.exception))

    def test_create_store(self):
        settings = TodoListSettings(user_settings={})
        store = create_store(settings=settings)
        self.assertIsInstance(store, InMemoryTodoStore)
        self.assertIsNot(store, create_store(settings=settings))
