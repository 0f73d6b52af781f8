pytest_plugins = ["todo_abac.testing.fixtures"]
