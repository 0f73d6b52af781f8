"""Testing support – fixtures and property-based generators.

Import in your ``conftest.py``::

    pytest_plugins = ["todo_abac.testing.fixtures"]
"""
