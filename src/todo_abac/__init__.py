"""
todo_abac – attribute-based access control for shared todo records.

Import path convention::

    from todo_abac.kernel.security import can_view, filter_visible
    from todo_abac.kernel.todos import Todo, TodoStatus
    from todo_abac.application.todos import TodoService
    from todo_abac.adapters.fastapi import TodoRouter
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
