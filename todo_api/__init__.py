"""todo-api: a task list over one relational table, served as JSON over HTTP."""

__version__ = "1.0.0"
