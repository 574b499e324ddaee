"""todo-local: a local SQLite task store with a small command-line front end."""

__version__ = "0.1.0"
