"""Command groups for the todo-local CLI."""
