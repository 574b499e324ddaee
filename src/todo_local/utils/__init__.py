"""Shared utilities for todo-local."""
