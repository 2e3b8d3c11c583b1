"""A small command shell with PATH lookup, environment and file helpers."""

__version__ = "0.1.0"
__all__ = ["builtins", "cli", "envtools", "executor", "fileops", "pathsearch", "tokenizer"]