"""Building blocks of a small command shell: tokenizer, environment, builtins and helpers."""

__version__ = "0.1.0"

__all__ = [
    "builtins",
    "chars",
    "cstr",
    "environment",
    "lexer",
    "printf",
]