"""UI-agnostic Emacs-style text editing engine."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "editor",
    "errors",
    "runtime",
]

__version__ = "0.1.0"
