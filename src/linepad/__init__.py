"""Full-screen console editor for a single plain-text file."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "keymaps",
    "dispatch",
    "runtime",
    "terminal",
    "view",
]

__version__ = "0.1.0"
