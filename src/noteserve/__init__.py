"""NoteServe - static markdown note archive with search."""

__version__ = "0.1.0"
