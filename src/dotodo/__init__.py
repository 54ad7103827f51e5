"""dotodo: interactive todo list kept in a plain-text ``~/.todo`` file."""

__version__ = "0.1.0"
