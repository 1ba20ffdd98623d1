"""trashtui - Interactive terminal browser for the freedesktop.org trash can."""

__version__ = "0.3.0"
