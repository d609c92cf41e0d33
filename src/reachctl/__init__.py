"""reachctl — reachability over dependency graphs."""

__version__ = "0.1.0"
