"""todoctl: a small reactive todo store with a terminal front end."""

__version__ = "0.1.0"
