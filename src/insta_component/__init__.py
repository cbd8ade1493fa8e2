"""insta-component - scaffold React component boilerplate from the terminal."""

__version__ = "0.1.0"
