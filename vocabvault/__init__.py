"""Latin word helpers: roman numerals, spelling-trick tables, nominal principal parts and selection."""

__version__ = "0.1.2"