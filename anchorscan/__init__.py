"""anchorscan: list the links of a page rendered in a headless browser."""

__version__ = "0.1.0"
