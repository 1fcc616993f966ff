"""Library Manager - interactive command-line library catalog."""

__version__ = "0.1.0"
