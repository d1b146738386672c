"""State and logic for a lightweight IDE: settings, shell terminals, editor tabs and side panels."""

__version__ = "0.1.0"