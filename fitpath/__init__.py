"""FitPath: personalised 7-day fitness routines with local progress tracking."""

__version__ = "0.1.0"
