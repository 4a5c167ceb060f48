"""acctctl — in-memory account balance manager with an interactive menu."""

__version__ = "0.1.0"
