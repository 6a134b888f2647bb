"""linecmp - find common or different lines across text files"""

__version__ = "1.0.0"
