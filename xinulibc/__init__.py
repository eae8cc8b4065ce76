"""C-style runtime routines: character classes, strings, formatting, scanning, sorting, random numbers and deadlock detection."""

__version__ = "0.1.0"
__all__ = ["chartype", "strings", "fmt", "scan", "qsort", "rand", "deadlock"]