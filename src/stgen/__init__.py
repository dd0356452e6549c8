"""stgen — typed Python clients generated from a SmartThings account."""

__version__ = "0.1.0"
