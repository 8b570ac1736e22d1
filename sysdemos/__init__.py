"""Small worked examples of systems programming: algorithms, tone detection, IPC and device access."""

__version__ = "0.1.0"