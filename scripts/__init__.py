"""Command line entry points; run them directly with ``python scripts/<name>.py``."""
