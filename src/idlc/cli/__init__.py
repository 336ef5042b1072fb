"""CLI layer — flag parsing, usage rendering, and the error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, but ``core`` never imports from ``cli``.
"""
