"""CLI layer — the ``argscan`` inspection tool and its error boundary.

This package is the outermost layer of the project.  It may import
from ``core``, ``utils`` and ``exceptions``, but no other layer may
import from ``cli``.
"""
