# dotrepl - Interactive front-end for a Python runtime
"""
dotrepl is a read-eval-print loop with block-aware line accumulation and
tab completion over live dotted attribute chains.
"""

from dotrepl.version import __version__

__all__ = ["__version__"]
