"""CLI package.

The ``cli`` sub-package contains the Click application.  Commands import
the sub-packages they need lazily so ``namecheck --help`` stays fast.
"""
from __future__ import annotations
