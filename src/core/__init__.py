"""
Core math primitives, domain models, and contracts.

This module contains the error-tracked float64 arithmetic and the thin
serialization layer around it. It is independent of any predicate or exact
arithmetic implementation that consumes it.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
