"""Lint rules built on the precision check.

Python 3.13+.
"""

from .no_loss_of_precision import META, RuleMeta, check_literal

__all__ = ["META", "RuleMeta", "check_literal"]
