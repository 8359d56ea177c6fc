"""Kernel value types — public re-export surface.

Modules:
  result.py — Ok, Err, Result, collect
"""

from evtstream.kernel.types.result import Err, Ok, Result, collect

__all__ = ["Err", "Ok", "Result", "collect"]
