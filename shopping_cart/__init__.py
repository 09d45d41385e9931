"""Shopping cart demo package."""
from . import domain

__all__ = ["domain"]
