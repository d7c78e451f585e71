from .policy import AddPolicy
from .checker import CoherenceChecker, resolve_scale

__all__ = ["AddPolicy", "CoherenceChecker", "resolve_scale"]
