"""Fixed arrays, growable strings and vectors with explicit capacity."""

__version__ = "0.1.0"
__all__ = ["fixed_array", "dynamic_string", "vector"]