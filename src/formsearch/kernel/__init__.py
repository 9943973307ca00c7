"""Kernel – errors, predicate specifications and type introspection."""
