"""Domain layer — wire models and pure transformations.

Nothing in this package performs I/O.  Infrastructure and services
depend on it, never the other way round.
"""
