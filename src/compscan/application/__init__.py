"""compscan application layer.

Use cases built on the domain: strategy registry, discovery scanning,
snapshot serialization/hashing/comparison, change detection, reporting.
"""
