"""
The MODEL layer contains pure data structures and the bounds computation.
It has no I/O and never configures logging.
"""
