"""Stream transducers.

Each transducer reads a west channel until it closes and writes an
east channel that it closes exactly once when done.
"""
