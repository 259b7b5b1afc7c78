"""Application use-cases built on the matching domain."""
