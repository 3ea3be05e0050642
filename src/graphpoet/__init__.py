"""graphpoet — bridge-word poetry from a word affinity graph."""

__version__ = "0.1.0"
