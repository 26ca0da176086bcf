"""Building blocks for byte-level I/O, sorted tables, encodings, keys, timers and RPC wire structures."""

__version__ = "0.1.0"