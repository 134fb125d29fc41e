"""Terminal chat over named pipes: shared pipe plumbing, a single-user session and a five-pipe hub."""

__version__ = "0.1.0"