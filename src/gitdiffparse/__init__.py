"""gitdiffparse - structured records from git diff output."""

__version__ = "0.1.0"
