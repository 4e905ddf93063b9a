"""Create and clip Rust solution files for coding problems, with a set of worked solutions."""

__version__ = "0.1.0"