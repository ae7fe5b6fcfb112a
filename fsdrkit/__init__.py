"""SigMF metadata, automatic gain control and queue-backed blocks for SDR sample streams."""

__version__ = "0.1.0"