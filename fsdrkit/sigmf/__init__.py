"""Reading, building and writing SigMF metadata, and tools to hash recordings."""

__all__ = ["errors", "dataset_format", "metadata", "description", "cli_collection", "cli_hash"]