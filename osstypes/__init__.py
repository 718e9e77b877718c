"""Data types, validation and permission policies for object storage of files, folders and buckets."""

__version__ = "0.9.3"

__all__ = ["bucket", "cluster", "common", "file", "folder", "permission", "policy"]