"""Column-major tensor helpers: sub-tensor layouts, flexible assignment, indexing and result containers."""

__version__ = "0.1.0"

__all__ = [
    "index_block",
    "subtensor_info",
    "creation",
    "flex",
    "indexing",
    "decomps",
    "optim",
]