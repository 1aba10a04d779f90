"""Follow files that grow inside a NUL-padded, pre-allocated region."""

__version__ = "0.1.0"
