"""Self-checking 32-bit integer kernels: bit tricks, crypto steps, arithmetic and mixing hashes."""

__version__ = "0.1.0"

__all__ = ["arith", "bits", "crypto", "mix", "programs"]