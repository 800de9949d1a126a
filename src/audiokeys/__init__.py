"""AudioKeys - media source and user data key derivation for audio libraries."""

__version__ = "0.1.0"
