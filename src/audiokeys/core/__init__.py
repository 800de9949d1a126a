"""Derivation components for audio library items.

This package contains the library arena, the media source builder and the
sort name and user data key derivations built on top of it.
"""

from audiokeys.core.media_source import MediaSourceBuilder
from audiokeys.core.user_data import UserDataKeyResolver

__all__ = ["MediaSourceBuilder", "UserDataKeyResolver"]
