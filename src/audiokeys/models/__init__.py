"""Data models for audio library items, media streams and media sources."""
