"""Utility helpers for audiokeys."""
