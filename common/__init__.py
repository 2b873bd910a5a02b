"""Shared helpers for the media library project."""
