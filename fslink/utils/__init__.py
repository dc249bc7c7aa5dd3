"""Shared helpers for fslink."""
