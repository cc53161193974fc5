"""Widoki stron."""
