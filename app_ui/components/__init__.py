"""Komponenty UI."""
