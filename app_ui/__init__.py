"""Interfejs NiceGUI forum."""
