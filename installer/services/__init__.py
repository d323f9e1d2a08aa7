"""Installer services."""
