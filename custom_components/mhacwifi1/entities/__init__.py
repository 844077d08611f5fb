"""Declarative entity definitions for the MH-AC-WIFI-1 integration."""
