"""Outer service layer (CLI)."""
