"""Pydantic models for wire shapes, parameter bags and results."""
