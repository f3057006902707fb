"""Typed game events and the presenter interface."""
