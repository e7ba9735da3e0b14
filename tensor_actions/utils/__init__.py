"""Utility modules for Tensor actions."""
