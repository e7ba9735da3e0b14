"""API routes for Tensor actions."""
