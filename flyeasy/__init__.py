"""Fly Easy travel inquiry relay."""
