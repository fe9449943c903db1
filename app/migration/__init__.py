"""Offline data migrations and seeding."""
