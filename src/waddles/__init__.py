"""Waddles Discord bot: settings and startup."""
