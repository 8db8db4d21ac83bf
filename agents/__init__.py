"""Agents for AI-assisted report review."""
