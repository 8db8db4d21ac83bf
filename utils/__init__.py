"""Shared utilities: configuration, logging, extraction and validation."""
