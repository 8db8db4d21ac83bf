"""HTTP API for AI review of NGO progress reports.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""
