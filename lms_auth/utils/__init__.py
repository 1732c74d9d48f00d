"""Shared utilities for the authentication service."""
