"""Shared fixtures for authcore tests."""
