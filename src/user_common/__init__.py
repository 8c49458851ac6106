"""Shared domain layer for the Users API."""
