"""Identifier utilities."""

import secrets
import uuid


def generate_post_id() -> str:
    """Generate a Ghost object ID: 12 random bytes as 24 lowercase hex chars."""
    return secrets.token_hex(12)


def generate_uuid() -> str:
    """Generate a random lowercase UUID string."""
    return str(uuid.uuid4()).lower()
