"""Random identifiers."""

from __future__ import annotations

import uuid


def random_uuid() -> str:
    """Return a random (version 4) UUID string, e.g. ``"1b4e28ba-2fa1-4d2e-..."``."""
    return str(uuid.uuid4())
