from __future__ import annotations

import uuid


def new_temp_name() -> str:
    """Generate a name for an object uploaded to the temporary folder."""
    return f"temp-{uuid.uuid4().hex}"
