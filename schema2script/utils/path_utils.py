from datetime import datetime
from pathlib import Path

from schema2script.config import config

__all__ = [
    "workspace_path",
    "workspace_sub_dir",
    "get_timestamp",
]


def workspace_path(*parts) -> Path:

    if not parts:
        return Path(config["base_dirs"]["workspace"])

    invalid_parts = [p for p in parts if p is None or str(p).strip() == ""]
    if invalid_parts:
        raise ValueError(
            "workspace_path parts cannot be empty or None. "
            f"Received invalid segment(s): {invalid_parts}"
        )

    return Path(config["base_dirs"]["workspace"]).joinpath(*parts)


def workspace_sub_dir(key: str) -> Path:
    """Return ``workspace/<workspace_sub_dirs[key]>``, falling back to *key* itself."""
    sub = config.get("workspace_sub_dirs", {}).get(key, key)
    return workspace_path(sub)


def get_timestamp() -> str:
    """Return current timestamp as YYYYMMDD_HHMMSS string."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
