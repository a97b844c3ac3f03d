"""Write keys to an authorized_keys file and render the command output."""

import json
from pathlib import Path

import structlog

from superkeyloader.errors import KeyloaderError
from superkeyloader.models import Provider

logger = structlog.get_logger(__name__)


def append_keys(path: Path, keys: list[str]) -> None:
    """Append keys to `path`, one per line.

    The file and its parent directories are created if missing. A newline is
    added first if the file does not end with one.

    Raises:
        KeyloaderError: The file cannot be written
    """
    payload = "".join(f"{key}\n" for key in keys)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if (
            path.exists()
            and path.stat().st_size > 0
            and not path.read_bytes().endswith(b"\n")
        ):
            payload = f"\n{payload}"
        # all keys in a single write
        with path.open("a", encoding="utf-8") as f:
            f.write(payload)
    except OSError as e:
        msg = f"Unable to write {len(keys)} keys to '{path}': {e}"
        raise KeyloaderError(msg) from e

    for i, key in enumerate(keys, start=1):
        logger.debug("Wrote key", index=i, total=len(keys), key=key[:48])


def render_output(
    keys: list[str],
    username: str,
    provider: Provider,
    path: Path | None,
    *,
    human: bool,
) -> str:
    """Build the message printed after a successful run.

    Args:
        keys: Downloaded keys
        username: Account the keys belong to
        provider: Provider the keys come from
        path: File keys were appended to, None if nothing was written
        human: Human readable summary instead of JSON

    Returns:
        Summary sentence, or a JSON document `{"keys": [...]}`
    """
    if not human:
        return json.dumps({"keys": keys})

    message = (
        f"Downloaded {len(keys)} SSH keys for user '{username}' "
        f"from {provider.display_name}"
    )
    if path is None:
        return f"{message}."
    return f"{message} and appended to '{path}'."
