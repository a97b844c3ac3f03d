"""Minimal SSH public key line validation."""

import base64

import structlog

logger = structlog.get_logger(__name__)

VALID_KEY_TYPES = ("ssh-rsa", "ssh-ecdsa")


def is_valid_key_line(line: str) -> bool:
    """Check a single `authorized_keys` style line.

    Only checks that the line has at least two whitespace separated parts,
    that the key data is base64 and that the key type is allowed.

    Args:
        line: Key line, e.g. "ssh-rsa AAAAB3Nza... comment"

    Returns:
        True if the line looks like a supported public key
    """
    parts = line.split()
    min_parts = 2
    if len(parts) < min_parts:
        logger.debug("Key has less than 2 parts", line=line, parts=parts)
        return False

    key_type, key_data = parts[0], parts[1]

    try:
        base64.b64decode(key_data, validate=True)
    except ValueError:
        logger.debug("Key data is not base64", line=line, key_data=key_data)
        return False

    if key_type not in VALID_KEY_TYPES:
        logger.debug(
            "Key type is not valid",
            line=line,
            key_type=key_type,
            valid_key_types=VALID_KEY_TYPES,
        )
        return False

    return True
