import base64
import binascii
import logging
import os
from uuid import uuid4

from files_manager.exceptions import InvalidField

logger = logging.getLogger(__name__)


def decode_payload(data: str) -> bytes:
    try:
        return base64.b64decode(data)
    except (binascii.Error, ValueError):
        raise InvalidField("Invalid data")


def save_payload(folder_path: str, content: bytes) -> str:
    """Write ``content`` to a fresh file under ``folder_path`` and return its path.

    The folder is created when it does not exist yet.
    """
    os.makedirs(folder_path, exist_ok=True)
    local_path = os.path.join(folder_path, str(uuid4()))
    with open(local_path, "wb") as f:
        f.write(content)
    logger.debug("Stored %d bytes", len(content))
    return local_path
