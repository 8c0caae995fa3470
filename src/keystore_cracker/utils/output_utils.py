"""Write the recovered password to disk."""

import os
from datetime import datetime
from logging import getLogger
from pathlib import Path

logger = getLogger(__name__)


def save_recovered_password(password: str, keystore_path: Path, output_file: Path) -> Path:
    """
    Write password, keystore path and time to `output_file`, readable by the owner only.

    The file is created with mode 0600 where the platform supports POSIX
    permissions.
    """
    output_file = Path(output_file)
    content = (f"Password: {password}\n"
               f"Keystore: {keystore_path}\n"
               f"Time: {datetime.now():%Y-%m-%d %H:%M:%S}\n")

    fd = os.open(output_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(content)

    try:
        os.chmod(output_file, 0o600)
    except (NotImplementedError, PermissionError) as e:
        logger.debug(f"Could not restrict permissions of {output_file}: {e}")

    logger.warning(f"Password saved in plain text to {output_file} - delete it after use!")
    return output_file
