import logging
import os
import pathlib

from dotenv import load_dotenv, find_dotenv

# Prefer the project root .env (one level above this package), else the nearest one
package_dir = pathlib.Path(__file__).resolve().parent
project_root = package_dir.parent
root_env = project_root / ".env"
if root_env.exists():
    load_dotenv(dotenv_path=str(root_env), override=False)
else:
    _dotenv_path = find_dotenv(usecwd=True)
    if _dotenv_path:
        load_dotenv(_dotenv_path, override=False)

logger = logging.getLogger(__name__)


def _env_timeout(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r, using %ss", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r, using %ss", name, raw, default)
        return default
    return value


# Key pair
PUBLIC_KEY = os.getenv("SIGNATURE_PUBLIC_KEY", "")
PRIVATE_KEY = os.getenv("SIGNATURE_PRIVATE_KEY", "")

# Algorithm name for signature.hash_func.configure_from_env and the CLI
HASH_ALGORITHM = os.getenv("SIGNATURE_HASH_ALGORITHM", "sha1")

# Signed HTTP requests
REQUEST_TIMEOUT = _env_timeout("SIGNATURE_REQUEST_TIMEOUT", 15)
PUBLIC_KEY_HEADER = os.getenv("SIGNATURE_PUBLIC_KEY_HEADER", "X-Public-Key")
SIGNATURE_HEADER = os.getenv("SIGNATURE_HEADER", "X-Signature")
