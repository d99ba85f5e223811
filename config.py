"""
Configuration settings for the Kingdom engine utilities.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# Determinism settings
SIM_SEED = int(os.getenv("SIM_SEED", "1"))
DETERMINISTIC_SIM = _env_flag("DETERMINISTIC_SIM", True)

# Input settings
INPUT_PREVENT_DEFAULT = _env_flag("INPUT_PREVENT_DEFAULT", True)  # skip fallback handling for handled events
DEBUG_INPUT = _env_flag("DEBUG_INPUT", False)
