import os
from typing import Dict

from pydantic import BaseModel

from kdp_page_setup.config.sizes import SETTINGS_KEY


class Profile(BaseModel):
    store_path: str = ".kdp_page_setup.json"
    settings_key: str = SETTINGS_KEY
    proof_guides: bool = True
    remember_settings: bool = True


LOCAL = Profile()
EPHEMERAL = Profile(remember_settings=False, proof_guides=False)

PROFILES: Dict[str, Profile] = {
    "local": LOCAL,
    "ephemeral": EPHEMERAL,
}


def load_profile(name: str | None = None) -> Profile:
    """Pick a profile by name (or $KDP_PAGE_SETUP_PROFILE), then apply $KDP_PAGE_SETUP_STORE."""
    key = name or os.getenv("KDP_PAGE_SETUP_PROFILE") or "local"
    if key not in PROFILES:
        raise ValueError(f"Unknown profile '{key}'. Available: {list(PROFILES.keys())}")
    profile = PROFILES[key].model_copy()
    store_override = os.getenv("KDP_PAGE_SETUP_STORE")
    if store_override:
        profile.store_path = store_override
    return profile
