"""Configuration for argguard.

Key components:
- ArgGuardSettings: Pydantic settings schema (``ARGGUARD_`` environment prefix)
- current_settings: Effective settings for the running context
- settings_scope: Context-local programmatic overrides
"""

from .schema import ArgGuardSettings
from .scope import current_settings, resolve_settings, settings_scope

__all__ = [
    "ArgGuardSettings",
    "current_settings",
    "resolve_settings",
    "settings_scope",
]
