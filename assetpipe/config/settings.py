"""
Build feature toggles.

Edit DEFAULT_SETTINGS to turn build features on or off.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Which build tasks do any work."""

    clean: bool = True
    scripts: bool = True
    polyfills: bool = False
    styles: bool = True
    svgs: bool = True
    copy: bool = True
    reload: bool = True


DEFAULT_SETTINGS = Settings()
