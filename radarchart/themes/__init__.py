from typing import Dict
from .base import Theme
from .legacy import LegacyTheme
from .light import LightTheme
from .dark import DarkTheme

# Registry of available themes
_THEMES: Dict[str, Theme] = {
    "legacy": LegacyTheme(),
    "light": LightTheme(),
    "dark": DarkTheme(),
}


def get_theme(name: str = "legacy") -> Theme:
    """
    Get a theme by name

    Args:
        name: Theme name (legacy, light, dark); empty means legacy

    Returns:
        Theme instance

    Raises:
        ValueError: If theme name is not registered
    """
    theme_name = name.lower() if name else "legacy"
    theme = _THEMES.get(theme_name)

    if theme is None:
        available = ", ".join(_THEMES.keys())
        raise ValueError(f"Unknown theme '{name}'. Available themes: {available}")

    return theme


def register_theme(name: str, theme: Theme) -> None:
    """
    Register a custom theme

    Args:
        name: Theme name
        theme: Theme instance
    """
    _THEMES[name.lower()] = theme


def list_themes() -> list[str]:
    """Get a list of available theme names"""
    return list(_THEMES.keys())


__all__ = [
    "Theme",
    "LegacyTheme",
    "LightTheme",
    "DarkTheme",
    "get_theme",
    "register_theme",
    "list_themes",
]
