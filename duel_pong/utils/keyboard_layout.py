"""
Keyboard layout detection and management for Duel Pong
"""

import json
import locale
import os
from dataclasses import dataclass
from pathlib import Path

import pygame

from duel_pong.utils.config import GameConfig
from duel_pong.utils.logger import logger


@dataclass
class KeyboardLayout:
    """Paddle keys for one keyboard layout"""

    name: str
    letter_keys: dict[str, int]
    arrow_keys: dict[str, int]
    display_names: dict[str, str]


_ARROW_KEYS = {"up": pygame.K_UP, "down": pygame.K_DOWN}

KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        letter_keys={"up": pygame.K_w, "down": pygame.K_s},
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        letter_keys={"up": pygame.K_z, "down": pygame.K_s},  # Z instead of W
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        letter_keys={"up": pygame.K_w, "down": pygame.K_s},
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
}


def get_keyboard_layout(name: str) -> KeyboardLayout:
    """Get a layout by name, falling back to QWERTY"""
    return KEYBOARD_LAYOUTS.get(name, KEYBOARD_LAYOUTS["qwerty"])


def detect_system_layout() -> str:
    """
    Detect the most likely keyboard layout based on system locale

    Returns:
        Keyboard layout name (default to 'qwerty' if detection fails)
    """
    try:
        system_locale = locale.getlocale()[0]
    except ValueError:
        system_locale = None

    if not system_locale:
        # Fallback to environment variables
        system_locale = os.environ.get("LANG", "")

    system_locale = system_locale.lower()
    if system_locale.startswith("fr"):
        return "azerty"
    elif system_locale.startswith("de"):
        return "qwertz"
    return "qwerty"


def get_config_file_path() -> Path:
    """Get the path to the user configuration file"""
    return Path.home() / ".config" / "duel_pong" / "user_config.json"


def load_user_preferences() -> dict:
    """Load user preferences from config file"""
    config_file = get_config_file_path()

    if config_file.exists():
        try:
            with open(config_file, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", config_file, e)

    return {}


def save_user_preferences(preferences: dict) -> None:
    """Save user preferences to config file"""
    config_file = get_config_file_path()
    config_file.parent.mkdir(parents=True, exist_ok=True)

    with open(config_file, "w", encoding="utf-8") as f:
        json.dump(preferences, f, indent=2, ensure_ascii=False)


def get_preferred_layout(config: GameConfig | None = None) -> str:
    """
    Get the user's preferred keyboard layout

    Priority:
    1. User saved preference
    2. System detection
    3. Configuration value
    """
    user_prefs = load_user_preferences()
    layout = user_prefs.get("keyboard_layout")
    if layout in KEYBOARD_LAYOUTS:
        return layout

    detected = detect_system_layout()
    if detected in KEYBOARD_LAYOUTS:
        return detected

    return config.KEYBOARD_LAYOUT if config is not None else "qwerty"


def set_preferred_layout(layout: str) -> bool:
    """
    Save the user's preferred keyboard layout

    Args:
        layout: Layout name (must be in KEYBOARD_LAYOUTS)

    Returns:
        True if saved, False for an unknown layout
    """
    if layout not in KEYBOARD_LAYOUTS:
        return False

    user_prefs = load_user_preferences()
    user_prefs["keyboard_layout"] = layout
    save_user_preferences(user_prefs)
    return True


def list_available_layouts() -> dict[str, str]:
    """Get all available keyboard layouts"""
    return {name: layout.name for name, layout in KEYBOARD_LAYOUTS.items()}


def show_layout_help(layout_name: str) -> str:
    """Format the key mappings of a layout"""
    layout = get_keyboard_layout(layout_name)

    help_text = f"Current keyboard layout: {layout.name}\n\n"
    help_text += "Left paddle:\n"
    for action, key_name in layout.display_names.items():
        help_text += f"  {action}: {key_name}\n"

    help_text += "\nRight paddle:\n"
    help_text += "  up: ↑\n"
    help_text += "  down: ↓\n"

    help_text += f"\nAvailable layouts: {', '.join(list_available_layouts().values())}\n"

    return help_text
