#!/usr/bin/env python3
"""
Utility to configure the Duel Pong keyboard layout
"""

from duel_pong.utils.keyboard_layout import get_preferred_layout
from duel_pong.utils.keyboard_layout import list_available_layouts
from duel_pong.utils.keyboard_layout import set_preferred_layout
from duel_pong.utils.keyboard_layout import show_layout_help


def main():
    """Interface to configure keyboard layout"""
    print("=== DUEL PONG KEYBOARD CONFIGURATION ===")
    print()

    current_layout = get_preferred_layout()
    layouts = list_available_layouts()

    print(f"Current layout: {layouts[current_layout]}")
    print()
    print("Commands:")
    print("  help - Show key help")
    print("  list - List layouts")
    print("  set <layout> - Change layout (e.g. 'set azerty')")
    print("  quit - Exit")
    print()

    while True:
        try:
            command = input("duel_pong_config> ").strip().lower()
        except (KeyboardInterrupt, EOFError):
            print()
            break

        if command in ("quit", "q"):
            break

        elif command in ("help", "h"):
            print()
            print(show_layout_help(current_layout))

        elif command in ("list", "l"):
            for key, name in layouts.items():
                marker = " (current)" if key == current_layout else ""
                print(f"  {key}: {name}{marker}")

        elif command.startswith("set "):
            layout = command[4:].strip()
            if set_preferred_layout(layout):
                print(f"Layout changed to: {layouts[layout]}")
                current_layout = layout
            else:
                print(f"Unknown layout: {layout}")
                print(f"Available layouts: {', '.join(layouts.keys())}")

        else:
            print("Unknown command. Type 'help' for help.")


if __name__ == "__main__":
    main()
