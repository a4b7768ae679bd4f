#!/usr/bin/env python3
"""
Main script to launch Duel Pong with PyGame graphical interface
"""

import importlib.util
import sys

try:
    from duel_pong.gui.game_app import main
    from duel_pong.utils.config import game_config
    from duel_pong.utils.config import load_config_from_file

except ImportError as e:
    print(f"Import error: {e}")
    print()
    print("Checking dependencies:")
    for package in ("pygame", "pydantic", "numpy"):
        if importlib.util.find_spec(package) is not None:
            print(f"✓ {package} is installed")
        else:
            print(f"✗ {package} is not installed - pip install {package}")
    sys.exit(1)

if __name__ == "__main__":
    print("=== DUEL PONG ===")
    print()

    config_file = sys.argv[1] if len(sys.argv) > 1 else "duel_pong_config.json"
    if load_config_from_file(config_file):
        print(f"Configuration loaded from {config_file}")

    layout = game_config.get_keyboard_layout()
    left_up, left_down = layout.left_keys["up"].upper(), layout.left_keys["down"].upper()

    print(f"Keyboard configuration: {layout.name}")
    print()
    print("CONTROLS:")
    print(f"  Player 1 (Left): {left_up}/{left_down}")
    print("  Player 2 (Right): Up/Down arrows")
    print("  Play/Pause button or P: Pause")
    print("  R: Restart")
    print("  ESC: Quit")
    print()

    main()
