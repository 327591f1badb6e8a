# -*- coding: utf-8 -*-

"""
Main entry point for launching the Random Note Viewer application.
"""

import argparse
import logging
import os
import sys
import tkinter as tk

from random_note_viewer.app import RandomNoteApp, VIEW_NAME
from random_note_viewer.config import ConfigManager, ViewSettings
from random_note_viewer.core.exceptions import ConfigError
from random_note_viewer.core.services.vault_query import QueryFilter
from random_note_viewer.logging_config import setup_logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show a random note from a Markdown vault.")
    parser.add_argument("vault", nargs="?", help="Vault folder (default: view.yml, $RANDOM_NOTE_VAULT, cwd)")
    parser.add_argument("--pattern", help="Glob for note paths, relative to the vault (default: **/*.md)")
    parser.add_argument("--tag", help="Only draw notes carrying this frontmatter tag")
    return parser.parse_args(argv)


def resolve_vault(arg_value, settings: ViewSettings) -> str:
    return arg_value or settings.vault_dir or os.environ.get("RANDOM_NOTE_VAULT", "") or os.getcwd()


def main(argv=None):
    """
    Configure logging, main window, and launch application.
    """
    args = parse_args(argv)
    setup_logging()

    try:
        settings = ViewSettings.from_mapping(ConfigManager().get_view_config())
    except ConfigError as exc:
        logging.error("Invalid view configuration, using defaults: %s", exc)
        settings = ViewSettings()
    if args.tag:
        settings = settings.with_overrides(
            query_filter=QueryFilter(tag=args.tag, properties=dict(settings.query_filter.properties))
        )
    settings = settings.with_overrides(pattern=args.pattern)
    vault_dir = resolve_vault(args.vault, settings)

    root = tk.Tk()
    root.title(VIEW_NAME)
    window_width, window_height = settings.window_size
    # Calculate position to center the window
    screen_width = root.winfo_screenwidth()
    screen_height = root.winfo_screenheight()
    pos_x = (screen_width // 2) - (window_width // 2)
    pos_y = (screen_height // 2) - (window_height // 2)
    root.geometry(f"{window_width}x{window_height}+{pos_x}+{pos_y}")

    # Use modern theme if available
    try:
        from sv_ttk import set_theme
        set_theme("light")
    except ImportError:
        print("Warning: 'sv-ttk' theme is not installed.")

    RandomNoteApp(root, vault_dir, settings)

    root.mainloop()
    return 0


if __name__ == '__main__':
    sys.exit(main())
