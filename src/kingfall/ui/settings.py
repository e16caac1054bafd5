"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Players
    white_name: str = "White"
    black_name: str = "Black"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_valid_moves: bool = True

    # Diagnostics
    log_level: str = "INFO"
