"""User-configurable presentation settings."""

from __future__ import annotations

from dataclasses import dataclass

from gridchess.ui.styles.theme import THEMES


@dataclass
class AppSettings:
    """All user-configurable settings."""

    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    animate_moves: bool = True

    def __post_init__(self) -> None:
        if self.board_theme not in THEMES:
            raise ValueError(
                f"Unknown board theme {self.board_theme!r}; "
                f"expected one of {', '.join(THEMES)}"
            )
