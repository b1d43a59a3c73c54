"""Board colour schemes and the application stylesheet."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_selected: QColor  # selected piece origin
    highlight_target: QColor  # legal destinations
    last_move: QColor  # origin/destination of the previous move
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    piece_text: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_selected=QColor(255, 255, 0, 110),
            highlight_target=QColor(20, 160, 60, 90),
            last_move=QColor(155, 199, 0, 105),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
            piece_text=QColor(20, 20, 20),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_selected=QColor(255, 255, 0, 110),
            highlight_target=QColor(20, 160, 60, 90),
            last_move=QColor(155, 199, 0, 105),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
            piece_text=QColor(20, 20, 20),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_selected=QColor(255, 255, 0, 110),
            highlight_target=QColor(200, 60, 40, 80),
            last_move=QColor(155, 199, 0, 105),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
            piece_text=QColor(20, 20, 20),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme by display name; unknown names fall back to the default."""
        factory = THEMES.get(name)
        return factory() if factory is not None else cls.default()


THEMES = {
    "Classic": BoardTheme.default,
    "Blue": BoardTheme.blue,
    "Green": BoardTheme.green,
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "DejaVu Sans", "Helvetica Neue", sans-serif;
}

QLabel#statusLabel {
    font-size: 16px;
    padding: 4px 8px;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
