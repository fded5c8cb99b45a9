"""QSS stylesheet and palette for Potion Timer."""

from __future__ import annotations

from ..timer.registry import Category

# ── default palette ──────────────────────────────────────────────────────

DEFAULT_PALETTE: dict[str, str] = {
    "bg":           "#1A1A2E",
    "bg_secondary": "#232340",
    "surface":      "#2A2A4A",
    "accent":       "#CBA6F7",
    "accent2":      "#89B4FA",
    "text":         "#E2E2F0",
    "text_muted":   "#7A7A9A",
    "danger":       "#F38BA8",
    "border":       "#313154",
}

# ── per-category row accents ─────────────────────────────────────────────

CATEGORY_COLORS: dict[Category, str] = {
    Category.BUILDER:  "#F9E2AF",   # gold
    Category.RESEARCH: "#89B4FA",   # elixir blue
}


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or DEFAULT_PALETTE
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QLabel#heading {{
        font-size: 22px;
        font-weight: 700;
    }}

    QLabel#subheading {{
        font-size: 16px;
        font-weight: 600;
        color: {p['text_muted']};
    }}

    /* ── inputs ─────────────────────────────────── */
    QLineEdit {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 8px;
        padding: 6px 10px;
    }}

    QLineEdit:focus {{
        border-color: {p['accent']};
    }}

    /* ── buttons ────────────────────────────────── */
    QPushButton {{
        background-color: {p['bg_secondary']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 8px;
        padding: 6px 16px;
        font-weight: 600;
    }}

    QPushButton:hover {{
        background-color: {p['surface']};
        border-color: {p['accent']};
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        border: none;
    }}

    QPushButton#primaryButton:hover {{
        background-color: {p['accent2']};
    }}

    QPushButton#removeButton {{
        background-color: transparent;
        color: {p['danger']};
        border: none;
        font-size: 20px;
        font-weight: 700;
        padding: 4px;
    }}

    /* ── timer list ─────────────────────────────── */
    QListWidget {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 10px;
    }}
    """
