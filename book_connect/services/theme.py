from __future__ import annotations
from typing import Callable, Optional

import streamlit as st

from book_connect.services.surface import Surface
from book_connect.utils.errors import ValidationError
from book_connect.utils.logging import logger
from book_connect.utils.typing import RGB, ThemePalette

DAY = "day"
NIGHT = "night"
THEMES = (DAY, NIGHT)
DEFAULT_THEME = DAY

_WHITE: RGB = (255, 255, 255)
_INK: RGB = (10, 10, 20)

PreferenceFn = Callable[[], Optional[bool]]


def derive_colors(theme: str) -> ThemePalette:
    if theme not in THEMES:
        raise ValidationError(f"Unknown theme: {theme!r}")
    if theme == NIGHT:
        # "dark" slot holds the foreground colour, so it is the light one at night
        return ThemePalette(dark_color=_WHITE, light_color=_INK)
    return ThemePalette(dark_color=_INK, light_color=_WHITE)


def format_rgb(color: RGB) -> str:
    return ", ".join(str(c) for c in color)


def apply_palette(surface: Surface, palette: ThemePalette, theme: str) -> None:
    surface.query("settings-theme").value = theme
    surface.set_property("--color-dark", format_rgb(palette.dark_color))
    surface.set_property("--color-light", format_rgb(palette.light_color))
    logger.info("theme.apply: %s", theme)


def palette_css(style: dict) -> str:
    decls = "".join(f"{name}: {value};" for name, value in style.items())
    return f"<style>:root{{{decls}}}</style>"


def detect_theme(prefers_dark: Optional[PreferenceFn] = None) -> str:
    if prefers_dark is None:
        return DEFAULT_THEME
    try:
        answer = prefers_dark()
    except Exception as e:
        logger.debug("theme.detect: ambient signal unavailable: %s", e)
        return DEFAULT_THEME
    return NIGHT if answer else DEFAULT_THEME


def streamlit_prefers_dark() -> Optional[bool]:
    """Ambient light/dark signal from the browser, when this Streamlit exposes it."""
    context = getattr(st, "context", None)
    theme = getattr(context, "theme", None)
    kind = getattr(theme, "type", None)
    if kind is None:
        return None
    return kind == "dark"
