"""Shared colors and fonts for PDF report rendering."""

from __future__ import annotations

# Colors for print (white page background)
PRINT_COLORS = {
    "text": "#000000",
    "text_muted": "#646464",
    "accent": "#4682b4",
    "header_bg": "#4682b4",
    "header_text": "#ffffff",
    "header_rule": "#326496",
    "row_alt": "#f8f8f8",
    "divider": "#dcdcdc",
    "border": "#4682b4",
    "separator": "#969696",
}

FONT_FAMILY = "Helvetica"

TITLE_FONT_SIZE = 22
SUBTITLE_FONT_SIZE = 12
SECTION_FONT_SIZE = 16
STAT_FONT_SIZE = 11
TABLE_HEADER_FONT_SIZE = 12
TABLE_BODY_FONT_SIZE = 10
