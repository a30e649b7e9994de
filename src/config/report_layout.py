"""Layout constants for generated PDF reports.

All values are PDF points (1/72 inch). Coordinates follow the PDF
convention: origin at the bottom-left corner, y grows upwards.
"""

from __future__ import annotations

# A4 in points
A4_WIDTH_PT = 595.28
A4_HEIGHT_PT = 841.89

PAGE_MARGIN = 50

# Table geometry
TABLE_HEADER_HEIGHT = 30
TABLE_ROW_HEIGHT = 25
TABLE_CELL_PADDING = 8
AVERAGE_CHAR_WIDTH = 6
HEADER_TEXT_BASELINE = 20
ROW_TEXT_BASELINE = 16
# Extra space that must remain below a row before the page breaks
PAGE_SAFETY_MARGIN = 25

HEADER_RULE_WIDTH = 2
ROW_DIVIDER_WIDTH = 0.5
OUTER_BORDER_WIDTH = 2
COLUMN_SEPARATOR_WIDTH = 1

# Title block and summary sections
TITLE_GAP = 30
SUBTITLE_LINE_GAP = 18
TITLE_RULE_WIDTH = 3
TITLE_RULE_GAP = 15
SECTION_GAP = 40
SECTION_HEADING_GAP = 25
STAT_LINE_GAP = 16
TABLE_HEADING_GAP = 30
