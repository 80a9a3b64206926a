"""Settle CLI design standards.

Colors, symbols and layout shared by every command's output.
"""

# Color palette
COLORS = {
    'primary': '#3B82F6',          # Headers, key insights (bright blue)
    'success': '#10B981',          # Fulfilled values, PASS indicators (green)
    'error': '#EF4444',            # Rejected reasons, FAIL indicators (red)
    'info': '#06B6D4',             # Counts, metadata, secondary info (cyan)
    'muted': '#6B7280',            # Secondary text, supporting details (gray)
}

LAYOUT = {
    'terminal_width': 120,
    'index_column_width': 6,
}

SYMBOLS = {
    'pass': '✓',
    'fail': '✗',
}

# Group table styles
GROUP_STYLES = {
    'fulfilled_header': f"bold {COLORS['success']}",
    'fulfilled_value': 'success',
    'rejected_header': f"bold {COLORS['error']}",
    'rejected_reason': 'error',
    'index': 'muted',
}
