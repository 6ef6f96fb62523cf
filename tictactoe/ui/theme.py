from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

# -----------------------------------------------------------------------------
# DARK THEME
# -----------------------------------------------------------------------------

ACCENT_COLOR = QColor(42, 130, 218)
DISABLED_COLOR = QColor(127, 127, 127)

DARK_ROLES = {
    QPalette.Window: QColor(53, 53, 53),
    QPalette.WindowText: Qt.white,
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: QColor(53, 53, 53),
    QPalette.ToolTipBase: Qt.white,
    QPalette.ToolTipText: Qt.black,
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.BrightText: Qt.red,
    QPalette.Link: ACCENT_COLOR,
    QPalette.Highlight: ACCENT_COLOR,
    QPalette.HighlightedText: Qt.white,
    QPalette.PlaceholderText: QColor(160, 160, 160),
}

DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)


def dark_palette():
    palette = QPalette()
    for role, color in DARK_ROLES.items():
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, DISABLED_COLOR)
    return palette


def apply_default_palette(app):
    """
    Fusion style + dark palette for the whole app.
    """
    app.setStyle('Fusion')
    app.setPalette(dark_palette())
