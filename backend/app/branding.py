"""
Static branding shown in the application header.
"""

APP_NAME = "TipSplit"

HEADER = {
    "title": APP_NAME,
    "highlight": "Tip",
    "rest": "Split",
    "icon": "piggy-bank",
}
