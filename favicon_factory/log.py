"""Console status lines for the favicon plugin."""

import sys

LOG_LABEL = "favicon-factory -"

LOG_ICONS = {
    "info": "✅",
    "error": "❌",
}
DEFAULT_ICON = "📣"


def to_log(message: object = "OPS! An error has occurred", kind: str = "default") -> None:
    icon = LOG_ICONS.get(kind, DEFAULT_ICON)
    print(f"{icon} {LOG_LABEL} {message}", file=sys.stderr)
