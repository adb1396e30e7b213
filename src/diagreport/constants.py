# topmark:header:start
#
#   project      : DiagReport
#   file         : constants.py
#   file_relpath : src/diagreport/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagReport Constants."""

from __future__ import annotations

import sys
from importlib.metadata import version as get_version

DIAGREPORT_VERSION: str = get_version("diagreport")

# Label used for files without a recorded path:
DEFAULT_NAME: str = "<stdin>"

# `log-symbols` style glyphs; Windows consoles get the ASCII-safe variants.
if sys.platform == "win32":  # pragma: no cover - platform specific
    ERROR_GLYPH: str = "×"
    WARNING_GLYPH: str = "‼"
else:
    ERROR_GLYPH = "✖"
    WARNING_GLYPH = "⚠"

USAGE_ERROR_MESSAGE: str = "Expected a file or files to report"

# Rendered for a cause that carries neither a message nor a stack:
UNKNOWN_CAUSE_MARKER: str = "[object]"

# Rendered when a cause chain refers back to a message already shown:
CIRCULAR_CAUSE_MARKER: str = "[circular]"
