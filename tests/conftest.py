from __future__ import annotations

import os

# Qt widgets in tests render without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
