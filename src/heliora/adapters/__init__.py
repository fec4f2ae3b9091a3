# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for UI field binding and report rendering.

External concerns (JSON encoding, text layout, UI value coercion) are
confined to this layer.
"""
from heliora.adapters.field_binding import (
    DEFAULT_CONTROLS,
    ContextFieldBinding,
    InputControl,
    sanitise_number,
)
from heliora.adapters.text_report import (
    JsonPositionReport,
    TextPositionReport,
    TextSeasonReport,
    format_local_hour,
)
