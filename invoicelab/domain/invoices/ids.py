# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re

# Leading whitespace, optional sign, then a run of decimal digits.
# Trailing characters are ignored: "12abc" -> 12, "1e3" -> 1.
_LEADING_INT = re.compile(r"^\s*([+-]?)([0-9]+)")


def parse_invoice_id(raw: str | None) -> int | None:
    """Parse a path segment into an invoice id.

    Returns ``None`` when the value has no leading integer or the digit
    run is too long to convert. ``None`` matches no invoice, so malformed
    ids end up as a plain not-found.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    sign, digits = match.groups()
    try:
        return int(sign + (digits.lstrip("0") or "0"))
    except ValueError:
        return None
