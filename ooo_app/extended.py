from __future__ import annotations
from typing import Any, Optional

from .models import Scalar

def get_actual_value_from_extended_value(extended_value: Any) -> Optional[Scalar]:
    """
    Unwrap a Sheets API ExtendedValue into its scalar.

    stringValue / numberValue / boolValue / formulaValue return as-is;
    errorValue returns its message (or error type). Anything else is None.
    """
    if not isinstance(extended_value, dict):
        return None
    if "stringValue" in extended_value:
        v = extended_value["stringValue"]
        return v if isinstance(v, str) else None
    if "numberValue" in extended_value:
        v = extended_value["numberValue"]
        return v if isinstance(v, (int, float)) and not isinstance(v, bool) else None
    if "boolValue" in extended_value:
        v = extended_value["boolValue"]
        return v if isinstance(v, bool) else None
    if "formulaValue" in extended_value:
        v = extended_value["formulaValue"]
        return v if isinstance(v, str) else None
    if "errorValue" in extended_value:
        err = extended_value["errorValue"]
        if not isinstance(err, dict):
            return None
        return err.get("message") or err.get("type") or None
    return None
