"""
Response serialization.

Turns whatever the SOAP layer returned (zeep objects, faults, dates,
decimals, raw XML elements) into JSON text and plain Python structures.
Non-finite floats become null so the output is always strict JSON.
"""

from __future__ import annotations

import dataclasses
import json
import math
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from itertools import islice
from typing import Any

from lxml import etree
from zeep.helpers import serialize_object

from sedo_client.application.ports import SoapFault


def _finite(value: Any) -> Any:
    """Replace NaN and infinities with None, recursing into containers."""
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Mapping):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def _json_default(value: Any) -> Any:
    """Fallback encoder for values json does not know about."""
    if isinstance(value, SoapFault):
        return value.as_dict()
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return _finite(float(value))
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, (set, frozenset)):
        return _finite(list(value))
    if isinstance(value, etree._Element):
        # zeep hands back xsd:any content as raw elements
        return etree.tostring(value, encoding="unicode")

    serialized = serialize_object(value, target_cls=dict)
    if serialized is not value:
        return _finite(serialized)

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _finite(dataclasses.asdict(value))
    if hasattr(value, "__dict__"):
        return _finite({key: item for key, item in vars(value).items() if not key.startswith("_")})

    return str(value)


def to_json(value: Any) -> str:
    """Serialize a response to compact JSON text."""
    return json.dumps(_finite(value), default=_json_default, separators=(",", ":"), allow_nan=False)


def to_native(value: Any) -> Any:
    """Normalize a response into plain dicts, lists and scalars."""
    return json.loads(to_json(value))


def element_count(value: Any) -> int:
    """
    Count the top-level elements of a normalized response.

    Mappings and lists count their entries, None counts as zero and any other
    scalar counts as a single element.
    """
    if value is None:
        return 0
    if isinstance(value, (list, Mapping)):
        return len(value)
    return 1


def head(value: Any, limit: int) -> Any:
    """Keep the first `limit` entries of a list or mapping."""
    if isinstance(value, list):
        return value[:limit]
    if isinstance(value, Mapping):
        return dict(islice(value.items(), limit))
    return value
