import json
import math
import sys

from .errors import DecodeError, SerializeError

FLOAT_MAX = sys.float_info.max


def _reject_constant(name):
    raise ValueError(f"invalid JSON constant: {name}")


def _parse_float(text):
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text} out of float range")
    return value


def _parse_int(text):
    value = int(text)
    # Números no JSON precisam caber em float64
    if abs(value) > FLOAT_MAX:
        raise ValueError(f"number {text[:32]}... out of float range")
    return value


def load_json_body(raw):
    """Decodifica o corpo do request; NaN/Infinity e números fora do range de float64 são rejeitados."""
    if not raw or not raw.strip():
        raise DecodeError("empty request body")
    try:
        return json.loads(raw, parse_constant=_reject_constant, parse_float=_parse_float, parse_int=_parse_int)
    except ValueError as e:
        raise DecodeError(str(e)) from e


def dump_json_body(document):
    try:
        return json.dumps(document, ensure_ascii=False, separators=(",", ":"), allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializeError(str(e)) from e


def format_float(value):
    # Mesmo formato do %f: seis casas decimais, sem notação científica
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return "" if value is None else str(value)
    return f"{float(value):f}"


def format_text(value):
    if value is None:
        return ""
    return str(value)
