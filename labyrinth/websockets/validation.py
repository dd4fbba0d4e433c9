"""Lightweight websocket payload validation utilities.

Provides minimal schema-like checking with consistent error payloads. This is
a shape check only: dimension text is *not* required to be numeric here,
because unparseable dimensions fall back to previous values downstream.

Schema Mini-Language (Python dict):
{
  'field_name': ('type', required: bool, extras: dict)
}
Supported types: 'str', 'int', 'text' (str or int, as typed into a UI field)
Extras: max_len, min_len, allow_empty (str / text)

Example:
 ok, data_or_err = validate({'width': '12'}, REGENERATE_MAZE)

If invalid: (False, {'field': 'width', 'error': 'too long', 'code': 'max_len'})
If valid: (True, normalized_data)
"""
from __future__ import annotations
from typing import Any, Dict, Tuple

PRIMITIVES = {
    'str': (str,),
    'int': (int,),
    'text': (str, int),
}


def _fail(field: str, message: str, code: str) -> Tuple[bool, Dict[str, Any]]:
    return False, {'field': field, 'error': message, 'code': code}


def validate(payload: Any, schema: Dict[str, tuple]) -> Tuple[bool, Dict[str, Any]]:
    if not isinstance(payload, dict):
        return _fail('__root__', 'payload must be an object', 'type')
    out = {}
    for name, spec in schema.items():
        if not isinstance(spec, tuple) or len(spec) < 2:
            return _fail('__schema__', f'invalid spec for {name}', 'schema')
        type_name, required = spec[0], spec[1]
        extras = spec[2] if len(spec) > 2 else {}
        if type_name not in PRIMITIVES:
            return _fail('__schema__', f'unsupported type {type_name}', 'schema')
        if name not in payload or payload[name] is None:
            if required:
                return _fail(name, 'missing required field', 'required')
            continue
        value = payload[name]
        # bool is an int subclass; never a valid dimension/seed
        if isinstance(value, bool) or not isinstance(value, PRIMITIVES[type_name]):
            return _fail(name, f'expected {type_name}', 'type')
        if isinstance(value, str):
            if not extras.get('allow_empty') and len(value.strip()) == 0:
                return _fail(name, 'must not be empty', 'empty')
            if 'max_len' in extras and len(value) > extras['max_len']:
                return _fail(name, 'too long', 'max_len')
            if 'min_len' in extras and len(value) < extras['min_len']:
                return _fail(name, 'too short', 'min_len')
        out[name] = value
    return True, out


# Predefined schemas used by handlers
REQUEST_MAZE = {
    'rows': ('text', False, {'max_len': 16, 'allow_empty': True}),
    'columns': ('text', False, {'max_len': 16, 'allow_empty': True}),
    'seed': ('text', False, {'max_len': 64, 'allow_empty': True}),
    'sampling': ('str', False, {'min_len': 1, 'max_len': 16}),
}
REGENERATE_MAZE = {
    'width': ('text', False, {'max_len': 16, 'allow_empty': True}),
    'height': ('text', False, {'max_len': 16, 'allow_empty': True}),
    'seed': ('text', False, {'max_len': 64, 'allow_empty': True}),
    'sampling': ('str', False, {'min_len': 1, 'max_len': 16}),
}
