# shared/utils/form_parser.py
# URL-encoded form decoding with bracket nesting, as browsers post forms:
#
#   name=A&address[city]=X                 -> {"name": "A", "address": {"city": "X"}}
#   items[0][name]=Tomato&items[0][quantity]=2
#                                          -> {"items": [{"name": "Tomato", "quantity": "2"}]}
#   tags[]=a&tags[]=b                      -> {"tags": ["a", "b"]}
#
# All leaf values stay strings; the schemas coerce them.

import re
from urllib.parse import parse_qsl

_KEY_RE = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])*)$")
_SEGMENT_RE = re.compile(r"\[([^\[\]]*)\]")

# Indices above this are kept as dict keys instead of building a huge list
MAX_LIST_INDEX = 20

# Brackets past this depth stay in one literal segment: a[b][c][d][e][f][g][h]
# -> ['a', 'b', 'c', 'd', 'e', 'f', '[g][h]']
MAX_DEPTH = 5


def split_key(key: str) -> list:
    """'items[0][name]' -> ['items', '0', 'name']. Unbracketed or odd keys stay whole."""
    match = _KEY_RE.match(key)
    if not match:
        return [key]

    brackets = match.group(2)
    segments = [match.group(1)]
    end = 0
    for segment in _SEGMENT_RE.finditer(brackets):
        if len(segments) > MAX_DEPTH:
            segments.append(brackets[end:])
            break
        segments.append(segment.group(1))
        end = segment.end()
    return segments


def _assign(target: dict, path: list, value: str) -> None:
    node = target
    for i, segment in enumerate(path):
        if segment == "":
            segment = str(len(node))
        last = i == len(path) - 1

        if last:
            if segment in node and not isinstance(node[segment], dict):
                existing = node[segment]
                node[segment] = existing + [value] if isinstance(existing, list) else [existing, value]
            else:
                node[segment] = value
            return

        child = node.get(segment)
        if not isinstance(child, dict):
            child = {}
            node[segment] = child
        node = child


def _listify(node):
    if not isinstance(node, dict):
        return node

    converted = {k: _listify(v) for k, v in node.items()}
    if converted and all(k.isdigit() and int(k) <= MAX_LIST_INDEX for k in converted):
        return [converted[k] for k in sorted(converted, key=int)]
    return converted


def parse_form(body: str) -> dict:
    """Decodes an application/x-www-form-urlencoded body into nested dicts/lists."""
    result: dict = {}
    for key, value in parse_qsl(body, keep_blank_values=True):
        _assign(result, split_key(key), value)

    # Top level is always an object
    return {k: _listify(v) for k, v in result.items()}
