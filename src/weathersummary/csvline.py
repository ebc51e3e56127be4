# field-level helpers: one csv line into fields, and tolerant value coercion
# kept free of logging and state so every helper is trivially reusable

from __future__ import annotations
import math
import re
from typing import List, Optional

# locale independent decimal, "." as the decimal point, optional exponent
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")

def parse_line(line: str) -> List[str]:
    # quote aware split on commas; "" inside quotes is a literal quote
    # unbalanced quotes never raise, the rest of the line ends up in the open field
    values: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    n = len(line)
    while i < n:
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < n and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            values.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1
    values.append("".join(current).strip())
    return values

def strip_quotes(value: str) -> str:
    # drop one leading and one trailing literal quote, nothing more
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value

def parse_number(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    text = value.strip()
    if not _NUMBER_RE.match(text):
        return None
    number = float(text)
    return number if math.isfinite(number) else None
