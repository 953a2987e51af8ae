"""
Delimited-text parser for spreadsheet CSV exports.

Tolerates what a hand-edited sheet produces: quoted comments with embedded
commas, doubled quotes and line breaks, ragged rows, and an unterminated
trailing quote.
"""
from __future__ import annotations

DELIMITER = ","
QUOTE = '"'


def parse_rows(text: str) -> list[list[str]]:
    """Split raw CSV text into rows of stripped field strings (header included).

    Single pass over the characters with two states, quoted and unquoted.
    Line terminators (``\\n``, ``\\r`` or ``\\r\\n``) only end a row outside
    quotes. An unterminated quote at end of input is closed implicitly.
    """
    rows: list[list[str]] = []
    row: list[str] = []
    buf: list[str] = []
    in_quotes = False
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if ch == QUOTE:
            if in_quotes and nxt == QUOTE:
                buf.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif in_quotes:
            buf.append(ch)
        elif ch == DELIMITER:
            row.append("".join(buf).strip())
            buf = []
        elif ch == "\r" or ch == "\n":
            row.append("".join(buf).strip())
            rows.append(row)
            row = []
            buf = []
            if ch == "\r" and nxt == "\n":
                i += 1
        else:
            buf.append(ch)
        i += 1

    if buf or row:
        row.append("".join(buf).strip())
        rows.append(row)

    return rows


def parse_table(text: str) -> tuple[list[str], list[list[str]]]:
    """Return (header, body rows). Empty text gives an empty header and no rows."""
    rows = parse_rows(text)
    if not rows:
        return [], []
    return rows[0], rows[1:]
