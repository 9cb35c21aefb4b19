# csv2table/parser.py
from typing import List

Row = List[str]
Table = List[Row]

QUOTE = '"'
DELIMITER = ","
TERMINATORS = ("\n", "\r")

# whitespace removed from field edges: includes the BOM, keeps \x1c-\x1f and \x85
TRIM_CHARS = (
    "\t\n\v\f\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def parse_csv(text: str) -> Table:
    """
    Parse CSV text into a list of rows of trimmed cells.

    Handles quoted fields, escaped quotes (""), delimiters and line breaks
    inside quotes, and \\n / \\r / \\r\\n line endings. The parser is permissive:
    it never raises, a quote anywhere in a field toggles quote mode, and an
    unterminated quote simply runs to the end of the input.
    Rows where every cell is empty are dropped; rows are not padded.
    """
    rows: Table = []
    current_row: Row = []
    current_field = ""
    inside_quotes = False

    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        next_char = text[i + 1] if i + 1 < length else ""

        if char == QUOTE:
            if inside_quotes and next_char == QUOTE:
                current_field += QUOTE
                i += 1
            else:
                inside_quotes = not inside_quotes
        elif char == DELIMITER and not inside_quotes:
            current_row.append(current_field.strip(TRIM_CHARS))
            current_field = ""
        elif char in TERMINATORS and not inside_quotes:
            if char == "\r" and next_char == "\n":
                i += 1
            # consecutive terminators must not produce phantom rows
            if current_field or current_row:
                current_row.append(current_field.strip(TRIM_CHARS))
                rows.append(current_row)
                current_row = []
                current_field = ""
        else:
            current_field += char
        i += 1

    if current_field or current_row:
        current_row.append(current_field.strip(TRIM_CHARS))
        rows.append(current_row)

    return [row for row in rows if any(cell != "" for cell in row)]
