"""
CSV/JSON Conversion Module
Converts between delimited text and lists of records.
"""

import regex as re
from typing import Any, Dict, List, Optional

_line_break = re.compile(r'\r?\n')


def csv_to_json(data: str, delimiter: str = ',') -> List[Dict[str, Optional[str]]]:
    """
    Convert a delimited string to a list of records.

    The first line holds the column titles. Each following non-blank line
    becomes one dict; a row with fewer fields than titles gets None for the
    missing ones.

    Args:
        data: CSV text
        delimiter: Field delimiter (default: ',')

    Returns:
        list[dict]: One dict per data row

    Example:
        >>> csv_to_json("col1,col2\\na,b\\nc,d")
        [{'col1': 'a', 'col2': 'b'}, {'col1': 'c', 'col2': 'd'}]
    """
    lines = _line_break.split(data)
    if len(lines) < 2:
        return []

    titles = lines[0].split(delimiter)
    records = []
    for line in lines[1:]:
        if not line.strip():
            continue
        values = line.split(delimiter)
        records.append({
            title: values[index] if index < len(values) else None
            for index, title in enumerate(titles)
        })

    return records


def json_to_csv(rows: List[Dict[str, Any]], columns: List[str], delimiter: str = ',') -> str:
    """
    Convert a list of records to a CSV string with only the given columns.

    Every value is wrapped in double quotes (inner quotes are doubled);
    missing or None values are written as "".

    Args:
        rows: Records to convert
        columns: Columns to include, in order
        delimiter: Field delimiter (default: ',')

    Returns:
        str: Header line followed by one line per record
    """
    def quote(value: Any) -> str:
        text = '' if value is None else str(value)
        return '"' + text.replace('"', '""') + '"'

    lines = [delimiter.join(columns)]
    for row in rows:
        lines.append(delimiter.join(quote(row.get(column)) for column in columns))

    return '\n'.join(lines)
