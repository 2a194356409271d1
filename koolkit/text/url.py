"""
URL Module
Query string encoding and decoding helpers.
"""

from typing import Dict, List
from urllib.parse import parse_qsl, quote_plus


def encode_url(url: str) -> str:
    """
    Encode a string for use in a URL.

    Every character except letters, digits and '-', '_', '.' is
    percent-encoded as UTF-8, and spaces become '+'. Unlike plain
    component encoding, '!', '~', '*', "'", '(' and ')' are encoded too.

    Args:
        url: String to encode

    Returns:
        str: Encoded string

    Example:
        >>> encode_url("hello world (v2)!")
        'hello+world+%28v2%29%21'
    """
    return quote_plus(url, safe='').replace('~', '%7E')


def get_url_params(query: str) -> Dict[str, str | List[str]]:
    """
    Convert URL query parameters to a dict.

    A key seen once maps to its value; a repeated key maps to the list of
    its values in order of appearance.

    Args:
        query: Query string, with or without the leading '?'

    Returns:
        dict: Parameter name -> value or list of values

    Example:
        >>> get_url_params("?p=bar&q=hello&q=world")
        {'p': 'bar', 'q': ['hello', 'world']}
    """
    params = {}
    for key, value in parse_qsl(query.removeprefix('?'), keep_blank_values=True):
        if key not in params:
            params[key] = value
        elif isinstance(params[key], list):
            params[key].append(value)
        else:
            params[key] = [params[key], value]

    return params
