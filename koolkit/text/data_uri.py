"""
Data URI Module
Decodes RFC 2397 data URIs into raw bytes.
"""

import base64
import binascii
import regex as re
from dataclasses import dataclass
from urllib.parse import unquote_to_bytes

from koolkit.core.exceptions import DataURIError

_data_uri_re = re.compile(
    r'^data:'
    r'(?P<mime>[^;,]*)'             # media type, may be empty
    r'(?P<params>(?:;[^;,]*)*)'     # ;charset=..., ;base64 and friends
    r',(?P<payload>.*)$',
    re.DOTALL
)


@dataclass
class Blob:
    """
    Represents a decoded binary payload and its media type.
    """
    data: bytes
    type: str

    @property
    def size(self) -> int:
        return len(self.data)


def data_uri_to_blob(data_uri: str) -> Blob:
    """
    Convert a data URI to a Blob.

    Args:
        data_uri: URI such as 'data:image/png;base64,iVBORw0...'

    Returns:
        Blob: Decoded bytes and the media type (empty if the URI has none)

    Raises:
        DataURIError: If the URI is malformed or its base64 payload is invalid
    """
    match = _data_uri_re.match(data_uri.strip())
    if not match:
        raise DataURIError(f"Not a data URI: {data_uri[:40]!r}")

    payload = match.group('payload')
    params = match.group('params').lower().split(';')
    if 'base64' in params:
        try:
            data = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DataURIError(f"Invalid base64 payload: {e}") from e
    else:
        data = unquote_to_bytes(payload)

    return Blob(data=data, type=match.group('mime'))
