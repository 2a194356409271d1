"""
Text Module
Provides URL, CSV/JSON and data URI conversion helpers.
"""

from .url import encode_url, get_url_params
from .csv_json import csv_to_json, json_to_csv
from .data_uri import Blob, data_uri_to_blob

__all__ = [
    # URL
    'encode_url',
    'get_url_params',
    # CSV/JSON
    'csv_to_json',
    'json_to_csv',
    # Data URI
    'Blob',
    'data_uri_to_blob',
]
