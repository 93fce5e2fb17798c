"""Cookie parsing, validation and serialization."""

from crumb.http.cookies import Cookie
from crumb.http.parsing import parse_cookies, parse_header
from crumb.http.serialization import percent_encode_name, to_header_value, to_options_tuple

__all__ = [
    "Cookie",
    "parse_cookies",
    "parse_header",
    "percent_encode_name",
    "to_header_value",
    "to_options_tuple",
]
