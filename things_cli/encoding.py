"""
Query-string encoding for Things URLs.

Things parses ``+`` in a query as a literal plus sign, not as a space, so the
form-encoded output of :func:`urllib.parse.urlencode` has to be rewritten to
use ``%20``. Literal plus signs in values are already escaped as ``%2B`` and
are left alone by the rewrite.
"""

import urllib.parse


def encode_query(params):
    """Encode *params* as a sorted, percent-encoded query string.

    Returns ``""`` for an empty mapping so the caller can omit the ``?``.
    """
    if not params:
        return ""
    encoded = urllib.parse.urlencode(sorted(params.items()))
    if "+" not in encoded:
        return encoded
    return encoded.replace("+", "%20")


def build_target(command, params, scheme="things"):
    """Join scheme, command and encoded params into a full target URL."""
    target = f"{scheme}:///{command}"
    encoded = encode_query(params)
    if encoded:
        target += "?" + encoded
    return target
