"""
Authorization header redaction.

A credential is only hidden when it can be traced back to an environment
variable: the header is then rewritten to reference that variable, in double
quotes so the shell expands it when the command is replayed. Credentials
that match no variable are left in clear text, and headers other than
``Authorization`` are never touched.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping

from curl_logger.formatter import parse_header_fragment

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"
BEARER_PREFIX = "Bearer "

# Only names the shell can expand as $NAME are usable references.
_SHELL_VARIABLE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def find_env_key(secret: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Return the first environment variable whose value equals *secret*."""
    if not secret:
        return None
    env = os.environ if environ is None else environ
    for key, value in env.items():
        if value == secret and _SHELL_VARIABLE.match(key):
            return key
    return None


def redact_authorization(fragment: str, environ: Mapping[str, str] | None = None) -> str:
    """Replace a known Authorization secret with an environment variable reference.

    ``-H 'Authorization: Bearer sk-abc'`` with ``OPENAI_KEY=sk-abc`` becomes
    ``-H "Authorization: Bearer $OPENAI_KEY"``. Any other fragment, or an
    Authorization value that matches no variable, is returned unchanged.
    """
    parsed = parse_header_fragment(fragment)
    if parsed is None or parsed[0].lower() != AUTHORIZATION_HEADER.lower():
        return fragment

    value = parsed[1]
    is_bearer = value.startswith(BEARER_PREFIX)
    candidate = value[len(BEARER_PREFIX) :] if is_bearer else value

    key = find_env_key(candidate, environ)
    if key is None:
        logger.debug("No environment variable matches the Authorization value")
        return fragment

    logger.debug("Redacted Authorization header as $%s", key)
    scheme = BEARER_PREFIX if is_bearer else ""
    return f'-H "{AUTHORIZATION_HEADER}: {scheme}${key}"'
