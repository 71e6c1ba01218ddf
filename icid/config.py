"""
Configuration for the IC-ID protocol codecs.
"""

from dataclasses import dataclass
from typing import Optional

# Wire constants fixed by the protocol
RESPONSE_TYPE_TOKEN = "token"
TOKEN_TYPE_BEARER = "bearer"


@dataclass
class ProtocolConfig:
    """Tunables for decoding protocol messages.

    Attributes:
        default_expires_in: Lifetime (seconds) assumed when an access-token
            response omits expires_in. None keeps it absent.
        log_scope_errors: Log the offending segment before re-raising when a
            scope segment is not a valid principal.
    """
    default_expires_in: Optional[int] = None
    log_scope_errors: bool = True
