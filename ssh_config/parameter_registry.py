"""
Parameter Registry for ssh host rules.

One entry per HostParams field, keyed by field name. Each entry names the
ssh_config(5) keyword the value comes from and the value type preflight
checks against.

Types:
    str       - scalar text
    list      - ordered list of text tokens, order is significant
    bool      - yes/no flag
    int       - bounded unsigned integer, see lower/upper
    path      - filesystem path
    duration  - non-negative elapsed time
"""

from typing import Optional

PARAMETER_REGISTRY = {
    # =========================================================================
    # LOCAL ENDPOINT
    # =========================================================================

    "bind_address": {
        "type": "str",
        "keyword": "BindAddress",
        "description": "Local source address of the connection",
    },
    "bind_interface": {
        "type": "str",
        "keyword": "BindInterface",
        "description": "Local interface used as source of the connection",
    },

    # =========================================================================
    # ALGORITHMS (order of preference)
    # =========================================================================

    "ca_signature_algorithms": {
        "type": "list",
        "keyword": "CASignatureAlgorithms",
        "description": "Algorithms allowed for CA certificate signing",
    },
    "ciphers": {
        "type": "list",
        "keyword": "Ciphers",
        "description": "Allowed ciphers",
    },
    "mac": {
        "type": "list",
        "keyword": "MACs",
        "description": "Allowed MAC algorithms",
    },
    "pubkey_accepted_algorithms": {
        "type": "list",
        "keyword": "PubkeyAcceptedAlgorithms",
        "description": "Signature algorithms for public key authentication",
    },

    # =========================================================================
    # AUTHENTICATION
    # =========================================================================

    "certificate_file": {
        "type": "path",
        "keyword": "CertificateFile",
        "description": "User certificate file",
    },
    "pubkey_authentication": {
        "type": "bool",
        "keyword": "PubkeyAuthentication",
        "description": "Try public key authentication",
    },

    # =========================================================================
    # CONNECTION
    # =========================================================================

    "host_name": {
        "type": "str",
        "keyword": "HostName",
        "description": "Real host name to log into",
    },
    "compression": {
        "type": "bool",
        "keyword": "Compression",
        "description": "Use compression",
    },
    "connection_attempts": {
        "type": "int",
        "keyword": "ConnectionAttempts",
        "description": "Attempts to make before exiting",
        "lower": 0,
        "upper": None,
    },
    "connect_timeout": {
        "type": "duration",
        "keyword": "ConnectTimeout",
        "description": "Timeout used when connecting to the server",
    },
    "remote_forward": {
        "type": "int",
        "keyword": "RemoteForward",
        "description": "Remote TCP port forwarded over the secure channel",
        "lower": 0,
        "upper": 65535,
    },
    "tcp_keep_alive": {
        "type": "bool",
        "keyword": "TCPKeepAlive",
        "description": "Send TCP keepalives to the other side",
    },
}


def keyword_to_field(keyword: str) -> Optional[str]:
    """Map an ssh_config keyword (case-insensitive) to its HostParams field"""
    wanted = keyword.lower()
    for field_name, entry in PARAMETER_REGISTRY.items():
        if entry["keyword"].lower() == wanted:
            return field_name
    return None
