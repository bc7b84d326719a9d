#
# Copyright (c) 2019 Matthias Tafelmeier.
#
# This file is part of godon
#
# godon is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# godon is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this godon. If not, see <http://www.gnu.org/licenses/>.
#

"""
Host parameters for a single ssh_config host rule.

Keywords follow ssh_config(5): http://man.openbsd.org/OpenBSD-current/man5/ssh_config.5
Only the subset supported by libssh2 is modelled.

Every field is optional and None means "not specified by this layer".
None is never a settable value, so an explicit False, 0 or [] stays
distinguishable from unset.
"""

import copy
from dataclasses import dataclass, fields
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class HostParams:
    """Connection parameters resolved for a host rule"""

    # Use the specified address on the local machine as source address
    bind_address: Optional[str] = None
    # Use the address of the specified local interface as source address
    bind_interface: Optional[str] = None
    # Algorithms allowed for signing of certificates by certificate authorities
    ca_signature_algorithms: Optional[List[str]] = None
    # File from which the user's certificate is read
    certificate_file: Optional[Path] = None
    # Ciphers allowed, in order of preference
    ciphers: Optional[List[str]] = None
    compression: Optional[bool] = None
    # Number of attempts to make before exiting
    connection_attempts: Optional[int] = None
    connect_timeout: Optional[timedelta] = None
    # Real host name to log into
    host_name: Optional[str] = None
    # MAC algorithms, in order of preference
    mac: Optional[List[str]] = None
    # Signature algorithms used for public key authentication
    pubkey_accepted_algorithms: Optional[List[str]] = None
    pubkey_authentication: Optional[bool] = None
    # TCP port on the remote machine forwarded over the secure channel
    remote_forward: Optional[int] = None
    tcp_keep_alive: Optional[bool] = None

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def merge(self, other: 'HostParams') -> None:
        """
        Override current params with the params set in other

        Fields set in other replace ours (lists wholesale, never joined),
        fields unset in other are left as they are. other is not modified.
        """
        for name in self.field_names():
            value = getattr(other, name)
            if value is not None:
                setattr(self, name, copy.copy(value))

    def is_set(self, name: str) -> bool:
        if name not in self.field_names():
            raise KeyError(f"Unknown host parameter: {name}")
        return getattr(self, name) is not None

    def set_fields(self) -> Dict[str, Any]:
        """Return the explicitly set fields in declaration order"""
        return {
            name: getattr(self, name)
            for name in self.field_names()
            if getattr(self, name) is not None
        }
