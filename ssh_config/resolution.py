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

import logging
from typing import Any, Dict, List, Optional, Sequence

from ssh_config.params import HostParams

logger = logging.getLogger(__name__)


def resolve(layers: Sequence[HostParams]) -> HostParams:
    """
    Fold host rule layers into one effective parameter set

    Args:
        layers: HostParams ordered from least to most specific
            (global defaults, pattern matched blocks, exact host)

    Returns:
        New HostParams; the layers themselves are left untouched
    """
    resolved = HostParams()
    for index, layer in enumerate(layers):
        logger.debug(f"Merging layer {index}: {list(layer.set_fields().keys())}")
        resolved.merge(layer)
    return resolved


def provenance(layers: Sequence[HostParams]) -> Dict[str, int]:
    """Map each resolved field to the index of the layer whose value won"""
    winners = {}
    for index, layer in enumerate(layers):
        for name in layer.set_fields():
            winners[name] = index
    return winners


def main(layers: List[HostParams], target_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Resolve the effective parameters for one connection target

    Args:
        layers: HostParams ordered from least to most specific
        target_id: Optional target identifier, only used for reporting

    Returns:
        Dictionary with the set parameters and the winning layer per field
    """
    logger.info(f"Resolving {len(layers)} layers for target {target_id}")

    resolved = resolve(layers)
    params = resolved.set_fields()

    summary = {
        'status': 'completed',
        'target_id': target_id,
        'layers_count': len(layers),
        'params': params,
        'provenance': provenance(layers)
    }

    logger.info(f"Resolution completed: {len(params)}/{len(HostParams.field_names())} parameters set")

    return summary
