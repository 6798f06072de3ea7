# src/network/aggregation.py — v1
"""Combine preprocessed sessions into the network shapes the encoder reads.

Without unification each session becomes its own flattened Network (one
document per session). With unification all sessions share one
UnifiedNetwork, indexed by session id in input order.
"""

from __future__ import annotations

import logging

from ncexport.core.errors import ExportError
from ncexport.core.models import Network, Session, UnifiedNetwork

logger = logging.getLogger(__name__)


def session_to_network(session: Session) -> Network:
    """Flatten a single session."""
    return Network(
        nodes=list(session.nodes),
        edges=list(session.edges),
        ego=session.ego,
        session_variables=session.session_variables,
    )


def unify_sessions(sessions: list[Session]) -> UnifiedNetwork:
    """Index sessions by their session id.

    Raises:
        ExportError: If two sessions share a session id.
    """
    network = UnifiedNetwork()
    for session in sessions:
        session_id = session.session_variables.session_uuid
        if session_id in network.session_variables:
            raise ExportError(f"Duplicate session id in unified export: {session_id!r}")
        network.session_variables[session_id] = session.session_variables
        network.ego[session_id] = session.ego
        network.nodes[session_id] = list(session.nodes)
        network.edges[session_id] = list(session.edges)

    logger.debug("Unified %d sessions", len(network.session_variables))
    return network


def build_networks(
    sessions: list[Session], unify: bool
) -> list[Network] | UnifiedNetwork:
    """Shape sessions for export according to the unification policy."""
    if unify:
        return unify_sessions(sessions)
    return [session_to_network(session) for session in sessions]
