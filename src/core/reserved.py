# src/core/reserved.py — v1
"""Reserved identifiers written into every GraphML document.

These are fixed NMTOKEN-safe key ids, never hashed.
"""

from __future__ import annotations

GRAPHML_NAMESPACE = "http://graphml.graphdrawing.org/xmlns"
GRAPHML_SCHEMA_LOCATION = "http://graphml.graphdrawing.org/xmlns/1.0/graphml.xsd"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
NC_NAMESPACE = "http://schema.networkcanvas.com/xmlns"

# --- <key> ids ---
LABEL_KEY = "label"
NC_TYPE_KEY = "networkCanvasType"
NC_UUID_KEY = "networkCanvasUUID"
NC_SOURCE_UUID_KEY = "networkCanvasSourceUUID"
NC_TARGET_UUID_KEY = "networkCanvasTargetUUID"

# Label written on nodes that have no "name" variable value
DEFAULT_NODE_LABEL = "Node"

# --- nc: attributes on <graph> ---
NC_CASE_ID = "nc:caseId"
NC_SESSION_UUID = "nc:sessionUUID"
NC_PROTOCOL_NAME = "nc:protocolName"
NC_REMOTE_PROTOCOL_ID = "nc:remoteProtocolID"
NC_SESSION_EXPORT_TIME = "nc:sessionExportTime"
NC_SESSION_START_TIME = "nc:sessionStartTime"
NC_SESSION_FINISH_TIME = "nc:sessionFinishTime"
