"""Diagnostic sinks and document event handling for editor integrations."""

from cscriptpy.workspace.collection import DiagnosticCollection, DiagnosticSink
from cscriptpy.workspace.provider import DocumentDiagnosticsProvider

__all__ = [
    "DiagnosticCollection",
    "DiagnosticSink",
    "DocumentDiagnosticsProvider",
]
