"""Caller-side glue that turns document events into sink updates."""

from __future__ import annotations

from collections.abc import Hashable
import logging

from cscriptpy.lint import ScanOptions, ScanSession
from cscriptpy.pipeline import LintRunResult
from cscriptpy.workspace.collection import DiagnosticSink

logger = logging.getLogger(__name__)


class DocumentDiagnosticsProvider:
    """Scan documents on open/change and clear them on close.

    Every event creates a fresh `ScanSession`; the only state kept here is the
    newest version published per identity, so a late result for an older
    version never overwrites a newer one. Debouncing is left to the caller,
    which can read `options.debounce_seconds`.
    """

    def __init__(self, sink: DiagnosticSink, options: ScanOptions | None = None) -> None:
        self._sink = sink
        self._options = options if options is not None else ScanOptions()
        self._published_versions: dict[Hashable, int] = {}

    @property
    def options(self) -> ScanOptions:
        return self._options

    def configure(self, options: ScanOptions) -> None:
        self._options = options

    def on_open(self, identity: Hashable, text: str, version: int = 0) -> LintRunResult | None:
        return self.update(identity, text, version)

    def on_change(self, identity: Hashable, text: str, version: int) -> LintRunResult | None:
        if not self._options.check_on_type:
            logger.debug("check_on_type disabled; ignoring change to %s", identity)
            return None
        return self.update(identity, text, version)

    def on_close(self, identity: Hashable) -> None:
        self._published_versions.pop(identity, None)
        self._sink.delete(identity)

    def update(self, identity: Hashable, text: str, version: int = 0) -> LintRunResult | None:
        """Scan `text` and publish it, unless a newer version was already published.

        Returns None when nothing was published: the version is stale, or
        diagnostics are disabled.
        """
        latest = self._published_versions.get(identity)
        if latest is not None and version < latest:
            logger.debug("Dropping stale scan of %s: version %d < %d", identity, version, latest)
            return None

        session = ScanSession.create(text, self._options, identity=identity, version=version)
        result = session.run()
        if result.skipped:
            return None
        self._published_versions[identity] = version
        self._sink.set(identity, result.diagnostics)
        return result
