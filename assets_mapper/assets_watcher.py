"""Polling watcher that regenerates the assets map when assets change."""

import logging
import threading
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from assets_mapper.errors import AssetsMapperError, WatchError
from assets_mapper.generate_assets_map import (
    coerce_options,
    generate_assets_map,
    resolve_source,
)
from assets_mapper.generation_result import GenerationResult
from assets_mapper.generator_options import GeneratorOptions
from assets_mapper.scan_directory import scan_directory

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 1.0  # seconds

WatchCallback = Callable[[Exception | None, GenerationResult | None], None]
Snapshot = dict[str, tuple[int, int]]  # relative path -> (mtime_ns, size)


class AssetsWatcher:
    """Regenerates the assets map whenever a relevant file changes.

    The source tree is polled on a background thread. Each detected change
    triggers one full generation pass. A change seen while a pass is still
    running is skipped without advancing the snapshot, so the next poll
    reports it again.
    """

    def __init__(
        self,
        options: GeneratorOptions | Mapping[str, Any],
        callback: WatchCallback | None = None,
        interval: float = DEFAULT_POLL_INTERVAL,
    ) -> None:
        """Initialize the watcher without starting it."""
        try:
            self.options = coerce_options(options)
        except AssetsMapperError as exc:
            msg = f"Failed to start file watcher: {exc}"
            raise WatchError(msg) from exc
        self.callback = callback
        self.interval = interval
        self._root: Path | None = None
        self._snapshot: Snapshot = {}
        self._stop = threading.Event()
        self._pass_lock = threading.Lock()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        """Whether the polling thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> "AssetsWatcher":
        """Take an initial snapshot and start polling."""
        if self.running:
            return self
        try:
            self._root = resolve_source(self.options.src)
            self._snapshot = self._take_snapshot()
        except (AssetsMapperError, OSError) as exc:
            msg = f"Failed to start file watcher: {exc}"
            raise WatchError(msg) from exc

        self._stop.clear()
        self._thread = threading.Thread(
            target=self._poll, name="assets-mapper-watch", daemon=True
        )
        self._thread.start()
        logger.info("Watching %s for changes...", self._root)
        return self

    def stop(self) -> None:
        """Stop polling. A pass already in progress runs to completion."""
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._thread = None
        logger.info("Stopped watching for changes")

    def check(self) -> list[str]:
        """Poll once and regenerate if anything changed.

        Returns the relative paths that changed since the last pass.
        """
        current = self._take_snapshot()
        changed = sorted(
            path
            for path in set(current) | set(self._snapshot)
            if current.get(path) != self._snapshot.get(path)
        )
        if not changed:
            return changed
        if not self._pass_lock.acquire(blocking=False):
            logger.debug("Generation already in progress, skipping trigger")
            return changed
        try:
            self._snapshot = current
            logger.info(
                "Detected change in %s, regenerating assets map...", changed[0]
            )
            self._run_pass()
        finally:
            self._pass_lock.release()
        return changed

    def _poll(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                self.check()
            except Exception:
                # Keep the session alive; the next poll retries.
                logger.exception("Error while polling for changes")

    def _take_snapshot(self) -> Snapshot:
        snapshot: Snapshot = {}
        for asset in scan_directory(
            self._root or resolve_source(self.options.src),
            self.options.effective_exts(),
            self.options.effective_exclude(),
            self.options.include,
        ):
            try:
                st = asset.full_path.stat()
            except OSError:
                continue
            snapshot[asset.relative_path] = (st.st_mtime_ns, st.st_size)
        return snapshot

    def _run_pass(self) -> None:
        try:
            result = generate_assets_map(self.options)
        except (AssetsMapperError, OSError) as exc:
            logger.error("Error regenerating assets map: %s", exc)
            if self.callback:
                self.callback(exc, None)
            return
        logger.info("Assets map updated! Processed %d files", result.total_files)
        if self.callback:
            self.callback(None, result)


def watch_assets_map(
    options: GeneratorOptions | Mapping[str, Any],
    callback: WatchCallback | None = None,
    interval: float = DEFAULT_POLL_INTERVAL,
) -> AssetsWatcher:
    """Start watching the source directory and return the running watcher."""
    return AssetsWatcher(options, callback, interval).start()
