"""
Source file watcher: debounced auto-reload when the export is replaced
"""
import sys
import threading
import traceback
from pathlib import Path
from typing import Callable, Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from parts_api.data.reloader import Reloader
from parts_api.errors import LoadError


class DebounceTimer:
    """Collapses a burst of triggers into one callback after `delay` seconds"""

    def __init__(self, delay: float, callback: Callable):
        self.delay = delay
        self.callback = callback
        self.timer: Optional[threading.Timer] = None
        self.lock = threading.Lock()

    def trigger(self):
        """Start or restart the countdown"""
        with self.lock:
            if self.timer:
                self.timer.cancel()
            self.timer = threading.Timer(self.delay, self.callback)
            self.timer.daemon = True
            self.timer.start()

    def cancel(self):
        with self.lock:
            if self.timer:
                self.timer.cancel()
                self.timer = None


class SourceFileEventHandler(FileSystemEventHandler):
    """Reacts only to events on the watched source file"""

    def __init__(self, source: Path, timer: DebounceTimer):
        self.source = Path(source).resolve()
        self.timer = timer
        super().__init__()

    def on_created(self, event: FileSystemEvent):
        self._handle(event, event.src_path)

    def on_modified(self, event: FileSystemEvent):
        self._handle(event, event.src_path)

    def on_moved(self, event: FileSystemEvent):
        # Exports are often written to a temp name and renamed over the source
        self._handle(event, getattr(event, "dest_path", ""))

    def _handle(self, event: FileSystemEvent, path) -> None:
        if event.is_directory or not path:
            return
        if self._is_source(path):
            self.timer.trigger()

    def _is_source(self, path) -> bool:
        if isinstance(path, bytes):
            path = path.decode()
        return Path(path).resolve() == self.source


class SourceWatcher:
    """Watches the source file and feeds changes into the single-flight reloader"""

    def __init__(self, source: Path, reloader: Reloader, debounce_seconds: float):
        self.source = Path(source)
        self.reloader = reloader
        self.timer = DebounceTimer(debounce_seconds, self._on_debounce)
        self.handler = SourceFileEventHandler(self.source, self.timer)
        self.observer: Optional[Observer] = None

    def _on_debounce(self):
        """Called after the debounce period; failures keep the last good snapshot"""
        print(f"File changed: {self.source}. Reloading into memory...")
        try:
            self.reloader.reload()
        except LoadError as e:
            print(f"Auto-reload failed: {e}", file=sys.stderr)
        except Exception:
            print("Auto-reload failed with an unexpected error", file=sys.stderr)
            traceback.print_exc()

    @property
    def is_running(self) -> bool:
        return self.observer is not None

    def start(self):
        watch_dir = self.source.parent
        if not watch_dir.exists():
            print(f"Warning: watch directory {watch_dir} does not exist — auto-reload disabled")
            return

        self.observer = Observer()
        self.observer.schedule(self.handler, str(watch_dir), recursive=False)
        self.observer.start()
        print(f"Watching {self.source} for changes")

    def stop(self):
        if self.observer:
            self.timer.cancel()
            self.observer.stop()
            self.observer.join(timeout=5)
            self.observer = None
            print("File watcher stopped")
