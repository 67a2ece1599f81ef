"""
File watching for Knit.

Keeps one subscription per module of the current bundle and rebuilds the
whole bundle when any of them changes. watchdog observes directories, so
each directory holding a subscribed file gets one watch and events are
filtered down to subscribed files.
"""
import os
import threading

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from .console import log, debug_log, format_timestamp
from .errors import display_path


class Subscription:
    """A cancellable change subscription for a single file."""

    def __init__(self, path):
        self.path = path
        self.directory = os.path.dirname(path)
        self.active = True

    def cancel(self):
        self.active = False

    def __repr__(self):
        state = "active" if self.active else "cancelled"
        return f"Subscription({self.path!r}, {state})"


class ChangeHandler(FileSystemEventHandler):
    """Forwards watchdog file events to the watcher."""

    def __init__(self, watcher):
        super().__init__()
        self.watcher = watcher

    def on_modified(self, event):
        if not event.is_directory:
            self.watcher.notify(event.src_path)

    def on_created(self, event):
        if not event.is_directory:
            self.watcher.notify(event.src_path)

    def on_moved(self, event):
        # Editors that save through a temp file end with a move onto the target
        if not event.is_directory:
            self.watcher.notify(event.dest_path)


class FileWatcher:
    """
    Rebuilds a bundle whenever one of its modules changes.

    Rebuilds are serialized: a change arriving while a rebuild is running is
    queued, and any number of queued changes collapse into one more rebuild.
    A failed rebuild ends the session; run_forever() re-raises the error.
    """

    def __init__(self, config, build, observer=None):
        """
        Args:
            config: BundleConfig with the fixed entry/output pair
            build: Callable taking the config and returning a Bundle
            observer: watchdog observer (a new Observer if omitted)
        """
        self.config = config
        self.build = build
        self.observer = observer or Observer()
        self.handler = ChangeHandler(self)
        self.subscriptions = {}  # path -> Subscription
        self._directory_watches = {}  # directory -> watchdog ObservedWatch
        self._lock = threading.Lock()
        self._rebuilding = False
        self._pending = False
        self._stopped = threading.Event()
        self._started = False
        self.rebuild_count = 0
        self.error = None

    @property
    def watched_paths(self):
        return {path for path, sub in self.subscriptions.items() if sub.active}

    def start(self):
        """
        Run the initial bundle and subscribe to every module in it.

        If the initial bundle fails the error propagates and nothing is
        subscribed.
        """
        result = self.build(self.config)
        self.sync(result.modules)
        self.observer.start()
        self._started = True
        return result

    def sync(self, paths):
        """
        Make the subscriptions match `paths`.

        New paths are subscribed, subscriptions for paths no longer present
        are cancelled.
        """
        desired = set(paths)
        for path in sorted(set(self.subscriptions) - desired):
            self._unsubscribe(path)
        for path in paths:
            if path not in self.subscriptions:
                self._subscribe(path)

    def _subscribe(self, path):
        subscription = Subscription(path)
        if subscription.directory not in self._directory_watches:
            self._directory_watches[subscription.directory] = self.observer.schedule(
                self.handler, subscription.directory, recursive=False
            )
        self.subscriptions[path] = subscription
        debug_log(f"Watching {display_path(path)}")

    def _unsubscribe(self, path):
        subscription = self.subscriptions.pop(path)
        subscription.cancel()
        directory = subscription.directory
        if not any(s.directory == directory for s in self.subscriptions.values()):
            self.observer.unschedule(self._directory_watches.pop(directory))
        debug_log(f"Stopped watching {display_path(path)}")

    def notify(self, path):
        """
        Handle a change notification for `path`.

        Returns:
            True if the path is subscribed and a rebuild was triggered
        """
        path = os.path.abspath(path)
        subscription = self.subscriptions.get(path)
        if subscription is None or not subscription.active or self._stopped.is_set():
            return False
        log(f"[{format_timestamp()}] Change detected in: {display_path(path)}")
        self.rebuild()
        return True

    def rebuild(self):
        """Rebuild the bundle, or queue a rebuild if one is already running."""
        with self._lock:
            if self._rebuilding:
                self._pending = True
                debug_log("Rebuild already running, queued another")
                return
            self._rebuilding = True

        try:
            while True:
                result = self.build(self.config)
                self.rebuild_count += 1
                if self.config.refresh_watches:
                    self.sync(result.modules)
                with self._lock:
                    if not self._pending:
                        self._rebuilding = False
                        return
                    self._pending = False
        except Exception as e:
            with self._lock:
                self._rebuilding = False
                self._pending = False
            # Raised again from run_forever() in the main thread
            self.error = e
            self._stopped.set()

    def run_forever(self, poll_interval=0.5):
        """Block until stop() is called or a rebuild fails."""
        try:
            while not self._stopped.wait(poll_interval):
                pass
        finally:
            self.stop()
        if self.error is not None:
            raise self.error

    def stop(self):
        self._stopped.set()
        if self._started:
            self._started = False
            self.observer.stop()
            self.observer.join()
