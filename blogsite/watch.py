from __future__ import annotations

import sys
import threading
import time
from pathlib import Path
from typing import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer


class RebuildScheduler:
    """Runs rebuilds one at a time on a worker thread.

    Requests that arrive while a rebuild is running collapse into a single
    follow-up rebuild.
    """

    def __init__(self, rebuild: Callable[[], object]) -> None:
        self.rebuild = rebuild
        self._wakeup = threading.Event()
        self._stopping = False
        self._thread: threading.Thread | None = None

    def request(self) -> None:
        self._wakeup.set()

    def start(self) -> None:
        self._thread = threading.Thread(target=self._loop, name="rebuild", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stopping = True
        self._wakeup.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def _loop(self) -> None:
        while True:
            self._wakeup.wait()
            if self._stopping:
                return
            self._wakeup.clear()
            self._run()

    def _run(self) -> None:
        try:
            self.rebuild()
        except Exception as exc:
            print(f"Rebuild failed: {exc}", file=sys.stderr)


def is_markdown_event(event: FileSystemEvent) -> bool:
    if event.is_directory:
        return False
    paths = [event.src_path, getattr(event, "dest_path", "")]
    return any(str(path).endswith(".md") for path in paths if path)


class ArticleChangeHandler(FileSystemEventHandler):
    def __init__(self, scheduler: RebuildScheduler) -> None:
        self.scheduler = scheduler

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.event_type in ("opened", "closed", "closed_no_write"):
            return
        if not is_markdown_event(event):
            return
        print(f"\nChange detected: {Path(str(event.src_path)).name}")
        self.scheduler.request()


def watch_directory(articles_dir: Path, rebuild: Callable[[], object]) -> None:
    scheduler = RebuildScheduler(rebuild)
    observer = Observer()
    observer.schedule(ArticleChangeHandler(scheduler), str(articles_dir), recursive=True)
    scheduler.start()
    observer.start()
    print(f"Watching: {articles_dir}/ (Ctrl+C to stop)")
    try:
        while observer.is_alive():
            time.sleep(1)
    except KeyboardInterrupt:
        print("\nStopping...")
    finally:
        observer.stop()
        observer.join()
        scheduler.stop()
