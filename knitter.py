import os
import time

from core.console import log, debug_log
from core.diff import diff_lines, format_diff
from core.errors import display_path
from core.resolver import bundle
from core.watcher import FileWatcher
from core.writer import read_previous, write_bundle


def build(config):
    """
    Run one bundle: resolve the graph, write the output, report the diff.

    Nothing is written if resolution fails.
    """
    start_time = time.perf_counter()
    output = os.path.abspath(config.output)

    # Must be captured before the new bundle overwrites it
    previous = read_previous(output) if config.diff else None

    result = bundle(config.entry, extension=config.extension)
    debug_log(f"Resolved {len(result.modules)} module(s) from {display_path(result.entry)}")

    write_bundle(output, result.text)
    duration = (time.perf_counter() - start_time) * 1000
    log(f"Bundling completed in {duration:.2f} ms")
    log(f"Bundle written: {display_path(output)}")

    if config.diff:
        report_diff(previous, result.text)

    return result


def report_diff(previous, text):
    changes = diff_lines(previous, text)
    if not changes:
        log("No differences.")
        return changes
    log(f"{len(changes)} line(s) changed:")
    for line in format_diff(changes):
        log(line)
    return changes


def watch(config, observer=None):
    """Bundle, then rebuild on every change until interrupted or a rebuild fails."""
    watcher = FileWatcher(config, build, observer=observer)
    watcher.start()
    log(f"Watching {len(watcher.subscriptions)} file(s) for changes...")
    try:
        watcher.run_forever()
    except KeyboardInterrupt:
        watcher.stop()
        log("Stopped watching.")
    return watcher
