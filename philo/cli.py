"""Command-line entry point that runs the dining simulation."""

from __future__ import annotations

import sys
import threading
from typing import Optional, Sequence

from .monitor import monitor_simulation
from .parsing import ConfigError, parse_arguments
from .table import DiningTable
from .thinker import thinker_lifecycle


def run_simulation(table: DiningTable) -> None:
    """Start one thread per thinker plus the monitor, and wait for all of them."""
    workers = []
    for thinker in table.thinkers:
        worker = threading.Thread(
            target=thinker_lifecycle,
            args=(table, thinker),
            name=f"thinker-{thinker.position}",
        )
        try:
            worker.start()
        except RuntimeError:
            print(f"Failed to create thread for thinker {thinker.position}")
            table.stop()
            for started in workers:
                started.join()
            return
        workers.append(worker)

    monitor = threading.Thread(target=monitor_simulation, args=(table,), name="monitor")
    try:
        monitor.start()
    except RuntimeError:
        print("Failed to create monitoring thread")
    else:
        monitor.join()
    for worker in workers:
        worker.join()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments, run the dinner and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = parse_arguments(args)
    except ConfigError as error:
        print(error)
        return 1
    run_simulation(DiningTable(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())