"""The life of a single thinker: take forks, eat, sleep, think."""

from __future__ import annotations

import time

from .table import DiningTable, Thinker

_STAGGER_DELAY = 0.001


def handle_lone_thinker(table: DiningTable, thinker: Thinker) -> None:
    """A thinker alone at the table holds one utensil until it starves."""
    table.display(thinker.position, "has taken a utensil")
    time.sleep(table.config.starvation_time / 1000)


def acquire_forks(table: DiningTable, thinker: Thinker) -> None:
    """Pick up both forks; even seats reach for the second one first."""
    if thinker.position % 2 == 0:
        order = (thinker.second_fork, thinker.first_fork)
    else:
        order = (thinker.first_fork, thinker.second_fork)
    for fork in order:
        fork.acquire()
        table.display(thinker.position, "has taken a fork")


def perform_actions(table: DiningTable, thinker: Thinker) -> None:
    """Eat with the held forks, release them, then sleep and think."""
    thinker.start_meal(table.config.required_meals is not None)
    table.display(thinker.position, "is eating")
    table.precise_sleep(table.config.feeding_duration)
    thinker.first_fork.release()
    thinker.second_fork.release()
    table.display(thinker.position, "is sleeping")
    table.precise_sleep(table.config.rest_duration)
    table.display(thinker.position, "is thinking")


def thinker_lifecycle(table: DiningTable, thinker: Thinker) -> None:
    """Run the thinker's loop until the dinner ends."""
    if thinker.position % 2 == 0:
        time.sleep(_STAGGER_DELAY)
    if table.config.thinker_count == 1:
        handle_lone_thinker(table, thinker)
        return
    while table.is_active():
        acquire_forks(table, thinker)
        perform_actions(table, thinker)