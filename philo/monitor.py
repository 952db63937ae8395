"""Watcher that ends the dinner on starvation or when everyone has eaten."""

from __future__ import annotations

import time

from .table import DiningTable, Thinker, current_timestamp

_MONITOR_INTERVAL = 0.001


def check_for_starvation(table: DiningTable, thinker: Thinker, now: int) -> bool:
    """Stop the dinner and announce the death if the thinker went hungry too long."""
    last_meal = thinker.snapshot().last_meal
    if now - last_meal > table.config.starvation_time:
        table.stop()
        table.display(thinker.position, "died")
        return True
    return False


def check_meal_completion(table: DiningTable) -> bool:
    """Stop the dinner if every thinker has eaten the required number of meals."""
    required = table.config.required_meals
    if required is None:
        return False
    if all(thinker.snapshot().meals_count >= required for thinker in table.thinkers):
        table.stop()
        return True
    return False


def monitor_simulation(table: DiningTable) -> None:
    """Poll the thinkers until one starves or all have eaten enough."""
    while True:
        for thinker in table.thinkers:
            if check_for_starvation(table, thinker, current_timestamp()):
                return
        if check_meal_completion(table):
            return
        time.sleep(_MONITOR_INTERVAL)