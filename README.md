# philo

A simulation of the dining philosophers problem. Thinkers sit at a round
table with one fork between each pair of neighbours. Each thinker runs in its
own thread and repeats the same cycle: take two forks, eat, sleep, think. A
monitor thread watches the table. It stops the dinner when a thinker starves,
or when every thinker has eaten the required number of meals.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
philo NUMBER_OF_THINKERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS_REQUIRED]
```

`python -m philo.cli` with the same arguments does the same thing.

All times are in milliseconds. Every argument must be a positive whole number
written with digits only.

- `NUMBER_OF_THINKERS`: how many thinkers sit at the table. There are as many
  forks as thinkers.
- `TIME_TO_DIE`: a thinker who goes longer than this without starting a meal
  dies.
- `TIME_TO_EAT`: how long a meal takes. The thinker holds both forks for the
  whole meal.
- `TIME_TO_SLEEP`: how long a thinker sleeps after eating.
- `MEALS_REQUIRED` (optional): the dinner ends once every thinker has eaten
  at least this many times. Without it, the dinner runs until someone dies.

Odd-numbered thinkers pick up their left fork first and even-numbered ones
their right fork first; even-numbered thinkers also start one millisecond
late. A thinker alone at the table takes a single utensil and waits until it
starves.

Example:

```
philo 5 800 200 200 7
```

## Output

Every event is printed to standard output on its own line:

```
<milliseconds since start> <thinker number> <action>
```

The action is one of `has taken a fork`, `is eating`, `is sleeping`,
`is thinking`, `died`, or, for a lone thinker, `has taken a utensil`. Once
the dinner is over only a `died` message can still be printed.

## Errors

The program prints one message and exits with status 1. The checks are made
in this order:

- an argument contains anything other than digits:
  `Arguments must be numeric values`
- there are fewer than four or more than five arguments:
  `Incorrect argument count`
- an argument is zero: `Invalid argument values`

## Using it as a library

- `philo.parsing.parse_arguments(args)` takes the arguments without the
  program name and returns a frozen `SimulationConfig`
  (`thinker_count`, `starvation_time`, `feeding_duration`, `rest_duration`,
  `required_meals`, the last being `None` when no meal count is given). It
  raises `ConfigError`, a `ValueError`, when the values are not valid.
  `parse_int` and `is_numeric` are the helpers it uses.
- `philo.table.DiningTable(config, stream=None)` holds the thinkers, the forks
  and the shared state, and writes events to `stream` (standard output by
  default). It offers `elapsed()`, `is_active()`, `stop()`,
  `display(position, action)` and `precise_sleep(milliseconds)`. Each
  `Thinker` records meals with `start_meal(counting)` and reports them with
  `snapshot()`.
- `philo.monitor` has `check_for_starvation`, `check_meal_completion` and
  `monitor_simulation`; `philo.thinker` has `thinker_lifecycle` and the steps
  it is made of.
- `philo.cli.run_simulation(table)` starts the thinker threads and the
  monitor and returns when the dinner has ended; `philo.cli.main(argv=None)`
  is the command above and returns the exit status.