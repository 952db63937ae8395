import io
from collections import Counter

from philo.cli import main, run_simulation
from philo.parsing import SimulationConfig
from philo.table import DiningTable


def test_non_numeric_arguments(capsys):
    assert main(["abc", "800", "200", "200"]) == 1
    assert capsys.readouterr().out.strip() == "Arguments must be numeric values"


def test_negative_argument_is_not_numeric(capsys):
    assert main(["-5", "800", "200", "200"]) == 1
    assert capsys.readouterr().out.strip() == "Arguments must be numeric values"


def test_wrong_argument_count(capsys):
    assert main(["5", "800"]) == 1
    assert capsys.readouterr().out.strip() == "Incorrect argument count"


def test_zero_argument_value(capsys):
    assert main(["0", "800", "200", "200"]) == 1
    assert capsys.readouterr().out.strip() == "Invalid argument values"


def test_lone_thinker_dies(capsys):
    assert main(["1", "50", "10", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split(" ", 1)[1] == "1 has taken a utensil"
    assert lines[-1].split(" ", 1)[1] == "1 died"


def test_required_meals_reached_without_death(capsys):
    assert main(["3", "800", "10", "10", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert all("died" not in line for line in lines)
    eaten = Counter(line.split()[1] for line in lines if line.endswith("is eating"))
    assert all(eaten[str(position)] >= 2 for position in (1, 2, 3))
    stamps = [int(line.split()[0]) for line in lines]
    assert stamps == sorted(stamps)


def test_run_simulation_stops_table():
    stream = io.StringIO()
    table = DiningTable(SimulationConfig(2, 800, 5, 5, 1), stream)
    run_simulation(table)
    assert table.is_active() is False
    assert all(thinker.snapshot().meals_count >= 1 for thinker in table.thinkers)
    assert all(not fork.locked() for fork in table.forks)