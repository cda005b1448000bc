# philo

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread. The philosophers sit at a round table and share one fork
with each neighbour. A monitor thread watches the table. It stops the
simulation when a philosopher starves or when every philosopher has eaten
enough times.

## Installation

```
pip install .
```

## Usage

```
philo NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [TIMES_EACH_MUST_EAT]
```

The same entry point can be started with `python -m philo.cli`.

All times are in milliseconds and all values must be positive integers.
There can be at most 200 philosophers. Without the last argument, the
simulation runs until a philosopher dies.

Example:

```
philo 5 800 200 200 7
```

Each state change is printed as one line with three fields: the
milliseconds since the start, the philosopher's number (starting at 1)
and the action. For example:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
...
```

The actions are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. Once the monitor stops the table, no more lines
are printed.

Some details of the behaviour:

- Even-numbered philosophers (by zero-based index) pick up their right
  fork first, the others their left fork first; odd indices also wait
  10 ms before starting.
- With an odd number of philosophers, each one pauses 100 ms after
  thinking.
- A lone philosopher takes the only fork, waits for the time to die and
  then dies.
- The monitor checks the table about once per millisecond.

When the arguments are invalid, the program prints an error message and
exits with status 1. If a thread cannot be started, the message
`Thread creation failed` goes to standard error and the exit status is 1.

## Library use

```python
import sys
from philo.config import parse_settings
from philo.simulation import run_simulation

settings = parse_settings(["4", "410", "200", "200", "3"])
table = run_simulation(settings, sys.stdout)
print([p.meals_eaten for p in table.philosophers])
```

- `philo.config.parse_settings(args)` takes the arguments after the
  program name and returns a frozen `Settings` dataclass
  (`number_of_philosophers`, `time_to_die`, `time_to_eat`,
  `time_to_sleep`, `meals_required`, the last being `None` when not
  given). It raises `philo.config.InputError` when the input is invalid.
  Numbers are read leniently with `philo.timing.parse_leading_int`:
  leading whitespace and one sign are accepted.
- `philo.simulation.run_simulation(settings, out)` runs the simulation,
  writing lines to `out` (standard output by default), and returns the
  `Table` once all threads have finished.
- `Table` holds the forks, the `Philosopher` objects and the stop flag
  (`is_over()`, `stop()`, `log(philosopher_id, action)`).
  `check_deaths(table)`, `check_all_ate(table)` and `monitor(table)` are
  the monitor's checks and loop.
- `philo.timing` also provides `now_ms()` and `precise_sleep(duration_ms)`.

## Tests

```
pip install .[test]
pytest
```