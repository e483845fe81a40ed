# dining-philosophers

A simulation of the dining philosophers problem. Every philosopher runs in
its own thread, forks are locks shared between neighbours, and a monitor
thread watches for a philosopher who has gone too long without eating.

## Installing

```
pip install .
```

## Running

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

All times are in milliseconds. Each argument must be a non-negative integer
that fits in a signed 32-bit int. Leading whitespace and a single `+` sign
are accepted; a minus sign or any other character is rejected. There must be
between 1 and 200 philosophers.

Example:

```
philo 5 800 200 200 7
```

Each event is printed as one line: the milliseconds since the simulation
started, the philosopher's number (counting from 1) and what happened:

```
0 1 is thinking
0 2 has taken a fork
0 2 has taken a fork
0 2 is eating
...
```

The possible events are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`.

The run starts after a short delay that grows with the number of
philosophers, so that every thread begins at the same moment. Odd-numbered
philosophers start by thinking for half the time to eat, and neighbours pick
up their forks in opposite orders so they cannot deadlock.

The simulation stops when a philosopher dies, or, if the last argument is
given, once every philosopher has eaten that many times. With a meal target
of 0 nothing happens at all. A lone philosopher takes its one fork and dies,
since it can never hold two.

Exit status:

- wrong number of arguments: the usage is printed and the exit status is 0;
- invalid arguments: an error message is printed and the exit status is 1;
- a thread that cannot be started: `Error when creating threads.` is printed
  and the exit status is 1.

## Using it from Python

```python
import io

from dining_philosophers.args import parse_settings
from dining_philosophers.simulation import Simulation

settings = parse_settings(["4", "410", "200", "200", "3"])
log = io.StringIO()
Simulation(settings, output=log).run()
print(log.getvalue())
```

`dining_philosophers.args`:

- `parse_settings(args)` takes the four or five arguments that follow the
  program name and returns a frozen `Settings` with `philosopher_count`,
  `time_to_die_us`, `time_to_eat_us`, `time_to_sleep_us` (in microseconds)
  and `meal_target` (`None` when not given). It raises `UsageError` for a
  wrong number of arguments and `ArgumentError` for invalid values.
- `parse_arg(text)` parses a single argument on the same terms.

`dining_philosophers.simulation`:

- `Simulation(settings, output=None, start_us=None)` builds the philosophers
  and writes events to `output` (standard output by default). `run()` starts
  the monitor and all philosophers and waits for them to finish.
- `should_stop()`, `report(philosopher, action)`, `found_dead(philosopher)`,
  `mark_done()` and `monitor_routine()` are the pieces `run()` is built from.
- `Philosopher.routine()` is one philosopher's life; `Action` is the enum of
  printed events.

`dining_philosophers.timing` provides the clock helpers the simulation uses:
`now_ms`, `now_us`, `ms_between`, `precise_sleep` (a sleep that wakes
repeatedly and spins for the last stretch to stay accurate) and `wait_until`.

`dining_philosophers.cli.main(argv=None)` is the `philo` command; it returns
the exit status.

## Tests

```
pip install .[test]
pytest
```