"""The dining philosophers simulation: philosophers, forks and the monitor."""

import sys
import threading
import time
from enum import Enum
from typing import List, Optional, TextIO

from .args import Settings
from .timing import ms_between, now_ms, now_us, precise_sleep, wait_until

# Each philosopher adds this much start-up delay, so threads begin together.
_START_DELAY_PER_PHILOSOPHER_US = 40_000
# Extra slack added to the time to die after a philosopher starts eating.
_DEATH_MARGIN_MS = 5


class Action(str, Enum):
    """The messages printed for each state change."""

    TAKE_FORK = "has taken a fork"
    THINKING = "is thinking"
    SLEEPING = "is sleeping"
    EATING = "is eating"
    DIED = "died"


class Philosopher:
    """One philosopher, owning a fork and reaching for two."""

    def __init__(self, simulation: "Simulation", number: int) -> None:
        self.simulation = simulation
        self.id = number
        self.meals_eaten = 0
        self.own_fork = threading.Lock()
        self.fork1 = self.own_fork
        self.fork2 = self.own_fork
        self.death_lock = threading.Lock()
        self.will_die_ms = (
            simulation.start_us + simulation.settings.time_to_die_us
        ) // 1000

    @property
    def death_time_ms(self) -> int:
        """The wall-clock millisecond after which this philosopher starves."""
        with self.death_lock:
            return self.will_die_ms

    def routine(self) -> None:
        """Run this philosopher's life until the simulation stops."""
        sim = self.simulation
        settings = sim.settings
        if settings.meal_target == 0:
            return
        if settings.philosopher_count == 1:
            self._lone_routine()
            return
        wait_until(sim.start_us)
        # Odd-numbered philosophers start late to avoid contention.
        if self.id % 2:
            sim.report(self, Action.THINKING)
            precise_sleep(settings.time_to_eat_us >> 1)
        while self._eat() and self._sleep_and_think():
            pass

    def _lone_routine(self) -> None:
        sim = self.simulation
        wait_until(sim.start_us)
        with self.own_fork:
            sim.report(self, Action.TAKE_FORK)
            precise_sleep(sim.settings.time_to_die_us)

    def _eat(self) -> bool:
        sim = self.simulation
        settings = sim.settings
        if sim.should_stop():
            return False
        lifetime_ms = _DEATH_MARGIN_MS + settings.time_to_die_us // 1000
        with self.fork1:
            sim.report(self, Action.TAKE_FORK)
            with self.fork2:
                sim.report(self, Action.TAKE_FORK)
                with self.death_lock:
                    self.will_die_ms = now_ms() + lifetime_ms
                sim.report(self, Action.EATING)
                precise_sleep(settings.time_to_eat_us)
        self.meals_eaten += 1
        if settings.meal_target is not None and self.meals_eaten == settings.meal_target:
            sim.mark_done()
        return True

    def _sleep_and_think(self) -> bool:
        sim = self.simulation
        if sim.should_stop():
            return False
        sim.report(self, Action.SLEEPING)
        precise_sleep(sim.settings.time_to_sleep_us)
        if sim.should_stop():
            return False
        sim.report(self, Action.THINKING)
        return True


class Simulation:
    """Shared state of one run: philosophers, stop flags and the output."""

    def __init__(
        self,
        settings: Settings,
        output: Optional[TextIO] = None,
        start_us: Optional[int] = None,
    ) -> None:
        self.settings = settings
        self.output = output if output is not None else sys.stdout
        if start_us is None:
            start_us = now_us() + settings.philosopher_count * _START_DELAY_PER_PHILOSOPHER_US
        self.start_us = start_us
        self.dead_found = False
        self.all_fed = False
        self.done_count = 0
        self._flags_lock = threading.Lock()
        self._done_lock = threading.Lock()
        self._write_lock = threading.Lock()
        self.philosophers: List[Philosopher] = [
            Philosopher(self, number) for number in range(1, settings.philosopher_count + 1)
        ]
        self._assign_forks()

    def _assign_forks(self) -> None:
        philosophers = self.philosophers
        first = philosophers[0]
        first.fork1 = first.own_fork
        first.fork2 = philosophers[-1].own_fork
        for left, current in zip(philosophers, philosophers[1:]):
            # Alternate the pick-up order so neighbours never deadlock.
            if (current.id - 1) % 2:
                current.fork1, current.fork2 = left.own_fork, current.own_fork
            else:
                current.fork1, current.fork2 = current.own_fork, left.own_fork

    def should_stop(self) -> bool:
        """Return True once a philosopher has died or everyone has eaten enough."""
        with self._flags_lock:
            return self.dead_found or self.all_fed

    def _write(self, philosopher: Philosopher, action: Action) -> None:
        with self._write_lock:
            stamp = ms_between(self.start_us, now_us())
            self.output.write(f"{stamp} {philosopher.id} {action.value}\n")
            self.output.flush()

    def report(self, philosopher: Philosopher, action: Action) -> bool:
        """Print an action unless the simulation has stopped; return whether it printed."""
        if self.should_stop():
            return False
        self._write(philosopher, action)
        return True

    def found_dead(self, philosopher: Philosopher) -> None:
        """Stop the simulation and announce the death of ``philosopher``."""
        with self._flags_lock:
            self.dead_found = True
        self._write(philosopher, Action.DIED)

    def mark_done(self) -> None:
        """Record one philosopher reaching the meal target."""
        with self._done_lock:
            self.done_count += 1
            everyone = self.done_count == self.settings.philosopher_count
        if everyone:
            with self._flags_lock:
                self.all_fed = True

    def monitor_routine(self) -> None:
        """Watch the philosophers and stop the run at the first starvation."""
        if self.settings.meal_target == 0:
            return
        wait_until(self.start_us)
        if self.settings.philosopher_count == 1:
            precise_sleep(self.settings.time_to_die_us)
        while True:
            for philosopher in self.philosophers:
                if self.should_stop():
                    return
                if philosopher.death_time_ms < now_ms():
                    self.found_dead(philosopher)
                    return
            time.sleep(0)

    def run(self) -> None:
        """Start the monitor and every philosopher, then wait for them all.

        Raises :class:`RuntimeError` if a thread cannot be started; threads
        already running are stopped and joined first.
        """
        threads: List[threading.Thread] = []
        targets = [self.monitor_routine] + [p.routine for p in self.philosophers]
        try:
            for target in targets:
                thread = threading.Thread(target=target)
                thread.start()
                threads.append(thread)
        except RuntimeError:
            with self._flags_lock:
                self.dead_found = True
            for thread in threads:
                thread.join()
            raise
        for thread in threads[1:]:
            thread.join()
        threads[0].join()