"""Threads, forks and the monitor of the dining philosophers simulation."""

import sys
import threading
from typing import List, Optional, TextIO

from philo.config import Settings
from philo.timing import now_ms, precise_sleep

_MONITOR_INTERVAL_S = 0.001
_ODD_START_DELAY_MS = 10
_ODD_TABLE_PAUSE_MS = 100


class Table:
    """Shared state of one run: forks, locks, the stop flag and the output."""

    def __init__(self, settings: Settings, out: Optional[TextIO] = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.print_lock = threading.Lock()
        self.dead_lock = threading.Lock()
        self.meal_lock = threading.Lock()
        self._over = False
        self.start_time = now_ms()
        count = settings.number_of_philosophers
        self.forks: List[threading.Lock] = [threading.Lock() for _ in range(count)]
        self.philosophers: List["Philosopher"] = [
            Philosopher(index, self, self.forks[index], self.forks[index - 1])
            for index in range(count)
        ]

    def is_over(self) -> bool:
        """Tell whether the simulation has been stopped."""
        with self.dead_lock:
            return self._over

    def stop(self) -> None:
        """Stop the simulation; later log lines are suppressed."""
        with self.dead_lock:
            self._over = True

    def log(self, philosopher_id: int, action: str) -> None:
        """Write one status line unless the simulation is over."""
        with self.print_lock, self.dead_lock:
            if not self._over:
                timestamp = now_ms() - self.start_time
                print(f"{timestamp} {philosopher_id} {action}", file=self.out, flush=True)


class Philosopher:
    """One philosopher, eating, sleeping and thinking until the table stops."""

    def __init__(
        self,
        index: int,
        table: Table,
        left_fork: threading.Lock,
        right_fork: threading.Lock,
    ) -> None:
        self.index = index
        self.table = table
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.meals_eaten = 0
        self.last_meal_time = now_ms()

    @property
    def number(self) -> int:
        """The one-based number shown in the output."""
        return self.index + 1

    def _take_forks(self) -> tuple:
        if self.index % 2 == 0:
            order = (self.right_fork, self.left_fork)
        else:
            order = (self.left_fork, self.right_fork)
        for fork in order:
            fork.acquire()
            self.table.log(self.number, "has taken a fork")
        return order

    def eat(self) -> None:
        """Take both forks, eat, and put the forks back."""
        settings = self.table.settings
        if settings.number_of_philosophers == 1:
            with self.left_fork:
                self.table.log(self.number, "has taken a fork")
                precise_sleep(settings.time_to_die)
            return
        held = self._take_forks()
        try:
            with self.table.meal_lock:
                self.last_meal_time = now_ms()
            self.table.log(self.number, "is eating")
            precise_sleep(settings.time_to_eat)
            with self.table.meal_lock:
                self.meals_eaten += 1
        finally:
            for fork in reversed(held):
                fork.release()

    def sleep(self) -> None:
        """Announce sleeping and sleep for the configured time."""
        self.table.log(self.number, "is sleeping")
        precise_sleep(self.table.settings.time_to_sleep)

    def think(self) -> None:
        """Announce thinking."""
        self.table.log(self.number, "is thinking")

    def starved(self) -> bool:
        """Tell whether the time since the last meal reached the time to die."""
        with self.table.meal_lock:
            return now_ms() - self.last_meal_time >= self.table.settings.time_to_die

    def run(self) -> None:
        """Loop through eating, sleeping and thinking until the table stops."""
        if self.index % 2 != 0:
            precise_sleep(_ODD_START_DELAY_MS)
        odd_table = self.table.settings.number_of_philosophers % 2 != 0
        while not self.table.is_over():
            self.eat()
            self.sleep()
            self.think()
            if odd_table:
                precise_sleep(_ODD_TABLE_PAUSE_MS)


def check_deaths(table: Table) -> bool:
    """Report the first starved philosopher and stop the table."""
    for philosopher in table.philosophers:
        if philosopher.starved():
            table.log(philosopher.number, "died")
            table.stop()
            return True
    return False


def check_all_ate(table: Table) -> bool:
    """Stop the table once every philosopher has eaten enough, if a goal is set."""
    required = table.settings.meals_required
    if required is None:
        return False
    with table.meal_lock:
        satisfied = all(p.meals_eaten >= required for p in table.philosophers)
    if satisfied:
        table.stop()
    return satisfied


def monitor(table: Table) -> None:
    """Watch the table until someone dies or everyone has eaten enough."""
    while True:
        if check_deaths(table) or check_all_ate(table):
            return
        threading.Event().wait(_MONITOR_INTERVAL_S)


def run_simulation(settings: Settings, out: Optional[TextIO] = None) -> Table:
    """Run one full simulation and return its table once all threads finish."""
    table = Table(settings, out)
    threads = [threading.Thread(target=monitor, args=(table,), name="monitor")]
    threads.extend(
        threading.Thread(target=p.run, name=f"philosopher-{p.number}")
        for p in table.philosophers
    )
    started = []
    try:
        for thread in threads:
            thread.start()
            started.append(thread)
    except RuntimeError as exc:
        table.stop()
        for thread in started:
            thread.join()
        raise RuntimeError("Thread creation failed") from exc
    for thread in threads:
        thread.join()
    return table