"""Elevators and a building whose riders call, board and leave them."""

from __future__ import annotations

import logging
import threading
import time

from monitorkit.alarm import Alarm
from monitorkit.eventbarrier import EventBarrier
from monitorkit.synch import Condition, Lock

log = logging.getLogger(__name__)

MAX_FLOORS = 100
DEFAULT_CAPACITY = 7
UNITS_PER_FLOOR = 10
_UP = 1
_DOWN = 0
_DOOR_PAUSE = 0.001


def _check_floor_count(num_floors: int) -> None:
    if not 1 <= num_floors < MAX_FLOORS:
        raise ValueError(f"number of floors must be between 1 and {MAX_FLOORS - 1}")


class Elevator:
    """One elevator car that serves the floors of its building.

    Floors are numbered from 1; the car starts on floor 1 heading down.
    """

    def __init__(
        self,
        name: str,
        num_floors: int,
        elevator_id: int,
        capacity: int = DEFAULT_CAPACITY,
        alarm: Alarm | None = None,
    ) -> None:
        _check_floor_count(num_floors)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.name = name
        self.elevator_id = elevator_id
        self.capacity = capacity
        self._num_floors = num_floors
        self._alarm = alarm if alarm is not None else Alarm()
        self._current_floor = 1
        self._occupancy = 0
        self._direction = _DOWN
        self.floor_called = [False] * (num_floors + 1)
        self.exit_bar = [EventBarrier() for _ in range(num_floors + 1)]
        self._building: Building | None = None

    @property
    def current_floor(self) -> int:
        """The floor where the car is stopped or last stopped."""
        return self._current_floor

    @property
    def occupancy(self) -> int:
        """The number of riders on board."""
        return self._occupancy

    @property
    def building(self) -> Building:
        """The building this car serves."""
        if self._building is None:
            raise RuntimeError(f"elevator {self.elevator_id} has no building")
        return self._building

    def _check_floor(self, floor: int) -> None:
        if not 1 <= floor <= self._num_floors:
            raise ValueError(f"floor {floor} out of range 1..{self._num_floors}")

    def _announce_id(self) -> None:
        if self._direction == _UP:
            self.building.set_up_id(self._current_floor, self.elevator_id)
        else:
            self.building.set_down_id(self._current_floor, self.elevator_id)

    def open_doors(self) -> None:
        """Let riders leave on this floor, then let riders going our way board."""
        building = self.building
        floor = self._current_floor
        log.debug("elevator %d opens doors on floor %d", self.elevator_id, floor)
        if self.exit_bar[floor].waiters() > 0:
            self.exit_bar[floor].signal()
        self._announce_id()
        if self._direction == _UP and building.enter_bar_up[floor].waiters() > 0:
            building.enter_bar_up[floor].signal()
        if self._direction == _DOWN and building.enter_bar_down[floor].waiters() > 0:
            building.enter_bar_down[floor].signal()

    def close_doors(self) -> None:
        """Give riders a moment to press their buttons, then close."""
        time.sleep(_DOOR_PAUSE)
        log.debug(
            "elevator %d closes doors on floor %d",
            self.elevator_id,
            self._current_floor,
        )

    def visit_floor(self, floor: int) -> None:
        """Travel to floor, taking ten time units per floor passed."""
        self._check_floor(floor)
        distance = abs(floor - self._current_floor)
        log.debug(
            "elevator %d travels for %d units",
            self.elevator_id,
            UNITS_PER_FLOOR * distance,
        )
        self._alarm.pause(UNITS_PER_FLOOR * distance)
        self._current_floor = floor
        self.floor_called[floor] = False
        log.debug("elevator %d arrived at floor %d", self.elevator_id, floor)

    def enter(self) -> bool:
        """Board the car; False if it is full and the rider must call again."""
        building = self.building
        with building.lock:
            if building.rider_request <= 0:
                raise RuntimeError("no outstanding rider request to satisfy")
            building.rider_request -= 1
        floor = self._current_floor
        rider = threading.current_thread().name
        if self._occupancy < self.capacity:
            self._occupancy += 1
            log.debug(
                "rider %s enters elevator %d on floor %d",
                rider,
                self.elevator_id,
                floor,
            )
            if self._direction == _UP:
                building.floor_called_up[floor] = False
                building.enter_bar_up[floor].complete()
            else:
                building.floor_called_down[floor] = False
                building.enter_bar_down[floor].complete()
            return True
        log.debug(
            "elevator %d full, rider %s cannot enter on floor %d",
            self.elevator_id,
            rider,
            floor,
        )
        building.floor_called_down[floor] = False
        if self._direction == _UP:
            building.enter_bar_up[floor].complete()
        else:
            building.enter_bar_down[floor].complete()
        # Let the car finish with the barrier before the rider calls again.
        time.sleep(_DOOR_PAUSE)
        return False

    def exit(self) -> None:
        """Leave the car on the current floor."""
        if self._occupancy <= 0:
            raise RuntimeError(f"elevator {self.elevator_id} has no rider on board")
        self._occupancy -= 1
        log.debug(
            "rider %s exits elevator %d on floor %d",
            threading.current_thread().name,
            self.elevator_id,
            self._current_floor,
        )
        self.exit_bar[self._current_floor].complete()

    def request_floor(self, floor: int) -> None:
        """Press the button for floor and wait until the car arrives there."""
        self._check_floor(floor)
        self.floor_called[floor] = True
        log.debug("rider %s requests floor %d", threading.current_thread().name, floor)
        self.exit_bar[floor].wait()

    def no_need_up(self, here: int) -> bool:
        """True if no floor above here has an up call or a pressed button."""
        building = self.building
        return not any(
            building.floor_called_up[floor] or self.floor_called[floor]
            for floor in range(here + 1, self._num_floors + 1)
        )

    def no_need_down(self, here: int) -> bool:
        """True if no floor below here has a down call or a pressed button."""
        building = self.building
        return not any(
            building.floor_called_down[floor] or self.floor_called[floor]
            for floor in range(here - 1, 0, -1)
        )

    def _sweep_up(self) -> None:
        building = self.building
        for floor in range(self._current_floor + 1, self._num_floors + 1):
            if not (building.floor_called_up[floor] or self.floor_called[floor]):
                continue
            self.visit_floor(floor)
            self.open_doors()
            if self.no_need_up(floor):
                if building.floor_called_down[floor]:
                    self._direction = _DOWN
                    building.floor_called_down[self._current_floor] = False
                    barrier = building.enter_bar_down[self._current_floor]
                    if barrier.waiters() > 0:
                        barrier.signal()
                self.close_doors()
                break
            self.close_doors()
        for floor in range(self._num_floors, 0, -1):
            if building.floor_called_down[floor]:
                self.visit_floor(floor)
                self._direction = _DOWN
                self.open_doors()
                self.close_doors()
                break
        self._direction = _DOWN

    def _sweep_down(self) -> None:
        building = self.building
        for floor in range(self._current_floor - 1, 0, -1):
            if not (building.floor_called_down[floor] or self.floor_called[floor]):
                continue
            self.visit_floor(floor)
            self.open_doors()
            if self.no_need_down(floor):
                if building.floor_called_up[floor]:
                    self._direction = _UP
                    building.floor_called_up[self._current_floor] = False
                    barrier = building.enter_bar_up[self._current_floor]
                    if barrier.waiters() > 0:
                        barrier.signal()
                self.close_doors()
                break
            self.close_doors()
        for floor in range(1, self._num_floors + 1):
            if building.floor_called_up[floor]:
                self.visit_floor(floor)
                self._direction = _UP
                self.open_doors()
                self.close_doors()
                break
        self._direction = _UP

    def operating(self) -> None:
        """Serve calls forever, sleeping while there is nothing to do."""
        building = self.building
        log.debug("elevator %d starts working", self.elevator_id)
        while True:
            if self._direction == _UP:
                self._sweep_up()
            else:
                self._sweep_down()
            with building.lock:
                while building.rider_request == 0 and self._occupancy == 0:
                    log.debug("elevator %d has nothing to do", self.elevator_id)
                    building.cond.wait(building.lock)

    def set_building(self, building: Building) -> None:
        """Attach this car to the building it serves."""
        self._building = building

    def __repr__(self) -> str:
        return (
            f"Elevator(id={self.elevator_id}, floor={self._current_floor}, "
            f"occupancy={self._occupancy})"
        )


class Building:
    """A building with floors 1..num_floors and a bank of elevators."""

    def __init__(
        self,
        name: str,
        num_floors: int,
        num_elevators: int,
        capacity: int = DEFAULT_CAPACITY,
        alarm: Alarm | None = None,
    ) -> None:
        _check_floor_count(num_floors)
        if num_elevators < 1:
            raise ValueError("a building needs at least one elevator")
        self.name = name
        self._num_floors = num_floors
        shared_alarm = alarm if alarm is not None else Alarm()
        self.lock = Lock("Elevator lock")
        self.cond = Condition("Elevator condition")
        self.rider_request = 0
        self._up_id_lock = threading.Lock()
        self._down_id_lock = threading.Lock()
        self._elevator_up_id = [0] * (num_floors + 1)
        self._elevator_down_id = [0] * (num_floors + 1)
        self.floor_called_up = [False] * (num_floors + 1)
        self.floor_called_down = [False] * (num_floors + 1)
        self.enter_bar_up = [EventBarrier() for _ in range(num_floors + 1)]
        self.enter_bar_down = [EventBarrier() for _ in range(num_floors + 1)]
        self.elevators = tuple(
            Elevator("BuildingElevator", num_floors, index, capacity, shared_alarm)
            for index in range(num_elevators)
        )
        for car in self.elevators:
            car.set_building(self)

    def _check_floor(self, floor: int) -> None:
        if not 1 <= floor <= self._num_floors:
            raise ValueError(f"floor {floor} out of range 1..{self._num_floors}")

    def _call(self, flags: list[bool], from_floor: int) -> None:
        self._check_floor(from_floor)
        with self.lock:
            self.rider_request += 1
            flags[from_floor] = True
            self.cond.broadcast(self.lock)

    def call_up(self, from_floor: int) -> None:
        """Press the up button on from_floor."""
        self._call(self.floor_called_up, from_floor)

    def call_down(self, from_floor: int) -> None:
        """Press the down button on from_floor."""
        self._call(self.floor_called_down, from_floor)

    def await_up(self, from_floor: int) -> Elevator:
        """Wait for a car going up on from_floor and return it."""
        self._check_floor(from_floor)
        self.enter_bar_up[from_floor].wait()
        with self._up_id_lock:
            return self.elevators[self._elevator_up_id[from_floor]]

    def await_down(self, from_floor: int) -> Elevator:
        """Wait for a car going down on from_floor and return it."""
        self._check_floor(from_floor)
        self.enter_bar_down[from_floor].wait()
        with self._down_id_lock:
            return self.elevators[self._elevator_down_id[from_floor]]

    def get_elevator(self) -> Elevator:
        """The first elevator of the building."""
        return self.elevators[0]

    def start_elevator(self) -> None:
        """Run the first elevator forever in the calling thread."""
        self.get_elevator().operating()

    def set_up_id(self, floor: int, elevator_id: int) -> None:
        """Record which car is boarding upward riders on floor."""
        with self._up_id_lock:
            self._elevator_up_id[floor] = elevator_id

    def set_down_id(self, floor: int, elevator_id: int) -> None:
        """Record which car is boarding downward riders on floor."""
        with self._down_id_lock:
            self._elevator_down_id[floor] = elevator_id

    def __repr__(self) -> str:
        return (
            f"Building({self.name!r}, floors={self._num_floors}, "
            f"elevators={len(self.elevators)})"
        )