"""High-level Roomba controller writing commands to a serial-like port."""

from __future__ import annotations

import time
from typing import BinaryIO, Callable, TextIO

from roombaoi.protocol import (
    Opcode,
    drive_direct_packet,
    motors_packet,
    racing_speeds,
    split_speed,
    tank_speeds,
    trigger_speeds,
)

START_DELAY = 0.1

MAIN_VACUUM = 12
SIDE_BRUSH = 3
ALL_MOTORS = 0b00000111
# The motors-off command sends this value as its bit field.
MOTORS_OFF_BITS = 138


class OpenInterface:
    """Sends Open Interface commands to ``port`` and logs to ``console``."""

    def __init__(
        self,
        console: TextIO,
        port: BinaryIO,
        pause: Callable[[float], object] = time.sleep,
    ) -> None:
        self.console = console
        self.port = port
        self.pause = pause

    def _say(self, text: str) -> None:
        self.console.write(text + "\r\n")

    def _send(self, packet: bytes) -> None:
        self.port.write(packet)

    def start_vac(self) -> None:
        """Start the robot and begin a cleaning cycle."""
        self.console.write("starting roomba")
        self._send(bytes([Opcode.START]))
        self.pause(START_DELAY)
        self._send(bytes([Opcode.CLEAN]))
        self.pause(START_DELAY)

    def backwards(self) -> None:
        self._say("going backwards")
        self._send(drive_direct_packet(-200, -200))

    def forwards(self) -> None:
        self._say("going forwards")
        self._send(drive_direct_packet(500, 500))

    def right(self) -> None:
        self._say("going right")
        self._send(drive_direct_packet(-200, 200))

    def left(self) -> None:
        self._say("going left")
        self._send(drive_direct_packet(200, -200))

    def stop(self) -> None:
        self._say("stopping motion")
        self._send(drive_direct_packet(0, 0))

    def main_vac(self) -> None:
        self._say("vacuum on")
        self._send(motors_packet(MAIN_VACUUM))

    def brush(self) -> None:
        self._say("brush on")
        self._send(motors_packet(SIDE_BRUSH))

    def motors_off(self) -> None:
        self._say("motor off")
        self._send(motors_packet(MOTORS_OFF_BITS))

    def full_vac(self) -> None:
        self._say("full vac")
        self._send(motors_packet(ALL_MOTORS))

    def full_vac_off(self) -> None:
        self._say("full vac")
        self._send(motors_packet(0))

    def trigger_control(self, brake: int, throttle: int, reverse: bool) -> None:
        """Drive each side from its own trigger: throttle right, brake left."""
        self._say("Tank Steer")
        self._send(drive_direct_packet(*trigger_speeds(brake, throttle, reverse)))

    def racing_control(self, steering: int, throttle: int, reverse: bool) -> None:
        """Drive like a car: throttle sets speed, steering slows one side."""
        self._send(drive_direct_packet(*racing_speeds(steering, throttle, reverse)))

    def tank_steer(self, steering: int) -> None:
        """Spin on the spot, reporting speeds and bytes on the console."""
        right, left = tank_speeds(steering)
        right_high, right_low = split_speed(right)
        left_high, left_low = split_speed(left)
        self._say(f"Speed--> Right:{right} Left:{left}")
        self._say(f"Right--> High Byte:{right_high} Low Byte:{right_low}")
        self._say(f"Left--> High Byte:{left_high} Low Byte:{left_low}")
        self._send(drive_direct_packet(right, left))