"""Byte-level encoding of Roomba Open Interface commands and speed mixing."""

from __future__ import annotations

import struct
from enum import IntEnum

SPEED_BIAS_RATIO = 0.25
STEER_THRESHOLD = 150


class Opcode(IntEnum):
    """Open Interface opcodes used by this package."""

    START = 128
    SAFE = 131
    CLEAN = 135
    MOTORS = 138
    DRIVE_DIRECT = 145


def _int16(value: int) -> int:
    """Wrap an integer into the signed 16-bit range."""
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def arduino_map(value: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Re-map an integer from one range to another with truncating integer maths."""
    span = in_max - in_min
    if span == 0:
        raise ValueError("input range must not be empty")
    numerator = (value - in_min) * (out_max - out_min)
    quotient = abs(numerator) // abs(span)
    if (numerator < 0) != (span < 0):
        quotient = -quotient
    return quotient + out_min


def split_speed(speed: int) -> tuple[int, int]:
    """Split a signed 16-bit speed into its (high, low) bytes."""
    raw = speed & 0xFFFF
    return raw >> 8, raw & 0xFF


def drive_direct_packet(right: int, left: int) -> bytes:
    """Build a start/safe/drive-direct packet for the given wheel speeds."""
    right_high, right_low = split_speed(right)
    left_high, left_low = split_speed(left)
    return bytes(
        [
            Opcode.START,
            Opcode.SAFE,
            Opcode.DRIVE_DIRECT,
            right_high,
            right_low,
            left_high,
            left_low,
        ]
    )


def motors_packet(bits: int) -> bytes:
    """Build a start/safe/motors packet with the given motor bit field."""
    if not 0 <= bits <= 0xFF:
        raise ValueError(f"motor bits must fit in one byte, got {bits}")
    return bytes([Opcode.START, Opcode.SAFE, Opcode.MOTORS, bits])


def trigger_speeds(brake: int, throttle: int, reverse: bool) -> tuple[int, int]:
    """Return (right, left) speeds where throttle drives the right side and brake the left."""
    brake_speed = _int16(arduino_map(brake, 0, 1023, 0, 500))
    throttle_speed = _int16(arduino_map(throttle, 0, 1023, 0, 500))
    if reverse:
        brake_speed = _int16(-brake_speed)
        throttle_speed = _int16(-throttle_speed)
    return throttle_speed, brake_speed


def racing_speeds(steering: int, throttle: int, reverse: bool) -> tuple[int, int]:
    """Return (right, left) speeds for car-style steering with a throttle."""
    steer = _int16(arduino_map(steering, -512, 512, -500, 500))
    speed = _int16(arduino_map(throttle, 0, 1023, 0, 500))
    if reverse:
        speed = _int16(-speed)

    def _slowed(gain: float) -> int:
        speed_bias = _f32((throttle / 1023.0) * SPEED_BIAS_RATIO)
        bias = _f32(1.0 - gain * (1.0 - speed_bias))
        return _int16(int(_f32(speed * bias)))

    if steering >= STEER_THRESHOLD:
        return _slowed(_f32(steer / 500.0)), speed
    if steering <= -STEER_THRESHOLD:
        return speed, _slowed(_f32((-1.0 * steer) / 500.0))
    return speed, speed


def tank_speeds(steering: int) -> tuple[int, int]:
    """Return (right, left) speeds for turning on the spot."""
    steer = _int16(arduino_map(steering, -512, 512, -150, 150))
    return _int16(-steer), steer