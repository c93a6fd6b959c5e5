# roombaoi

Build Roomba Open Interface command packets and write them to any binary
stream, such as a serial port you have opened yourself or an in-memory buffer.

The package has two modules:

- `roombaoi.protocol` holds the pure pieces: the `Opcode` values
  (`START`, `SAFE`, `CLEAN`, `MOTORS`, `DRIVE_DIRECT`), `arduino_map` for
  scaling controller readings with truncating integer maths, `split_speed`
  for turning a signed 16-bit speed into `(high, low)` bytes,
  `drive_direct_packet` and `motors_packet` for building byte packets, and
  `trigger_speeds`, `racing_speeds` and `tank_speeds` for turning trigger,
  stick and steering readings into `(right, left)` wheel speeds.
- `roombaoi.interface.OpenInterface` writes those packets to a port and
  writes short status text to a console.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using it

```python
import io
import sys

from roombaoi.interface import OpenInterface

port = io.BytesIO()  # or any object with a binary write() method
robot = OpenInterface(console=sys.stdout, port=port, pause=lambda seconds: None)

robot.start_vac()
robot.forwards()
robot.racing_control(steering=200, throttle=800, reverse=False)
robot.stop()

print(port.getvalue())
```

`OpenInterface(console, port, pause=time.sleep)` takes a text stream for
status messages, a binary stream for the robot, and a function called with a
number of seconds to wait. `start_vac` sends the start opcode, pauses 0.1 s,
sends the clean opcode and pauses again.

Drive commands (`forwards`, `backwards`, `left`, `right`, `stop`,
`trigger_control`, `racing_control`, `tank_steer`) send the start and
safe-mode opcodes followed by a direct-drive packet: right-wheel speed, then
left-wheel speed, each a signed 16-bit big-endian value. Motor commands
(`main_vac`, `brush`, `full_vac`, `full_vac_off`, `motors_off`) send start,
safe and the motors opcode with one byte of motor bits.

Each command writes a status line to the console, except `racing_control`,
which writes nothing, and `start_vac`, which writes `starting roomba` with no
line ending. `tank_steer` writes three lines: the two speeds, then the high
and low bytes for each side.

Controller inputs use 0–1023 for triggers and throttle and −512–512 for
steering. Triggers and throttle scale to 0–500 (negated when `reverse` is
true); `tank_speeds` scales steering to −150–150 and spins the wheels in
opposite directions. In `racing_speeds`, steering of 150 or more slows the
right wheel and −150 or less slows the left; between those both wheels run
at the throttle speed.

Computing wheel speeds without talking to a robot:

```python
from roombaoi.protocol import drive_direct_packet, racing_speeds

right, left = racing_speeds(steering=300, throttle=1023, reverse=False)
packet = drive_direct_packet(right, left)
```

## What it does not do

The package does not open serial ports, read sensor data or replies from the
robot, or offer a command-line tool. You open the port yourself and pass it
in; the package only writes to it.