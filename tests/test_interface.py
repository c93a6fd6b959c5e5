import io

import pytest

from roombaoi.interface import OpenInterface
from roombaoi.protocol import drive_direct_packet, racing_speeds, tank_speeds


@pytest.fixture
def rig():
    console = io.StringIO()
    port = io.BytesIO()
    pauses = []
    robot = OpenInterface(console, port, pauses.append)
    return robot, console, port, pauses


def test_start_vac_sends_start_then_clean(rig):
    robot, console, port, pauses = rig
    robot.start_vac()
    assert port.getvalue() == bytes([128, 135])
    assert console.getvalue() == "starting roomba"
    assert pauses == [0.1, 0.1]


@pytest.mark.parametrize(
    "method, message, payload",
    [
        ("backwards", "going backwards", [255, 56, 255, 56]),
        ("forwards", "going forwards", [1, 244, 1, 244]),
        ("right", "going right", [255, 56, 0, 200]),
        ("left", "going left", [0, 200, 255, 56]),
        ("stop", "stopping motion", [0, 0, 0, 0]),
    ],
)
def test_drive_commands(rig, method, message, payload):
    robot, console, port, _ = rig
    getattr(robot, method)()
    assert port.getvalue() == bytes([128, 131, 145, *payload])
    assert console.getvalue() == message + "\r\n"


@pytest.mark.parametrize(
    "method, message, bits",
    [
        ("main_vac", "vacuum on", 12),
        ("brush", "brush on", 3),
        ("motors_off", "motor off", 138),
        ("full_vac", "full vac", 7),
        ("full_vac_off", "full vac", 0),
    ],
)
def test_motor_commands(rig, method, message, bits):
    robot, console, port, _ = rig
    getattr(robot, method)()
    assert port.getvalue() == bytes([128, 131, 138, bits])
    assert console.getvalue() == message + "\r\n"


def test_trigger_control_full_throttle(rig):
    robot, console, port, _ = rig
    robot.trigger_control(0, 1023, False)
    assert port.getvalue() == bytes([128, 131, 145, 1, 244, 0, 0])
    assert console.getvalue() == "Tank Steer\r\n"


def test_trigger_control_reverse(rig):
    robot, _, port, _ = rig
    robot.trigger_control(1023, 1023, True)
    assert port.getvalue() == drive_direct_packet(-500, -500)


def test_racing_control_is_silent_and_matches_mixer(rig):
    robot, console, port, _ = rig
    robot.racing_control(300, 800, False)
    assert port.getvalue() == drive_direct_packet(*racing_speeds(300, 800, False))
    assert console.getvalue() == ""


def test_tank_steer_reports_and_sends(rig):
    robot, console, port, _ = rig
    robot.tank_steer(512)
    assert port.getvalue() == drive_direct_packet(*tank_speeds(512))
    lines = console.getvalue().split("\r\n")
    assert lines[0] == "Speed--> Right:-150 Left:150"
    assert lines[1].startswith("Right--> High Byte:255 Low Byte:")
    assert lines[2].startswith("Left--> High Byte:0 Low Byte:150")


def test_commands_accumulate_on_port(rig):
    robot, _, port, _ = rig
    robot.forwards()
    robot.stop()
    assert port.getvalue() == drive_direct_packet(500, 500) + drive_direct_packet(0, 0)