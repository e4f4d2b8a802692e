import pytest

from keyboard_teleop.interpreter import CommandLoop, status_line
from keyboard_teleop.state import CommandState


class Recorder:

    def __init__(self, keys=()):
        self.keys = list(keys)
        self.commands = []
        self.relay = []
        self.spoken = []
        self.shown = []

    def read_key(self):
        return self.keys.pop(0)

    def loop(self, **kwargs):
        return CommandLoop(
            read_key=self.read_key,
            publish_cmd=self.commands.append,
            publish_relay=self.relay.append,
            announce=self.spoken.append,
            display=self.shown.append,
            **kwargs)


def test_movement_key_publishes():
    rec = Recorder()
    loop = rec.loop()
    assert loop.step('i') is True
    assert rec.commands == [(0.5, 0.0, 0.0, 0.0, 0.0, 0.0)]
    assert rec.shown[-1] == '\rCurrent: speed 0.500000\tturn 1.000000 | Last command: i   '


def test_speed_key_keeps_direction():
    rec = Recorder()
    loop = rec.loop()
    loop.step('l')
    loop.step('e')
    assert loop.state.intent == (0, 0, 0, -1)
    assert rec.commands[-1].angular_z == pytest.approx(-1.1)
    assert 'turn 1.100000' in rec.shown[-1]


def test_relay_key_publishes_toggle_and_command():
    rec = Recorder()
    loop = rec.loop()
    loop.step('i')
    loop.step('r')
    loop.step('r')
    assert rec.relay == [True, False]
    assert rec.spoken == ['motors engaged', 'motors disengaged']
    assert loop.state.intent == (1, 0, 0, 0)
    assert len(rec.commands) == 3
    assert rec.commands[-1].linear_x == 0.5


@pytest.mark.parametrize('key', ['1', 'Z', '\x1b', ' '])
def test_unknown_key_stops(key):
    rec = Recorder()
    loop = rec.loop()
    loop.step('u')
    loop.step('q')
    assert loop.step(key) is True
    assert loop.state.intent == (0, 0, 0, 0)
    assert loop.state.speed == pytest.approx(0.55)
    assert rec.commands[-1] == (0.0,) * 6
    assert rec.shown[-1].endswith('Invalid command! ' + key)


def test_quit_key_emits_nothing():
    rec = Recorder()
    loop = rec.loop()
    loop.step('o')
    assert loop.step('\x03') is False
    assert loop.running is False
    assert len(rec.commands) == 1
    assert loop.state.intent == (1, 0, 0, -1)
    assert rec.relay == []


def test_run_scenario():
    rec = Recorder(['i', 'q', 'r', '1', '\x03', 'i'])
    loop = rec.loop()
    loop.run()

    assert rec.keys == ['i']
    assert rec.shown[0] == '\rCurrent: speed 0.500000\tturn 1.000000 | Awaiting command...\r'
    assert rec.shown[-1] == '\n'
    assert len(rec.commands) == 4
    assert rec.commands[0] == (0.5, 0.0, 0.0, 0.0, 0.0, 0.0)
    assert rec.commands[1].linear_x == pytest.approx(0.55)
    assert rec.commands[2].linear_x == pytest.approx(0.55)
    assert rec.commands[3] == (0.0,) * 6
    assert loop.state.speed == pytest.approx(0.55)
    assert loop.state.turn == pytest.approx(1.1)
    assert rec.relay == [True]
    assert rec.spoken == ['motors engaged']


def test_injected_state():
    rec = Recorder()
    loop = rec.loop(state=CommandState(0.2, 0.8))
    loop.step('j')
    assert rec.commands[-1].angular_z == 0.8


def test_read_error_propagates():
    def broken():
        raise EOFError('terminal closed')

    loop = CommandLoop(read_key=broken, publish_cmd=lambda cmd: None)
    with pytest.raises(EOFError):
        loop.run()


def test_status_line_format():
    assert status_line(CommandState(1.0, 2.0), 'x') == \
        '\rCurrent: speed 1.000000\tturn 2.000000 | x'
