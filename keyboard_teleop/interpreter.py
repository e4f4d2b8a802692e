from keyboard_teleop.bindings import KeyKind, classify
from keyboard_teleop.relay import RelayToggle
from keyboard_teleop.state import CommandState


def status_line(state, detail):
    return '\rCurrent: speed %f\tturn %f | %s' % (state.speed, state.turn, detail)


def _ignore(*args):
    pass


class CommandLoop:
    """Turns keystrokes into velocity commands, one command per key.

    ``read_key`` returns the next key. ``publish_cmd`` receives an
    :class:`~keyboard_teleop.state.OutgoingCommand`, ``publish_relay`` the
    new relay state and ``announce`` the matching spoken line. ``display``
    receives status text.
    """

    def __init__(self, read_key, publish_cmd, publish_relay=_ignore,
                 announce=_ignore, display=_ignore, state=None, relay=None):
        self.read_key = read_key
        self.publish_cmd = publish_cmd
        self.publish_relay = publish_relay
        self.announce = announce
        self.display = display
        self.state = state if state is not None else CommandState()
        self.relay = relay if relay is not None else RelayToggle()
        self.running = True

    def step(self, key):
        """Handle one key. Returns False once the quit key is seen."""
        kind, value = classify(key)

        if kind is KeyKind.QUIT:
            self.running = False
            self.display('\n')
            return False

        if kind is KeyKind.MOVE:
            self.state.apply_movement(value)
            self.display(status_line(self.state, 'Last command: %s   ' % key))
        elif kind is KeyKind.SPEED:
            self.state.apply_speed_scale(value)
            self.display(status_line(self.state, 'Last command: %s   ' % key))
        elif kind is KeyKind.RELAY:
            engaged, message = self.relay.trigger()
            self.publish_relay(engaged)
            self.announce(message)
        else:
            self.state.stop()
            self.display(status_line(self.state, 'Invalid command! %s' % key))

        self.publish_cmd(self.state.snapshot())
        return True

    def run(self):
        self.display(status_line(self.state, 'Awaiting command...\r'))
        while self.running:
            self.step(self.read_key())
