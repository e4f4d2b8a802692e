"""Key bindings for the keyboard teleop.

Movement keys map to a direction ``(x, y, z, th)`` and speed keys map to
``(linear, angular)`` multipliers.
"""

import enum
from collections import namedtuple
from types import MappingProxyType

VelocityIntent = namedtuple('VelocityIntent', ['x', 'y', 'z', 'th'])
SpeedScale = namedtuple('SpeedScale', ['linear', 'angular'])

STOP = VelocityIntent(0, 0, 0, 0)

RELAY_KEY = 'r'
QUIT_KEY = '\x03'  # CTRL-C, delivered as data in raw mode

MOVE_BINDINGS = MappingProxyType({
    'i': VelocityIntent(1, 0, 0, 0),
    'o': VelocityIntent(1, 0, 0, -1),
    'j': VelocityIntent(0, 0, 0, 1),
    'l': VelocityIntent(0, 0, 0, -1),
    'u': VelocityIntent(1, 0, 0, 1),
    ',': VelocityIntent(-1, 0, 0, 0),
    '.': VelocityIntent(-1, 0, 0, 1),
    'm': VelocityIntent(-1, 0, 0, -1),
    # holonomic (shift held)
    'O': VelocityIntent(1, -1, 0, 0),
    'I': VelocityIntent(1, 0, 0, 0),
    'J': VelocityIntent(0, 1, 0, 0),
    'L': VelocityIntent(0, -1, 0, 0),
    'U': VelocityIntent(1, 1, 0, 0),
    '<': VelocityIntent(-1, 0, 0, 0),
    '>': VelocityIntent(-1, -1, 0, 0),
    'M': VelocityIntent(-1, 1, 0, 0),
    't': VelocityIntent(0, 0, 1, 0),
    'b': VelocityIntent(0, 0, -1, 0),
    'k': STOP,
    'K': STOP,
})

SPEED_BINDINGS = MappingProxyType({
    'q': SpeedScale(1.1, 1.1),
    'z': SpeedScale(0.9, 0.9),
    'w': SpeedScale(1.1, 1.0),
    'x': SpeedScale(0.9, 1.0),
    'e': SpeedScale(1.0, 1.1),
    'c': SpeedScale(1.0, 0.9),
})


class KeyKind(enum.Enum):
    MOVE = 'move'
    SPEED = 'speed'
    RELAY = 'relay'
    QUIT = 'quit'
    UNKNOWN = 'unknown'


def classify(key):
    """Return ``(kind, value)`` for a single key.

    Movement bindings win over speed bindings. ``value`` is the bound
    intent or scale, or ``None`` for the other kinds.
    """
    if key in MOVE_BINDINGS:
        return KeyKind.MOVE, MOVE_BINDINGS[key]
    if key in SPEED_BINDINGS:
        return KeyKind.SPEED, SPEED_BINDINGS[key]
    if key == RELAY_KEY:
        return KeyKind.RELAY, None
    if key == QUIT_KEY:
        return KeyKind.QUIT, None
    return KeyKind.UNKNOWN, None
