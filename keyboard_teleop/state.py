import math
from collections import namedtuple

from keyboard_teleop.bindings import STOP, VelocityIntent

OutgoingCommand = namedtuple(
    'OutgoingCommand',
    ['linear_x', 'linear_y', 'linear_z', 'angular_x', 'angular_y', 'angular_z'])

DEFAULT_SPEED = 0.5  # m/s
DEFAULT_TURN = 1.0  # rad/s


class CommandState:
    """Current speeds and the last movement direction."""

    def __init__(self, speed=DEFAULT_SPEED, turn=DEFAULT_TURN):
        if not (0 < speed < math.inf and 0 < turn < math.inf):
            raise ValueError(
                'speed and turn must be positive and finite, got speed=%r turn=%r' % (speed, turn))
        self.speed = float(speed)
        self.turn = float(turn)
        self.intent = STOP

    def apply_movement(self, intent):
        self.intent = VelocityIntent(*intent)

    def apply_speed_scale(self, scale):
        self.speed *= scale.linear
        self.turn *= scale.angular

    def stop(self):
        self.intent = STOP

    def snapshot(self):
        x, y, z, th = self.intent
        return OutgoingCommand(
            linear_x=float(x * self.speed),
            linear_y=float(y * self.speed),
            linear_z=float(z * self.speed),
            angular_x=0.0,
            angular_y=0.0,
            angular_z=float(th * self.turn),
        )
