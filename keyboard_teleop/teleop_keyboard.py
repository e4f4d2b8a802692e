#!/usr/bin/env python3

import sys
import termios

import rclpy
from rclpy.logging import get_logger
from rclpy.node import Node
from geometry_msgs.msg import Twist
from std_msgs.msg import Bool, String

from keyboard_teleop.interpreter import CommandLoop
from keyboard_teleop.relay import RelayToggle
from keyboard_teleop.state import DEFAULT_SPEED, DEFAULT_TURN, CommandState
from keyboard_teleop.terminal import read_key

HELP_MSG = """

Reading from the keyboard and Publishing to Twist!
---------------------------
Moving around:
   u    i    o
   j    k    l
   m    ,    .

For Holonomic mode (strafing), hold down the shift key:
---------------------------
   U    I    O
   J    K    L
   M    <    >

t : up (+z)
b : down (-z)

anything else : stop

q/z : increase/decrease max speeds by 10%
w/x : increase/decrease only linear speed by 10%
e/c : increase/decrease only angular speed by 10%

r : toggle motor relay

CTRL-C to quit

"""


def to_twist(command):
    twist = Twist()
    twist.linear.x = command.linear_x
    twist.linear.y = command.linear_y
    twist.linear.z = command.linear_z
    twist.angular.x = command.angular_x
    twist.angular.y = command.angular_y
    twist.angular.z = command.angular_z
    return twist


class TeleopKeyboard(Node):

    def __init__(self):
        super().__init__('teleop_keyboard')
        self.declare_parameter('cmd_vel_topic', '/cmd_vel')
        self.declare_parameter('relay_topic', '/motor_relay')
        self.declare_parameter('speak_topic', '/espeak_node/speak_line')
        self.declare_parameter('speed', DEFAULT_SPEED)
        self.declare_parameter('turn', DEFAULT_TURN)

        try:
            state = CommandState(
                float(self.get_parameter('speed').value),
                float(self.get_parameter('turn').value))
        except ValueError:
            self.destroy_node()
            raise

        cmd_topic = self.get_parameter('cmd_vel_topic').value
        relay_topic = self.get_parameter('relay_topic').value
        speak_topic = self.get_parameter('speak_topic').value

        self.publisher_ = self.create_publisher(Twist, cmd_topic, 3)
        self.relay_pub = self.create_publisher(Bool, relay_topic, 10)
        self.speak_pub = self.create_publisher(String, speak_topic, 10)

        self.loop = CommandLoop(
            read_key=read_key,
            publish_cmd=self.publish_cmd,
            publish_relay=self.publish_relay,
            announce=self.announce,
            display=self.display,
            state=state,
            relay=RelayToggle(),
        )

        self.get_logger().info(
            'Publishing Twist on %s, relay on %s, speech on %s'
            % (cmd_topic, relay_topic, speak_topic))
        self.get_logger().info(HELP_MSG)

    def publish_cmd(self, command):
        self.publisher_.publish(to_twist(command))
        rclpy.spin_once(self, timeout_sec=0)

    def publish_relay(self, engaged):
        msg = Bool()
        msg.data = engaged
        self.relay_pub.publish(msg)

    def announce(self, text):
        msg = String()
        msg.data = text
        self.speak_pub.publish(msg)
        self.get_logger().info(text)

    def display(self, text):
        sys.stdout.write(text)
        sys.stdout.flush()

    def run(self):
        try:
            self.loop.run()
        except KeyboardInterrupt:
            pass
        self.get_logger().info('shutting down ROS node')


def main(args=None):
    rclpy.init(args=args)
    try:
        node = TeleopKeyboard()
    except ValueError as e:
        get_logger('teleop_keyboard').error('Bad parameter: %s' % e)
        rclpy.shutdown()
        return 1

    status = 0
    try:
        node.run()
    except (termios.error, EOFError) as e:
        node.get_logger().error('Cannot read from terminal: %s' % (e,))
        status = 1
    finally:
        node.destroy_node()
        rclpy.shutdown()
    return status


if __name__ == '__main__':
    sys.exit(main())
