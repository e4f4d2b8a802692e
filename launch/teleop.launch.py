from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration
from launch_ros.actions import Node


def generate_launch_description():
    return LaunchDescription([
        DeclareLaunchArgument('cmd_vel_topic', default_value='/cmd_vel'),
        DeclareLaunchArgument('relay_topic', default_value='/motor_relay'),
        DeclareLaunchArgument('speak_topic', default_value='/espeak_node/speak_line'),
        Node(
            package='keyboard_teleop',
            executable='teleop_keyboard',
            name='teleop_keyboard',
            output='screen',
            # needs its own controlling terminal
            prefix='xterm -e',
            parameters=[{
                'cmd_vel_topic': LaunchConfiguration('cmd_vel_topic'),
                'relay_topic': LaunchConfiguration('relay_topic'),
                'speak_topic': LaunchConfiguration('speak_topic'),
            }],
        )
    ])
