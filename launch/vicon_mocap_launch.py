import os

from ament_index_python.packages import get_package_share_directory
from launch_ros.actions import Node

from launch import LaunchDescription


def generate_launch_description():
    params = os.path.join(get_package_share_directory("vicon_mocap"), "config", "vicon_mocap.yaml")
    return LaunchDescription(
        [
            Node(
                package="vicon_mocap",
                executable="vicon_mocap",
                name="vicon_mocap",
                parameters=[params],
                output="screen",
            ),
        ]
    )
