from setuptools import setup

package_name = "vicon_mocap"

setup(
    name=package_name,
    version="0.1.0",
    packages=[package_name],
    data_files=[
        ("share/ament_index/resource_index/packages", ["resource/" + package_name]),
        ("share/" + package_name, ["package.xml"]),
        ("share/" + package_name + "/launch", ["launch/vicon_mocap_launch.py"]),
        ("share/" + package_name + "/config", ["config/vicon_mocap.yaml"]),
    ],
    install_requires=["setuptools", "numpy"],
    zip_safe=True,
    maintainer="jetson",
    maintainer_email="jetson@todo.todo",
    description="Publishes Vicon DataStream segment pose and quality score as ROS 2 topics",
    license="GPL-3.0-or-later",
    tests_require=["pytest"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "vicon_mocap = vicon_mocap.mocap_node:main",
        ],
    },
)
