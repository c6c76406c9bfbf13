import rclpy
from diagnostic_msgs.msg import DiagnosticArray, DiagnosticStatus, KeyValue
from geometry_msgs.msg import PoseStamped
from rclpy.logging import get_logger
from rclpy.node import Node

from vicon_mocap.bridge import MocapBridge
from vicon_mocap.records import PoseRecord, QualityRecord
from vicon_mocap.vicon_client import ViconClient


class ViconMocapNode(Node):
    """
    This node streams one Vicon subject from the DataStream server and publishes its pose and tracking quality.
    The pose goes out as a PoseStamped in meters; the quality score and Vicon frame number go out as a DiagnosticArray
    carrying the same stamp.
    """

    def __init__(self, client=None):
        super().__init__("vicon_mocap")

        self.declare_parameter("host", "192.168.1.2:801")
        self.declare_parameter("subject_name", "")
        self.declare_parameter("segment_name", "")
        self.declare_parameter("stream_mode", "ServerPush")
        self.declare_parameter("axis_mapping", ["Forward", "Left", "Up"])
        self.declare_parameter("pose_topic", "mocap/posestamped")
        self.declare_parameter("quality_topic", "mocap/qualityscore")
        self.declare_parameter("queue_depth", 1000)

        self.host = self.get_parameter("host").value
        queue_depth = self.get_parameter("queue_depth").value

        self.pose_pub = self.create_publisher(PoseStamped, self.get_parameter("pose_topic").value, queue_depth)
        self.quality_pub = self.create_publisher(DiagnosticArray, self.get_parameter("quality_topic").value, queue_depth)

        if client is None:
            client = ViconClient(
                self.host,
                self.get_logger(),
                stream_mode=self.get_parameter("stream_mode").value,
                axis_mapping=list(self.get_parameter("axis_mapping").value),
            )
        self.client = client
        self.bridge = MocapBridge(
            self.client,
            self.publish_pose,
            self.publish_quality,
            self.get_logger(),
            subject_name=self.get_parameter("subject_name").value,
            segment_name=self.get_parameter("segment_name").value,
            now=lambda: self.get_clock().now(),
        )

    def to_pose_msg(self, record: PoseRecord) -> PoseStamped:
        msg = PoseStamped()
        msg.header.stamp = record.stamp.to_msg()
        msg.header.frame_id = record.frame_id

        msg.pose.position.x = float(record.position[0])
        msg.pose.position.y = float(record.position[1])
        msg.pose.position.z = float(record.position[2])

        msg.pose.orientation.x = float(record.orientation[0])
        msg.pose.orientation.y = float(record.orientation[1])
        msg.pose.orientation.z = float(record.orientation[2])
        msg.pose.orientation.w = float(record.orientation[3])
        return msg

    def to_quality_msg(self, record: QualityRecord) -> DiagnosticArray:
        msg = DiagnosticArray()
        msg.header.stamp = record.stamp.to_msg()
        msg.header.frame_id = record.frame_id

        status = DiagnosticStatus()
        status.name = "vicon_mocap/{}".format(record.subject_name)
        status.hardware_id = self.host
        if record.occluded:
            status.level = DiagnosticStatus.WARN
            status.message = "Segment occluded"
        else:
            status.level = DiagnosticStatus.OK
            status.message = "Tracking"
        status.values = [
            KeyValue(key="frame_number", value=str(record.frame_number)),
            KeyValue(key="quality_score", value=repr(float(record.quality_score))),
            KeyValue(key="frame_rate", value=repr(float(record.frame_rate))),
        ]
        msg.status = [status]
        return msg

    def publish_pose(self, record: PoseRecord):
        self.pose_pub.publish(self.to_pose_msg(record))

    def publish_quality(self, record: QualityRecord):
        self.quality_pub.publish(self.to_quality_msg(record))

    def run(self) -> bool:
        return self.bridge.run(rclpy.ok, lambda: rclpy.spin_once(self, timeout_sec=0.0))


def main(args=None):
    rclpy.init(args=args)
    try:
        node = ViconMocapNode()
    except ValueError as e:
        get_logger("vicon_mocap").error("Invalid parameter: {}".format(e))
        rclpy.shutdown()
        return

    try:
        node.run()
    except KeyboardInterrupt:
        pass
    finally:
        node.client.disconnect()
        node.destroy_node()
        rclpy.shutdown()


if __name__ == "__main__":
    main()
