from typing import Any, NamedTuple

import numpy as np


class MocapSample(NamedTuple):
    """
    One frame of raw data for a single segment, in the units the Vicon SDK returns them.
    Translation is in millimetres and rotation is a quaternion (x, y, z, w).
    """

    frame_number: int
    frame_rate: float
    subject_name: str
    segment_name: str
    translation: np.ndarray
    rotation: np.ndarray
    occluded: bool
    quality: float


class PoseRecord(NamedTuple):
    frame_number: int
    frame_id: str
    subject_name: str
    position: np.ndarray  # meters
    orientation: np.ndarray  # unit quaternion (x, y, z, w)
    stamp: Any


class QualityRecord(NamedTuple):
    frame_number: int
    frame_id: str
    subject_name: str
    quality_score: float
    frame_rate: float
    occluded: bool
    stamp: Any
