import numpy as np

IDENTITY_QUATERNION = np.array([0.0, 0.0, 0.0, 1.0])


### Math Utils
def mm_to_m(translation) -> np.ndarray:
    """
    Convert a Vicon translation in millimetres to meters.
    """
    return np.asarray(translation, dtype=float) / 1000.0


def normalize_quaternion(q) -> np.ndarray:
    """
    Scale a quaternion [x, y, z, w] to unit length.
    A zero quaternion (what the SDK reports for an occluded segment) becomes the identity.
    """
    q = np.asarray(q, dtype=float)
    norm = np.linalg.norm(q)
    if norm == 0.0:
        return IDENTITY_QUATERNION.copy()
    return q / norm

