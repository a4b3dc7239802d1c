"""
Numeric roll-pitch-yaw extraction for rotation matrices and homogeneous transforms.
"""
import numpy as np

from .check import is_homog, is_rot
from .rpy import composers, extractors
from .sequence import InvalidArgument, resolve

default_options = {
    "degrees": False,
    "sequence": "zyx",
    "check": False,
    "parallelization": "serial",
}

# casadi Function.map modes
map_modes = ("serial", "unroll", "inline", "thread", "openmp")


def init_options(options=None):
    p = dict(default_options)
    if options is None:
        return p
    for k, v in options.items():
        if k not in p.keys():
            raise KeyError(k)
        p[k] = v
    check_parallelization(p["parallelization"])
    return p


def check_parallelization(parallelization):
    if parallelization not in map_modes:
        raise InvalidArgument(
            "unknown parallelization {!r}, valid: {:s}".format(
                parallelization, ", ".join(map_modes)
            )
        )


def as_array(a):
    try:
        return np.asarray(a, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidArgument("argument must be a 3x3 or 4x4 matrix") from e


def rotation_block(R, check=False):
    """
    The 3x3 rotation of a rotation matrix or homogeneous transform.
    :param R: 3x3 rotation matrix or 4x4 homogeneous transform
    :param check: Reject matrices that are not valid rotations or transforms
    :return: The rotation matrix, as a float array
    """
    R = as_array(R)
    if is_rot(R):
        if check and not is_rot(R, check=True):
            raise InvalidArgument("matrix is not a valid rotation matrix")
        return R
    if is_homog(R):
        if check and not is_homog(R, check=True):
            raise InvalidArgument("matrix is not a valid homogeneous transform")
        return R[:3, :3]
    raise InvalidArgument(
        "argument must be a 3x3 or 4x4 matrix, got shape {:s}".format(str(R.shape))
    )


def dcm_to_rpy(R, sequence=None, degrees=False, check=False):
    """
    Roll-pitch-yaw angles of a single rotation matrix or homogeneous transform.

    The translation of a homogeneous transform is ignored.

    :param R: 3x3 rotation matrix or 4x4 homogeneous transform
    :param sequence: zyx/vehicle (default), xyz/arm or yxz/camera
    :param degrees: Return degrees instead of radians
    :param check: Reject matrices that are not valid rotations or transforms
    :return: The angles (a1, a2, a3), shape (3,)
    """
    f = extractors[resolve(sequence)]
    rpy = np.array(f(rotation_block(R, check))).reshape(3)
    if degrees:
        rpy = rpy * 180 / np.pi
    return rpy


def dcm_to_rpy_batch(Rs, sequence=None, degrees=False, check=False, parallelization="serial"):
    """
    Roll-pitch-yaw angles of a sequence of rotation matrices or homogeneous transforms.

    Each matrix is decomposed independently, row i of the result belongs to matrix i.

    :param Rs: Iterable of 3x3/4x4 matrices, or an array of shape (K, 3, 3) or (K, 4, 4)
    :param sequence: zyx/vehicle (default), xyz/arm or yxz/camera
    :param degrees: Return degrees instead of radians
    :param check: Reject matrices that are not valid rotations or transforms
    :param parallelization: casadi map mode, e.g. serial or thread
    :return: The angles, shape (K, 3)
    """
    check_parallelization(parallelization)
    blocks = [rotation_block(R, check) for R in Rs]
    if len(blocks) == 0:
        return np.zeros((0, 3))
    f = extractors[resolve(sequence)].map(len(blocks), parallelization)
    rpy = np.array(f(np.hstack(blocks))).T
    if degrees:
        rpy = rpy * 180 / np.pi
    return rpy


def rpy_to_dcm(rpy, sequence=None, degrees=False):
    """
    Rotation matrix from roll-pitch-yaw angles, the inverse of dcm_to_rpy.
    :param rpy: The angles (a1, a2, a3)
    :param sequence: zyx/vehicle (default), xyz/arm or yxz/camera
    :param degrees: The angles are in degrees instead of radians
    :return: The rotation matrix, shape (3, 3)
    """
    rpy = np.asarray(rpy, dtype=float).reshape(-1)
    if rpy.shape != (3,):
        raise InvalidArgument("expected 3 angles, got {:d}".format(rpy.shape[0]))
    if degrees:
        rpy = rpy * np.pi / 180
    return np.array(composers[resolve(sequence)](rpy))


def rpy_to_tr(rpy, sequence=None, degrees=False):
    """
    Homogeneous transform with zero translation from roll-pitch-yaw angles.
    """
    T = np.eye(4)
    T[:3, :3] = rpy_to_dcm(rpy, sequence, degrees)
    return T


def rotation_to_rpy(matrix, options=None):
    """
    Roll-pitch-yaw angles of a rotation matrix, homogeneous transform, or a stack of either.

    A 3x3xK or 4x4xK input is a sequence of K matrices along the last axis and gives
    K rows of angles, one per matrix.

    :param matrix: 3x3, 4x4, 3x3xK or 4x4xK array
    :param options: dict, see default_options
    :return: (angles, sequence), angles of shape (3,) or (K, 3), and the canonical
        name of the sequence used
    """
    p = init_options(options)
    seq = resolve(p["sequence"])
    matrix = as_array(matrix)
    if matrix.ndim == 3:
        rpy = dcm_to_rpy_batch(
            np.moveaxis(matrix, -1, 0),
            seq,
            degrees=p["degrees"],
            check=p["check"],
            parallelization=p["parallelization"],
        )
    else:
        rpy = dcm_to_rpy(matrix, seq, degrees=p["degrees"], check=p["check"])
    return rpy, seq.value
