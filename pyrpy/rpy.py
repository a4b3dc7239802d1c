"""
A module for roll-pitch-yaw angles.

This is a representation of SO(3). There are 3 parameters (a1, a2, a3) and it is singular
at a2 = +/- pi/2, where the first and third rotation axes line up and only their combination
is observable. At the singularity a1 is set to zero and a3 carries the whole rotation.

The decomposition is built symbolically and compiled into one casadi.Function per sequence,
so the same expression serves numeric evaluation, batch mapping and code generation.
"""
import casadi as ca

from .sequence import RotationSequence, resolve
from .util import near_unit, rot_x, rot_y, rot_z, select_by_magnitude, wrap

Expr = ca.SX


def _xyz(R):
    # singularity, when |R13| == 1
    s3 = ca.if_else(
        R[0, 2] > 0,
        ca.atan2(R[2, 1], R[1, 1]),  # R+Y
        -ca.atan2(R[1, 0], R[2, 0]),  # R-Y
    )
    s2 = ca.asin(R[0, 2])

    a1 = -ca.atan2(R[0, 1], R[0, 0])
    a3 = -ca.atan2(R[1, 2], R[2, 2])
    a2 = select_by_magnitude(
        [R[0, 0], R[0, 1], R[1, 2], R[2, 2]],
        [
            ca.atan(R[0, 2] * ca.cos(a1) / R[0, 0]),
            -ca.atan(R[0, 2] * ca.sin(a1) / R[0, 1]),
            -ca.atan(R[0, 2] * ca.sin(a3) / R[1, 2]),
            ca.atan(R[0, 2] * ca.cos(a3) / R[2, 2]),
        ],
    )
    return R[0, 2], (s2, s3), (a1, a2, a3)


def _zyx(R):
    # singularity, when |R31| == 1
    s3 = ca.if_else(
        R[2, 0] < 0,
        -ca.atan2(R[0, 1], R[0, 2]),  # R-Y
        ca.atan2(-R[0, 1], -R[0, 2]),  # R+Y
    )
    s2 = -ca.asin(R[2, 0])

    a1 = ca.atan2(R[2, 1], R[2, 2])  # R
    a3 = ca.atan2(R[1, 0], R[0, 0])  # Y
    a2 = select_by_magnitude(
        [R[0, 0], R[1, 0], R[2, 1], R[2, 2]],
        [
            -ca.atan(R[2, 0] * ca.cos(a3) / R[0, 0]),
            -ca.atan(R[2, 0] * ca.sin(a3) / R[1, 0]),
            -ca.atan(R[2, 0] * ca.sin(a1) / R[2, 1]),
            -ca.atan(R[2, 0] * ca.cos(a1) / R[2, 2]),
        ],
    )
    return R[2, 0], (s2, s3), (a1, a2, a3)


def _yxz(R):
    # singularity, when |R23| == 1
    s3 = ca.if_else(
        R[1, 2] < 0,
        -ca.atan2(R[2, 0], R[0, 0]),  # R-Y
        ca.atan2(-R[2, 0], -R[2, 1]),  # R+Y
    )
    s2 = -ca.asin(R[1, 2])  # P

    a1 = ca.atan2(R[1, 0], R[1, 1])
    a3 = ca.atan2(R[0, 2], R[2, 2])
    a2 = select_by_magnitude(
        [R[1, 0], R[1, 1], R[0, 2], R[2, 2]],
        [
            -ca.atan(R[1, 2] * ca.sin(a1) / R[1, 0]),
            -ca.atan(R[1, 2] * ca.cos(a1) / R[1, 1]),
            -ca.atan(R[1, 2] * ca.sin(a3) / R[0, 2]),
            -ca.atan(R[1, 2] * ca.cos(a3) / R[2, 2]),
        ],
    )
    return R[1, 2], (s2, s3), (a1, a2, a3)


_branches = {
    RotationSequence.XYZ: _xyz,
    RotationSequence.ZYX: _zyx,
    RotationSequence.YXZ: _yxz,
}


def rpy_from_dcm(R, sequence=None) -> Expr:
    """
    Roll-pitch-yaw angles of a rotation matrix, as a symbolic expression.
    :param R: The rotation matrix, 3x3 SX
    :param sequence: RotationSequence, name or alias, zyx by default
    :return: The angles (a1, a2, a3), 3x1 SX, in radians
    """
    assert R.shape == (3, 3)
    critical, (s2, s3), (a1, a2, a3) = _branches[resolve(sequence)](R)
    singular = near_unit(critical)
    rpy = Expr(3, 1)
    rpy[0] = ca.if_else(singular, 0, wrap(a1))
    rpy[1] = ca.if_else(singular, s2, a2)
    rpy[2] = wrap(ca.if_else(singular, s3, a3))
    return rpy


def dcm_from_rpy(rpy, sequence=None) -> Expr:
    """
    Rotation matrix from roll-pitch-yaw angles, as a symbolic expression.
    :param rpy: The angles (a1, a2, a3), 3x1 SX, in radians
    :param sequence: RotationSequence, name or alias, zyx by default
    :return: The rotation matrix, 3x3 SX
    """
    assert rpy.shape == (3, 1) or rpy.shape == (3,)
    seq = resolve(sequence)
    if seq is RotationSequence.ZYX:
        return rot_z(rpy[2]) @ rot_y(rpy[1]) @ rot_x(rpy[0])
    elif seq is RotationSequence.XYZ:
        return rot_x(rpy[2]) @ rot_y(rpy[1]) @ rot_z(rpy[0])
    else:
        return rot_y(rpy[2]) @ rot_x(rpy[1]) @ rot_z(rpy[0])


def _compile():
    R = Expr.sym("R", 3, 3)
    rpy = Expr.sym("rpy", 3, 1)
    to_rpy = {}
    from_rpy = {}
    for seq in RotationSequence:
        to_rpy[seq] = ca.Function(
            "rpy_" + seq.value, [R], [rpy_from_dcm(R, seq)], ["R"], ["rpy"]
        )
        from_rpy[seq] = ca.Function(
            "dcm_" + seq.value, [rpy], [dcm_from_rpy(rpy, seq)], ["rpy"], ["R"]
        )
    return to_rpy, from_rpy


# compiled functions, keyed by RotationSequence
extractors, composers = _compile()
