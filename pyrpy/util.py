import casadi as ca
import numpy as np

# machine epsilon, the exact gimbal lock threshold
eps = float(np.finfo(float).eps)

# default tolerance for orthonormality checks
tol = 100 * eps

x = ca.SX.sym("x")

# map +pi to -pi, so atan2 results land in [-pi, pi)
wrap = ca.Function("wrap", [x], [ca.if_else(x >= ca.pi, x - 2 * ca.pi, x)])

# 1 when |x| is within machine epsilon of 1, else 0
near_unit = ca.Function(
    "near_unit", [x], [ca.fabs(ca.fabs(x) - 1) < eps]
)

# delete temp variable used to create functions
del x


def select_by_magnitude(candidates, formulas):
    """
    Pick the formula paired with the candidate of largest absolute value.

    The selection is built from if_else so it stays a single symbolic
    expression. Ties resolve to the earliest candidate.

    @candidates: list of scalar expressions, the denominators
    @formulas: list of scalar expressions, one per candidate
    @return: the selected formula
    """
    assert len(candidates) == len(formulas)
    best = formulas[0]
    best_mag = ca.fabs(candidates[0])
    for c, f in zip(candidates[1:], formulas[1:]):
        larger = ca.fabs(c) > best_mag
        best = ca.if_else(larger, f, best)
        best_mag = ca.if_else(larger, ca.fabs(c), best_mag)
    return best


def rot_x(a):
    """Elementary rotation about the x axis"""
    c = ca.cos(a)
    s = ca.sin(a)
    R = ca.SX.eye(3)
    R[1, 1] = c
    R[1, 2] = -s
    R[2, 1] = s
    R[2, 2] = c
    return R


def rot_y(a):
    """Elementary rotation about the y axis"""
    c = ca.cos(a)
    s = ca.sin(a)
    R = ca.SX.eye(3)
    R[0, 0] = c
    R[0, 2] = s
    R[2, 0] = -s
    R[2, 2] = c
    return R


def rot_z(a):
    """Elementary rotation about the z axis"""
    c = ca.cos(a)
    s = ca.sin(a)
    R = ca.SX.eye(3)
    R[0, 0] = c
    R[0, 1] = -s
    R[1, 0] = s
    R[1, 1] = c
    return R
