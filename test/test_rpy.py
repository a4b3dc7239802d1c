import casadi as ca
import numpy as np
import pytest
from scipy.spatial.transform import Rotation

from pyrpy import rpy_from_dcm, dcm_from_rpy
from pyrpy.rpy import extractors, composers
from pyrpy.sequence import RotationSequence
from pyrpy.util import select_by_magnitude, wrap, near_unit, eps

tol = 1e-10  # tolerance

angles = ca.DM([0.1, 0.2, 0.3])

# scipy intrinsic sequence names, angles given outermost first
scipy_seq = {
    RotationSequence.ZYX: "ZYX",
    RotationSequence.XYZ: "XYZ",
    RotationSequence.YXZ: "YXZ",
}


@pytest.mark.parametrize("seq", list(RotationSequence))
def test_compose_matches_scipy(seq):
    R = composers[seq](angles)
    R_check = ca.DM(Rotation.from_euler(scipy_seq[seq], [0.3, 0.2, 0.1]).as_matrix())
    assert ca.norm_fro(R - R_check) < tol


@pytest.mark.parametrize("seq", list(RotationSequence))
def test_from_dcm_inverts_compose(seq):
    R = composers[seq](angles)
    assert ca.norm_2(extractors[seq](R) - angles) < tol


def test_symbolic():
    R = ca.SX.sym("R", 3, 3)
    rpy = rpy_from_dcm(R, "vehicle")
    assert rpy.shape == (3, 1)
    assert ca.jacobian(rpy, R).shape == (3, 9)

    e = ca.SX.sym("e", 3)
    f = ca.Function("f", [e], [rpy_from_dcm(dcm_from_rpy(e, "camera"), "camera")])
    assert ca.norm_2(f(angles) - angles) < tol


def test_identity():
    for seq in RotationSequence:
        assert ca.norm_2(extractors[seq](ca.DM.eye(3))) == 0


def test_select_by_magnitude():
    formulas = [ca.DM(1), ca.DM(2), ca.DM(3), ca.DM(4)]
    c = [ca.DM(0.1), ca.DM(-3), ca.DM(2), ca.DM(0.5)]
    assert float(select_by_magnitude(c, formulas)) == 2
    c = [ca.DM(0.1), ca.DM(0.2), ca.DM(-0.3), ca.DM(0.4)]
    assert float(select_by_magnitude(c, formulas)) == 4
    # ties go to the first candidate
    c = [ca.DM(0.1), ca.DM(-3), ca.DM(2), ca.DM(3)]
    assert float(select_by_magnitude(c, formulas)) == 2
    c = [ca.DM(1), ca.DM(1), ca.DM(1), ca.DM(1)]
    assert float(select_by_magnitude(c, formulas)) == 1


def test_select_ignores_unused_division_by_zero():
    # the zyx R32 candidate is zero, its formula divides by zero
    R = composers[RotationSequence.ZYX](ca.DM([0, 0.2, 0.3]))
    rpy = np.array(extractors[RotationSequence.ZYX](R)).reshape(3)
    assert np.all(np.isfinite(rpy))
    assert np.linalg.norm(rpy - [0, 0.2, 0.3]) < tol


def test_wrap():
    assert float(wrap(np.pi)) == -np.pi
    assert float(wrap(-np.pi)) == -np.pi
    assert float(wrap(0.5)) == 0.5


def test_near_unit():
    assert float(near_unit(1.0)) == 1
    assert float(near_unit(-1.0)) == 1
    assert float(near_unit(1 - eps / 2)) == 1
    assert float(near_unit(1 - 2 * eps)) == 0
    assert float(near_unit(1 + eps)) == 0
    assert float(near_unit(0.5)) == 0
