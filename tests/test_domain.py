import importlib
from dataclasses import FrozenInstanceError, replace

import numpy as np
import pytest

CurveSet = importlib.import_module('pumpsel.domain.curve_set').CurveSet
pump_spec = importlib.import_module('pumpsel.domain.pump_spec')
curve_shapes = importlib.import_module('pumpsel.core.curve_shapes')
errors = importlib.import_module('pumpsel.core.errors')


def _curves(**overrides):
    data = dict(
        pump_name="p",
        flow=(0.0, 1.0, 2.0),
        head=(10.0, 9.0, 7.0),
        power=(1.0, 1.5, 2.0),
        npsh=(1.0, 1.1, 1.3),
        efficiency=(0.0, 40.0, 30.0),
    )
    data.update(overrides)
    return CurveSet(**data)


def test_curve_set_accepts_valid_data():
    curves = _curves()
    assert len(curves) == 3
    assert curves.bep_flow == 1.0
    assert curves.max_flow == 2.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"head": (10.0, 9.0)},
        {"flow": (0.0, 2.0, 1.0)},
        {"flow": (0.0, 1.0, 1.0)},
        {"flow": (0.5, 1.0, 2.0)},
        {"efficiency": (5.0, 40.0, 30.0)},
        {"flow": (), "head": (), "power": (), "npsh": (), "efficiency": ()},
    ],
)
def test_curve_set_invariants(overrides):
    with pytest.raises(ValueError):
        _curves(**overrides)


def test_curve_set_is_read_only():
    curves = _curves()
    with pytest.raises(FrozenInstanceError):
        curves.head = (1.0, 2.0, 3.0)
    with pytest.raises(TypeError):
        curves.head[0] = 5.0


def test_spec_validation(specs):
    spec = specs[0]
    with pytest.raises(ValueError):
        replace(spec, rated_efficiency_percent=0)
    with pytest.raises(ValueError):
        replace(spec, name="")
    with pytest.raises(ValueError):
        replace(spec.shape, samples=10)
    with pytest.raises(ValueError):
        pump_spec.HeadShape(shutoff_head=10, end_head=20, reference_flow=5)
    with pytest.raises(ValueError):
        pump_spec.ValidationPolicy(head_tolerance_min=-1)


def test_non_finite_curves_are_reported(specs):
    spec = specs[0]
    broken = replace(spec, shape=replace(spec.shape, power=pump_spec.PowerShape(c0=float("inf"), c1=0.1)))
    with pytest.raises(errors.CurveGenerationError):
        curve_shapes.build_curve_set(broken)


def test_efficiency_shape():
    q = np.array([0.0, 12.5, 25.0, 37.5, 60.0])
    eff = curve_shapes.efficiency_curve(q, 25.0, 57.05)
    assert eff[0] == 0
    assert eff[2] == pytest.approx(57.05)
    assert eff[1] == pytest.approx(eff[3])
    assert eff[4] == 0
