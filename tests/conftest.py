import importlib
import os
import sys
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

catalog = importlib.import_module('pumpsel.catalog')
pump_spec = importlib.import_module('pumpsel.domain.pump_spec')
CurveRepository = importlib.import_module('pumpsel.core.curve_repository').CurveRepository
OperatingPointResolver = importlib.import_module('pumpsel.core.resolver').OperatingPointResolver
PumpSelector = importlib.import_module('pumpsel.facade.selector').PumpSelector

BC21 = "BC-21 R 1/2 (3 CV)"
TRABALHO = "Bomba Trabalho"


@pytest.fixture
def specs():
    return catalog.default_catalog()


@pytest.fixture
def small_pump():
    """Linear head curve, handy for hand-checked numbers."""
    return pump_spec.PumpSpec(
        name="Test Pump",
        rated_power_cv=2,
        rated_rpm=2900,
        rated_npsh_m=2.0,
        rated_efficiency_percent=60,
        shape=pump_spec.CurveShape(
            max_flow=20,
            bep_flow=10,
            head=pump_spec.HeadShape(shutoff_head=20, end_head=0, reference_flow=20, exponent=1.0),
            power=pump_spec.PowerShape(c0=0.5, c1=0.05),
            npsh=pump_spec.NpshShape(c0=1.0, c1=0.1),
            samples=81,
        ),
    )


@pytest.fixture
def repository(specs):
    return CurveRepository(specs)


@pytest.fixture
def resolver(repository):
    return OperatingPointResolver(repository)


@pytest.fixture
def selector():
    return PumpSelector()
