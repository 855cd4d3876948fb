import pytest

from inflation_dash.errors import InvalidInputError
from inflation_dash.services.purchasing_power import purchasing_power_loss, real_salary


def test_real_salary_default_rate():
    assert real_salary(133000) == pytest.approx(100000)
    assert purchasing_power_loss(133000) == pytest.approx(33000)


def test_zero_rate_keeps_value():
    assert real_salary(150000, 0.0) == 150000


def test_invalid_inputs():
    with pytest.raises(InvalidInputError):
        real_salary(-1)
    with pytest.raises(InvalidInputError):
        real_salary(1000, -1)
