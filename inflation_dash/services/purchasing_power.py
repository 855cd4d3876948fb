from inflation_dash.errors import InvalidInputError

DEFAULT_INFLATION_RATE = 0.33
LOCATIONS: tuple[str, ...] = ("Lagos", "Abuja", "Port Harcourt", "Kano", "Ibadan", "Enugu")

def real_salary(salary: float, inflation_rate: float = DEFAULT_INFLATION_RATE) -> float:
    """Nominal salary deflated by one year of inflation: salary / (1 + rate)."""
    if salary < 0:
        raise InvalidInputError("salary must be >= 0")
    if inflation_rate <= -1:
        raise InvalidInputError("inflation_rate must be > -1")
    return salary / (1 + inflation_rate)

def purchasing_power_loss(salary: float, inflation_rate: float = DEFAULT_INFLATION_RATE) -> float:
    return salary - real_salary(salary, inflation_rate)
