from datetime import datetime

def fmt_number(v: float) -> str:
    # 34.0 -> "34", 34.5 -> "34.5"
    f = float(v)
    if f.is_integer():
        return str(int(f))
    return repr(f)

def fmt_naira(v: float) -> str:
    return f"₦{v:,.0f}" if float(v).is_integer() else f"₦{v:,.2f}"

def fmt_dt(dt: datetime | None) -> str | None:
    return dt.isoformat() if dt else None
