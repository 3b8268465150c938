import attrs


@attrs.frozen
class MonthlySalesRow:
    """Confirmed tickets of one event within one calendar month (YYYY-MM)"""

    month: str
    event_id: int
    event_name: str
    event_description: str
    total_qty: int
    total_sales: float
