from prometheus_client import Counter, Histogram


class TicketingMetrics:
    """
    Ticket issuance metrics

    Issuance results are labelled:
    - success: ticket issued, capacity decremented
    - insufficient_stock: rejected before the write (capacity read too low)
    - quantity_conflict: lost the race at the guarded capacity update
    - invalid / not_found: rejected by validation or missing event
    """

    def __init__(self) -> None:
        # ========== Issuance ==========
        self.ticket_issue_requests = Counter(
            'ticket_issue_requests_total',
            'Ticket issuance attempts by result',
            ['result'],
        )

        self.ticket_units_sold = Counter(
            'ticket_units_sold_total',
            'Capacity units consumed by issued tickets',
            ['event_id'],
        )

        self.ticket_issue_duration = Histogram(
            'ticket_issue_duration_seconds',
            'Ticket issuance processing time',
            buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
        )

        # ========== Status transitions ==========
        self.ticket_status_transitions = Counter(
            'ticket_status_transitions_total',
            'Applied ticket status transitions',
            ['from_status', 'to_status'],
        )

        self.capacity_units_restored = Counter(
            'capacity_units_restored_total',
            'Capacity units returned by canceled tickets',
            ['event_id'],
        )

    # ========== Helper Methods ==========

    def record_ticket_issue(
        self, *, result: str, duration: float, event_id: int | None = None, quantity: int = 0
    ) -> None:
        self.ticket_issue_requests.labels(result=result).inc()
        self.ticket_issue_duration.observe(duration)
        if result == 'success' and event_id is not None:
            self.ticket_units_sold.labels(event_id=event_id).inc(quantity)

    def record_status_transition(self, *, from_status: str, to_status: str) -> None:
        self.ticket_status_transitions.labels(from_status=from_status, to_status=to_status).inc()

    def record_capacity_restored(self, *, event_id: int, quantity: int) -> None:
        self.capacity_units_restored.labels(event_id=event_id).inc(quantity)


# Global metrics instance
metrics = TicketingMetrics()
