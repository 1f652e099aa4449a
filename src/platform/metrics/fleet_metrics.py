from prometheus_client import Counter, Histogram


class FleetMetrics:
    """
    Fleet Inventory Metrics Collector

    Tracks seat diagram provisioning and bus status lifecycle activity
    """

    def __init__(self):
        # ========== Seat Diagram Provisioning ==========
        self.seat_diagrams_provisioned = Counter(
            'fleet_seat_diagrams_provisioned_total',
            'Seat diagrams cloned from a diagram template',
            ['operation'],  # operation: create/replace
        )

        self.seats_cloned = Counter(
            'fleet_seats_cloned_total',
            'Bus seats cloned from template seat models',
            ['operation'],
        )

        self.provisioning_duration = Histogram(
            'fleet_seat_diagram_provisioning_duration_seconds',
            'Time spent cloning and persisting a seat diagram',
            ['operation'],
            buckets=[0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

        # ========== Bus Status Lifecycle ==========
        self.status_transitions = Counter(
            'fleet_bus_status_transitions_total',
            'Bus status transition attempts',
            ['from_status', 'to_status', 'result'],  # result: accepted/rejected
        )

    def record_provisioning(
        self, *, operation: str, seat_count: int, duration_seconds: float
    ) -> None:
        self.seat_diagrams_provisioned.labels(operation=operation).inc()
        self.seats_cloned.labels(operation=operation).inc(seat_count)
        self.provisioning_duration.labels(operation=operation).observe(duration_seconds)

    def record_status_transition(self, *, from_status: str, to_status: str, accepted: bool) -> None:
        self.status_transitions.labels(
            from_status=from_status,
            to_status=to_status,
            result='accepted' if accepted else 'rejected',
        ).inc()


# Global metrics instance
metrics = FleetMetrics()
