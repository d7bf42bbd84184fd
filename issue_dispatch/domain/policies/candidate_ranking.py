"""CandidateRankingPolicy — filter eligible workers and order them by distance."""

from __future__ import annotations

from dataclasses import dataclass

from issue_dispatch.domain.entities.worker import Worker
from issue_dispatch.domain.value_objects.geo_point import GeoPoint, distance_meters


@dataclass(frozen=True)
class Candidate:
    """A worker eligible for an issue, annotated with distance to it."""

    worker_id: str
    distance_meters: float


def is_eligible(worker: Worker) -> bool:
    """A worker can be claimed only when on duty, free, and locatable.

    Duty status and the busy marker are written by different flows, so
    both are checked independently.
    """
    return worker.is_on_duty() and not worker.is_busy() and worker.has_valid_location()


def rank_candidates(issue_location: GeoPoint, workers: list[Worker]) -> list[Candidate]:
    """Pure function: eligible workers sorted nearest first.

    Ties on distance are broken by worker id so the order is reproducible.
    An empty result is a legitimate "nothing to assign" outcome.
    """
    candidates = [
        Candidate(
            worker_id=w.id,
            distance_meters=distance_meters(issue_location, w.live_location),
        )
        for w in workers
        if is_eligible(w)
    ]
    return sorted(candidates, key=lambda c: (c.distance_meters, c.worker_id))
