from __future__ import annotations

import logging
from typing import Any, List, Mapping, Sequence, Union

from ..common.validators import require_field, require_present
from .model import Job, JobSpec

logger = logging.getLogger(__name__)

JobDescriptor = Union[JobSpec, Mapping[str, Any]]


class JobFactory:
    """Factory Pattern: batch-create jobs from descriptors."""

    @staticmethod
    def create(jobs: Sequence[JobDescriptor]) -> List[Job]:
        require_present(jobs, "jobs")
        created = [JobFactory._build(descriptor, position) for position, descriptor in enumerate(jobs)]
        logger.debug("Created %d job(s)", len(created))
        return created

    @staticmethod
    def _build(descriptor: JobDescriptor, position: int) -> Job:
        if isinstance(descriptor, JobSpec):
            return Job(name=descriptor.name, shifts=descriptor.shifts)
        return Job(
            name=require_field(descriptor, "name", position=position),
            shifts=require_field(descriptor, "shifts", position=position),
        )
