import pytest

from volunteer_signup.core.exceptions import MissingFieldError
from volunteer_signup.jobs.factory import JobFactory
from volunteer_signup.jobs.model import Job, JobSpec
from volunteer_signup.shifts.factory import ShiftFactory
from volunteer_signup.shifts.model import Shift


@pytest.fixture
def weekend_shifts():
    return ShiftFactory.create(["Saturday morning", "Saturday night"])


def test_factory_keeps_names_and_shared_shift_lists(weekend_shifts):
    jobs = JobFactory.create(
        [
            {"name": "Childcare", "shifts": weekend_shifts},
            {"name": "Bartending", "shifts": weekend_shifts},
        ]
    )

    assert [j.name for j in jobs] == ["Childcare", "Bartending"]
    assert all(j.shifts is weekend_shifts for j in jobs)


def test_factory_accepts_job_spec(weekend_shifts):
    jobs = JobFactory.create([JobSpec(name="Parking Lot", shifts=weekend_shifts)])

    assert jobs[0].name == "Parking Lot"
    assert jobs[0].shifts is weekend_shifts


@pytest.mark.parametrize("missing", ["name", "shifts"])
def test_factory_missing_key_raises(weekend_shifts, missing):
    good = {"name": "Childcare", "shifts": weekend_shifts}
    bad = {k: v for k, v in good.items() if k != missing}

    with pytest.raises(MissingFieldError) as exc:
        JobFactory.create([good, bad])

    assert exc.value.field == missing
    assert exc.value.position == 1


def test_job_without_shifts_fails():
    with pytest.raises(TypeError):
        Job(name="Childcare")


def test_job_banner(weekend_shifts):
    job = Job(name="Childcare", shifts=weekend_shifts)

    assert str(job) == (
        "\n------------------\n Childcare \n------------------\n"
        " Shifts: Saturday morning, Saturday night"
    )


def test_job_offers(weekend_shifts):
    job = Job(name="Childcare", shifts=weekend_shifts)

    assert job.offers(weekend_shifts[0])
    assert not job.offers(Shift("Monday"))


def test_factory_without_jobs_raises():
    with pytest.raises(MissingFieldError) as exc:
        JobFactory.create(None)

    assert exc.value.field == "jobs"


def test_job_without_name_fails(weekend_shifts):
    with pytest.raises(TypeError):
        Job(shifts=weekend_shifts)
