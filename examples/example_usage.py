"""Example: drive the model directly (no settings loaded, no logging setup).

Builds a two-shift Childcare job and signs Pat up for the morning.
"""

from volunteer_signup.jobs.factory import JobFactory
from volunteer_signup.shifts.factory import ShiftFactory
from volunteer_signup.volunteers.model import Volunteer


def main():
    shifts = ShiftFactory.create(["Saturday morning", "Saturday night"])
    jobs = JobFactory.create([{"name": "Childcare", "shifts": shifts}])

    pat = Volunteer(name="Pat")
    pat.sign_up(job=jobs[0], shifts=shifts[:1])

    print(jobs[0])
    print(pat)


if __name__ == "__main__":
    main()
