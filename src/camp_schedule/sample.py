"""Embedded sample schedule shown when the published sheet is unavailable."""

from camp_schedule.models import ActivityRecord, Schedule


def sample_schedule() -> Schedule:
    """Return a fresh copy of the two-day sample schedule."""
    return {
        "Monday - August 12": [
            ActivityRecord(
                time="9:00 AM",
                activity="Registration & Welcome",
                description="Check-in, get your gear, meet the instructors and fellow campers",
                location="Main Entrance",
                instructor="Team LOZ",
            ),
            ActivityRecord(
                time="10:00 AM",
                activity="Basic Safety & Equipment",
                description="Learn about protective gear, board selection, and safety fundamentals",
                location="Training Area A",
            ),
            ActivityRecord(
                time="2:00 PM",
                activity="Hill Practice - Beginner",
                description="Start with gentle slopes, focus on balance and basic stance",
                location="Beginner Hill",
            ),
        ],
        "Tuesday - August 13": [
            ActivityRecord(
                time="9:00 AM",
                activity="Advanced Hill Techniques",
                description="Learn to navigate steeper inclines with confidence",
                location="Advanced Hill",
            ),
            ActivityRecord(
                time="2:00 PM",
                activity="Stopping Methods Workshop",
                description="Master different stopping techniques for various situations",
            ),
        ],
    }
