"""Dashboard views over daily summaries."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from uuid import UUID

from diet_tracker.domain.dashboard import (
    DailyGoals,
    DailyPoint,
    DashboardSummary,
    WeeklySummary,
)
from diet_tracker.domain.days import DaySummary
from diet_tracker.domain.profile import UserProfile
from diet_tracker.services.days import DayRepository, DayResolver
from diet_tracker.services.profile import ProfileService

NOON = 12
MID_MORNING = 10
WEEK_DAYS = 7
LOW_CALORIE_PERCENT = 50
LOW_WATER_PERCENT = 30
STEPS_PRAISE_PERCENT = 80
PROTEIN_PRAISE_G = 50


@dataclass
class DashboardService:
    """Builds today's and this week's dashboard data."""

    days: DayRepository
    profile_service: ProfileService

    def get_today(self, user_id: UUID, now: datetime) -> DashboardSummary:
        """Return today's progress for the user."""
        record = DayResolver(self.days).get_or_create(user_id, now)
        profile = self.profile_service.find_profile(user_id)
        goals = _goals(profile)
        summary = record.summary
        net = summary.calories_eaten - summary.calories_burned
        return DashboardSummary(
            day=record.day,
            goals=goals,
            calories_eaten=summary.calories_eaten,
            calories_burned=summary.calories_burned,
            calories_remaining=goals.calories - net,
            water_intake=summary.water_intake,
            steps=summary.steps,
            protein=summary.protein,
            carbs=summary.carbs,
            fat=summary.fat,
            fiber=summary.fiber,
            weight=summary.weight,
            insight=build_insight(summary, goals, now.hour),
            name=profile.name if profile else "User",
            gender=profile.gender if profile else None,
            profile_image=profile.profile_image if profile else None,
        )

    def get_weekly(self, user_id: UUID, today: date) -> WeeklySummary:
        """Return stored days from a week ago through today."""
        start = today - timedelta(days=WEEK_DAYS)
        records = self.days.list_days(user_id, start, today)
        daily = [
            DailyPoint(
                day=record.day,
                calories=record.summary.calories_eaten,
                burned=record.summary.calories_burned,
                water=record.summary.water_intake,
                steps=record.summary.steps,
                weight=record.summary.weight,
            )
            for record in records
        ]
        profile = self.profile_service.find_profile(user_id)
        return WeeklySummary(
            daily=daily,
            avg_calories=_average([point.calories for point in daily]),
            avg_water=_average([point.water for point in daily]),
            avg_steps=_average([point.steps for point in daily]),
            calorie_goal=_goals(profile).calories,
        )


def build_insight(summary: DaySummary, goals: DailyGoals, hour: int) -> str:
    """Pick a short coaching message from today's progress."""
    calorie_progress = _percent(summary.calories_eaten, goals.calories)
    water_progress = _percent(summary.water_intake, goals.water)
    steps_progress = _percent(summary.steps, goals.steps)

    if calorie_progress < LOW_CALORIE_PERCENT and hour > NOON:
        return (
            "You're under your calorie target for this time of day. "
            "Consider a balanced snack!"
        )
    if water_progress < LOW_WATER_PERCENT and hour > MID_MORNING:
        return "Stay hydrated! You're behind on your water intake."
    if steps_progress > STEPS_PRAISE_PERCENT:
        return "Great job on your steps! You're almost at your daily goal!"
    if summary.protein > PROTEIN_PRAISE_G:
        return "You're hitting your protein goals today! Keep it up."
    return "On track to hit your weekly goal!"


def _goals(profile: UserProfile | None) -> DailyGoals:
    if profile is None:
        return DailyGoals(calories=2000, water=2000, steps=10000)
    return DailyGoals(
        calories=profile.daily_calorie_goal or 2000,
        water=profile.daily_water_goal or 2000,
        steps=profile.daily_steps_goal or 10000,
    )


def _percent(value: float, goal: int) -> float:
    if goal <= 0:
        return 0.0
    return value / goal * 100


def _average(values: list[int]) -> int:
    if not values:
        return 0
    return round(sum(values) / len(values))
