"""JSON shapes returned to clients."""

from diet_tracker.domain.dashboard import DashboardSummary, WeeklySummary
from diet_tracker.domain.days import DayLog, DaySummary, WeightPoint
from diet_tracker.domain.entries import (
    ActivityData,
    Entry,
    EntryData,
    FoodData,
    StepsData,
    WaterData,
    WeightData,
)
from diet_tracker.domain.models import UserRecord
from diet_tracker.domain.products import Product
from diet_tracker.domain.profile import UserProfile


def serialize_summary(summary: DaySummary) -> dict[str, object]:
    return {
        "caloriesEaten": summary.calories_eaten,
        "caloriesBurned": summary.calories_burned,
        "waterIntake": summary.water_intake,
        "steps": summary.steps,
        "weight": summary.weight,
        "protein": summary.protein,
        "carbs": summary.carbs,
        "fat": summary.fat,
        "fiber": summary.fiber,
    }


def serialize_entry_data(data: EntryData) -> dict[str, object]:
    if isinstance(data, FoodData):
        return {
            "productId": str(data.product_id) if data.product_id else None,
            "name": data.name,
            "calories": data.calories,
            "protein": data.protein,
            "carbs": data.carbs,
            "fat": data.fat,
            "fiber": data.fiber,
            "portion": data.portion,
            "unit": data.unit,
            "mealType": data.meal_type,
        }
    if isinstance(data, WaterData):
        return {"amount": data.amount}
    if isinstance(data, StepsData):
        return {
            "steps": data.steps,
            "distance": data.distance_km,
            "caloriesBurned": data.calories_burned,
        }
    if isinstance(data, WeightData):
        return {"weight": data.weight, "weightUnit": data.weight_unit}
    if isinstance(data, ActivityData):
        return {
            "activityType": data.activity_type,
            "duration": data.duration_minutes,
            "caloriesBurned": data.calories_burned,
        }
    raise TypeError(f"Unsupported entry payload: {type(data).__name__}")


def serialize_entry(entry: Entry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "type": entry.kind,
        "time": entry.time.isoformat(),
        "aiInsight": entry.ai_insight,
        "imagePath": entry.image_path,
        "data": serialize_entry_data(entry.data),
    }


def serialize_day(day_log: DayLog) -> dict[str, object]:
    return {
        "id": str(day_log.record.id),
        "date": day_log.record.day.isoformat(),
        "entries": [serialize_entry(entry) for entry in day_log.entries],
        "summary": serialize_summary(day_log.record.summary),
    }


def serialize_weight_history(points: list[WeightPoint]) -> list[dict[str, object]]:
    return [{"date": point.day.isoformat(), "weight": point.weight} for point in points]


def serialize_user(user: UserRecord) -> dict[str, object]:
    return {"id": str(user.id), "username": user.username}


def serialize_profile(profile: UserProfile) -> dict[str, object]:
    return {
        "userId": str(profile.user_id),
        "name": profile.name,
        "gender": profile.gender,
        "birthYear": profile.birth_year,
        "height": {"value": profile.height_value, "unit": profile.height_unit},
        "weight": {"value": profile.weight_value, "unit": profile.weight_unit},
        "activityLevel": profile.activity_level,
        "strideLength": profile.stride_length_cm,
        "profileImage": profile.profile_image,
        "dailyCalorieGoal": profile.daily_calorie_goal,
        "dailyWaterGoal": profile.daily_water_goal,
        "dailyStepsGoal": profile.daily_steps_goal,
        "dailyProteinGoal": profile.daily_protein_goal,
        "dailyCarbsGoal": profile.daily_carbs_goal,
        "dailyFatGoal": profile.daily_fat_goal,
        "dailyFiberGoal": profile.daily_fiber_goal,
    }


def serialize_product(product: Product) -> dict[str, object]:
    return {
        "id": str(product.id),
        "ownerId": str(product.owner_id) if product.owner_id else None,
        "name": product.name,
        "emoji": product.emoji,
        "category": product.category,
        "servingSize": {"value": product.serving_size, "unit": product.serving_unit},
        "nutrition": {
            "calories": product.calories,
            "protein": product.protein,
            "carbs": product.carbs,
            "fat": product.fat,
            "fiber": product.fiber,
            "sugar": product.sugar,
        },
        "variants": [
            {"name": variant.name, "multiplier": variant.multiplier}
            for variant in product.variants
        ],
        "usageCount": product.usage_count,
        "sortOrder": product.sort_order,
    }


def serialize_dashboard(summary: DashboardSummary) -> dict[str, object]:
    return {
        "date": summary.day.isoformat(),
        "calories": {
            "goal": summary.goals.calories,
            "eaten": summary.calories_eaten,
            "burned": summary.calories_burned,
            "remaining": summary.calories_remaining,
        },
        "water": {"current": summary.water_intake, "goal": summary.goals.water},
        "steps": {"current": summary.steps, "goal": summary.goals.steps},
        "macros": {
            "protein": summary.protein,
            "carbs": summary.carbs,
            "fat": summary.fat,
            "fiber": summary.fiber,
        },
        "weight": summary.weight,
        "aiInsight": summary.insight,
        "user": {
            "name": summary.name,
            "gender": summary.gender,
            "profileImage": summary.profile_image,
        },
    }


def serialize_weekly(summary: WeeklySummary) -> dict[str, object]:
    return {
        "dailyData": [
            {
                "date": point.day.isoformat(),
                "calories": point.calories,
                "burned": point.burned,
                "water": point.water,
                "steps": point.steps,
                "weight": point.weight,
            }
            for point in summary.daily
        ],
        "averages": {
            "calories": summary.avg_calories,
            "water": summary.avg_water,
            "steps": summary.avg_steps,
        },
        "calorieGoal": summary.calorie_goal,
    }
