"""Daily calorie and macro targets derived from a user profile."""

from macro_tracker.domain.nutrition import Macros, TargetBreakdown
from macro_tracker.domain.profile import ACTIVITY_LABELS, Gender, Goal, UserProfile
from macro_tracker.numbers import round_half_up
from macro_tracker.services.units import cm_from_feet_inches, kg_from_pounds

ACTIVITY_MULTIPLIERS = (1.2, 1.375, 1.55, 1.725, 1.9)
GOAL_OFFSETS = {Goal.CUT: -500, Goal.MAINTAIN: 0, Goal.BULK: 500}

PROTEIN_G_PER_LB = 1.0
FAT_G_PER_LB = 0.35
PROTEIN_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9
CARBS_KCAL_PER_G = 4


def activity_multiplier(activity_level: int) -> float:
    """Return the TDEE multiplier for a 1-5 activity level.

    Levels outside 1-5 use the sedentary multiplier.
    """
    if 1 <= activity_level <= len(ACTIVITY_MULTIPLIERS):
        return ACTIVITY_MULTIPLIERS[activity_level - 1]
    return ACTIVITY_MULTIPLIERS[0]


def activity_label(activity_level: int) -> str:
    """Return the display label for an activity level."""
    if 1 <= activity_level <= len(ACTIVITY_LABELS):
        return ACTIVITY_LABELS[activity_level - 1]
    return ACTIVITY_LABELS[0]


def basal_metabolic_rate(profile: UserProfile) -> float:
    """Mifflin-St Jeor BMR in kcal/day, unrounded."""
    weight_kg = kg_from_pounds(profile.weight)
    height_cm = cm_from_feet_inches(profile.height_ft, profile.height_in)
    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * profile.age
    return bmr + (5 if profile.gender == Gender.MALE else -161)


def calculate_targets(profile: UserProfile) -> Macros:
    """Compute the daily macro target for a profile.

    Carbs take whatever calories protein and fat leave over and bottom out at
    zero, so the macro calories can exceed the calorie target for very light
    or very heavy profiles. Degenerate profiles (zero age or weight) are not
    rejected and may yield negative calories.
    """
    multiplier = activity_multiplier(profile.activity_level)
    tdee = round_half_up(basal_metabolic_rate(profile) * multiplier)
    tdee += GOAL_OFFSETS.get(profile.goal, 0)

    protein = round_half_up(profile.weight * PROTEIN_G_PER_LB)
    fat = round_half_up(profile.weight * FAT_G_PER_LB)
    remaining = tdee - protein * PROTEIN_KCAL_PER_G - fat * FAT_KCAL_PER_G
    carbs = max(0, round_half_up(remaining / CARBS_KCAL_PER_G))
    return Macros(calories=tdee, protein=protein, fat=fat, carbs=carbs)


def calculate_breakdown(profile: UserProfile) -> TargetBreakdown:
    """Return the BMR, multiplier and maintenance figures behind the target.

    BMR is rounded before the multiplier is applied, so maintenance can be
    off by one from the calorie target before its goal offset.
    """
    bmr = round_half_up(basal_metabolic_rate(profile))
    multiplier = activity_multiplier(profile.activity_level)
    return TargetBreakdown(
        bmr=bmr,
        multiplier=multiplier,
        maintenance=round_half_up(bmr * multiplier),
        goal_offset=GOAL_OFFSETS.get(profile.goal, 0),
        targets=calculate_targets(profile),
    )
