"""Static constants and mappings for fitcalc."""

from __future__ import annotations

M_IN_KM = 1000
MIN_IN_HOURS = 60
CM_IN_M = 100

# Default stride length in meters for running and walking.
LEN_STEP = 0.65
# Default stroke length in meters; kept on swimming workouts for input compatibility.
SWIMMING_LEN_STEP = 1.38

CALORIES_MEAN_SPEED_MULTIPLIER = 18
CALORIES_MEAN_SPEED_SHIFT = 1.79

CALORIES_WEIGHT_MULTIPLIER = 0.035
CALORIES_SPEED_HEIGHT_MULTIPLIER = 0.029
KMH_IN_MSEC = 0.278

SWIMMING_CALORIES_MEAN_SPEED_SHIFT = 1.1
SWIMMING_CALORIES_WEIGHT_MULTIPLIER = 2

DEFAULT_LABELS = {
    "running": "Running",
    "walking": "Walking",
    "swimming": "Swimming",
}

TYPE_ALIASES = {
    "running": "running",
    "run": "running",
    "walking": "walking",
    "walk": "walking",
    "swimming": "swimming",
    "swim": "swimming",
}

REPORT_TEMPLATE = (
    "Activity type: {label}; "
    "Duration: {minutes} min; "
    "Distance: {distance:.2f} km.; "
    "Avg speed: {speed:.2f}; "
    "Calories burned: {calories:.2f}"
)
