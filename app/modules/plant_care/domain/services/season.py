# 📄 File: app/modules/plant_care/domain/services/season.py
# 🧭 Purpose (Layman Explanation):
# Figures out which Indian season it is (summer, monsoon, autumn or winter) so care tips fit the weather.
# 🧪 Purpose (Technical Summary):
# Month-to-season mapping driven by an injected Clock instead of the process wall clock.
# 🔗 Dependencies:
# enum, typing, app.shared.utils.helpers (Clock, SystemClock)
# 🔄 Connected Modules / Calls From:
# SeasonalTipsQueryHandler, CreatePlantCommandHandler, groq_advisor.py prompts

from enum import Enum
from typing import Optional

from app.shared.utils.helpers import Clock, SystemClock


class Season(str, Enum):
    SUMMER = "summer"
    MONSOON = "monsoon"
    AUTUMN = "autumn"
    WINTER = "winter"


def season_for_month(month: int) -> Season:
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {month}")
    if 3 <= month <= 5:
        return Season.SUMMER
    if 6 <= month <= 9:
        return Season.MONSOON
    if 10 <= month <= 11:
        return Season.AUTUMN
    return Season.WINTER


def current_season(clock: Optional[Clock] = None) -> Season:
    return season_for_month((clock or SystemClock()).now().month)
