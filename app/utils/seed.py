# app/utils/seed.py
import logging
from datetime import datetime

from app.storage import ScheduleStorage
from app.utils.clock import DayOfWeek

logger = logging.getLogger("app.seed")

# block -> (course, teacher, room)
BLOCKS = {
    "Block A": ("PLTW Computer Science A", "Yeager, Gabriel", "230"),
    "Block B": ("Pre AP Algebra II", "Cohen, Craig", "333"),
    "Block C": ("French II Honors", "Ryan, Candace", "326"),
    "Block D": ("Study Skills", "Academic Support", "Library"),
    "Block E": ("Leadership ROTC", "Sumner, John", "139"),
    "Block F": ("AP English", "Kalinowski, Jill", "204"),
    "Block G": ("Early College Business", "Trammell, Anna", "IMC2"),
    "Block H": ("Physical Education", "Coach Martinez", "Gymnasium"),
    "Crew": ("Advisory/homeroom period", "Desmond, Teague", "305"),
    "Chow": ("Lunch period", "Cafeteria Staff", "Cafeteria"),
}

# same bell schedule every day, periods 1..8
BELLS = [
    ("07:45", "08:44"),
    ("08:44", "09:43"),
    ("09:44", "10:35"),
    ("10:39", "11:07"),
    ("11:11", "12:05"),
    ("12:49", "13:40"),
    ("13:45", "14:37"),
    ("15:41", "16:25"),
]

# day -> (id prefix, color, created, block rotation)
WEEK = {
    DayOfWeek.MONDAY: ("mon", "hsl(142.1 76.2% 36.3%)", "2025-08-25", "A B C Crew E Chow F G"),
    DayOfWeek.TUESDAY: ("tue", "hsl(262.1 83.3% 57.8%)", "2025-08-26", "B C D Crew F Chow G H"),
    DayOfWeek.WEDNESDAY: ("wed", "hsl(24.6 95% 53.1%)", "2025-08-27", "A B C Crew F Chow G H"),
    DayOfWeek.THURSDAY: ("thu", "hsl(221.2 83.2% 53.3%)", "2025-08-28", "C D A Crew E Chow F G"),
    DayOfWeek.FRIDAY: ("fri", "hsl(348.83 100% 60%)", "2025-08-29", "D A B Crew E Chow F H"),
}


def _block_title(code: str) -> str:
    return code if code in ("Crew", "Chow") else f"Block {code}"


def seed_week(storage: ScheduleStorage) -> int:
    """
    Insert the Monday-Friday block schedule when the store is empty.
    Returns the number of items created.
    """
    if storage.get_schedules():
        return 0

    created = 0
    for day, (prefix, color, created_on, rotation) in WEEK.items():
        day_name = day.name.capitalize()
        schedule = storage.create_schedule(
            {
                "name": f"{day_name} Classes",
                "description": f"{day_name} class schedule",
                "category": "academic",
                "color": color,
                "is_active": True,
                "created_at": datetime.fromisoformat(created_on),
                "updated_at": datetime.fromisoformat(created_on),
            },
            schedule_id=f"{day.name.lower()}-schedule",
        )

        for period, (code, (start, end)) in enumerate(zip(rotation.split(), BELLS), start=1):
            title = _block_title(code)
            description, teacher, room = BLOCKS[title]
            storage.create_schedule_item(
                {
                    "schedule_id": schedule.id,
                    "title": title,
                    "description": description,
                    "teacher": teacher,
                    "room": room,
                    "period": period,
                    "grade": "11",
                    "day_of_week": int(day),
                    "start_time": start,
                    "end_time": end,
                    "is_completed": False,
                },
                item_id=f"{prefix}-{period}",
            )
            created += 1

    logger.info("Seeded %d schedules with %d items", len(WEEK), created)
    return created
