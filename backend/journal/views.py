from pathlib import Path

from fastapi.templating import Jinja2Templates

from journal.core.display import display_count, display_date, units_label
from journal.models.workout import Workout
from journal.schemas.workout import WorkoutEditForm, WorkoutRow

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def to_row(entry: Workout) -> WorkoutRow:
    return WorkoutRow(
        id=entry.id,
        name=entry.name,
        weight=display_count(entry.weight),
        reps=display_count(entry.reps),
        units=units_label(entry.lbs),
        date=display_date(entry.date),
    )


def to_edit_form(entry: Workout) -> WorkoutEditForm:
    return WorkoutEditForm(
        id=entry.id,
        name=entry.name,
        weight=entry.weight,
        reps=entry.reps,
        date=display_date(entry.date),
        is_pounds=bool(entry.lbs),
    )
