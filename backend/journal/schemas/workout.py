from pydantic import BaseModel


class WorkoutRow(BaseModel):
    """One row of the list page, already formatted for display."""

    id: int
    name: str
    weight: str  # number or placeholder
    reps: str    # number or placeholder
    units: str   # 'lbs' or 'kgs'
    date: str    # 'YYYY-MM-DD' or '0000-00-00'


class WorkoutEditForm(BaseModel):
    """Values that pre-fill the edit form."""

    id: int
    name: str
    weight: int | None = None
    reps: int | None = None
    date: str
    is_pounds: bool = False
