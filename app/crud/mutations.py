"""
Write side of the directory.

Every function takes ``commit``; pass ``commit=False`` to compose several
writes and commit them together from the service layer. ``update`` and
``delete`` report a miss (``None`` / ``False``) instead of pretending the
write happened.
"""
from typing import Any, Dict, Optional, Type

from sqlalchemy.orm import Session

from app.models import alternatives_to_tools


def _finish(db: Session, commit: bool, row: Any = None) -> None:
    if commit:
        db.commit()
        if row is not None:
            db.refresh(row)
    else:
        db.flush()


def insert(db: Session, model: Type[Any], values: Dict[str, Any], commit: bool = True) -> Any:
    row = model(**values)
    db.add(row)
    _finish(db, commit, row)
    return row


def update(
    db: Session,
    model: Type[Any],
    row_id: str,
    values: Dict[str, Any],
    commit: bool = True,
) -> Optional[Any]:
    row = db.get(model, row_id)
    if row is None:
        return None

    for field, value in values.items():
        setattr(row, field, value)

    _finish(db, commit, row)
    return row


def delete(db: Session, model: Type[Any], row_id: str, commit: bool = True) -> bool:
    """
    Delete one row. Likes and tool/alternative links go with it; tools of a
    deleted category or account are kept with the reference cleared.
    """
    row = db.get(model, row_id)
    if row is None:
        return False

    db.delete(row)
    _finish(db, commit)
    return True


def link_tool_to_alternative(db: Session, tool_id: str, alternative_id: str, commit: bool = True) -> Dict[str, str]:
    db.execute(alternatives_to_tools.insert().values(tool_id=tool_id, alternative_id=alternative_id))
    _finish(db, commit)
    return {"tool_id": tool_id, "alternative_id": alternative_id}


def unlink_tool_from_alternative(db: Session, tool_id: str, alternative_id: str, commit: bool = True) -> bool:
    result = db.execute(
        alternatives_to_tools.delete().where(
            alternatives_to_tools.c.tool_id == tool_id,
            alternatives_to_tools.c.alternative_id == alternative_id,
        )
    )
    _finish(db, commit)
    return result.rowcount > 0
