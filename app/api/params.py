from typing import List, Optional

from fastapi import HTTPException, status


def parse_ids(raw_ids: List[str]) -> List[int]:
    """Принимает и ?idProjects=1&idProjects=2, и ?idProjects=1,2."""
    ids = []
    for raw in raw_ids:
        for part in raw.split(","):
            part = part.strip()
            if not part:
                continue
            try:
                ids.append(int(part))
            except ValueError:
                raise HTTPException(
                    status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                    detail=f"Invalid id: {part!r}",
                )
    return ids


def first_present(name: str, *values: Optional[int]) -> int:
    """Один и тот же параметр может прийти в query или в form; берётся первый заданный."""
    for value in values:
        if value is not None:
            return value
    raise HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=f"Missing required parameter: {name}",
    )
