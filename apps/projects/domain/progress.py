# apps/projects/domain/progress.py
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable


def compute_progress(completion_flags: Iterable[bool]) -> int:
    """
    Procent ukończonych zadań projektu (0-100).
    Zaokrąglenie "połówka w górę": 1/8 = 12.5% -> 13%, 2/3 -> 67%, 1/3 -> 33%.
    Brak zadań -> 0.
    """
    flags = list(completion_flags)
    total = len(flags)
    if total == 0:
        return 0

    done = sum(1 for flag in flags if flag)
    percentage = Decimal(done * 100) / Decimal(total)
    return int(percentage.quantize(Decimal('1'), rounding=ROUND_HALF_UP))
