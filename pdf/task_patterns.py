"""
pdf/task_patterns.py — wzorce regex rozpoznające linie otwierające zadanie.

Każdy TaskPattern zawiera:
  - name      : nazwa wzorca (keyword | numbered | numero)
  - regex     : skompilowany wzorzec (dopasowanie na początku linii)
  - extract_id: funkcja wyciągająca identyfikator zadania z Match (lub None)

Wzorce są testowane w stałej kolejności 1 → 2 → 3; pierwszy pasujący
decyduje zarówno o tym, że linia otwiera zadanie, jak i o identyfikatorze.
Test "czy to marker" i ekstrakcja identyfikatora używają tych samych
regexów w tej samej kolejności, więc wzorzec wyzwalający jest zawsze tym,
z którego pochodzi identyfikator.

To heurystyka: formatowanie podręczników spoza tego zestawu wzorców
nie jest rozpoznawane.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

# Słowa kluczowe ukraińskich podręczników otwierające zadanie.
DEFAULT_KEYWORDS: tuple[str, ...] = (
    "Вправа",
    "Вправи",
    "Завдання",
    "Номер",
    "Приклад",
    "Підсумкове завдання",
)


@dataclass(frozen=True, slots=True)
class TaskPattern:
    name: str
    regex: re.Pattern[str]
    extract_id: Callable[[re.Match[str]], str | None]


@dataclass(frozen=True, slots=True)
class MarkerMatch:
    pattern: TaskPattern
    task_id: str | None


def _p(pattern: str, flags: int = 0) -> re.Pattern[str]:
    return re.compile(pattern, flags | re.UNICODE)


def _number_or_keyword(m: re.Match[str]) -> str | None:
    # "Завдання 5" → "5"; samo "Приклад" → "Приклад"
    return m.group(2) or m.group(1) or None


def _group(index: int) -> Callable[[re.Match[str]], str | None]:
    def _extract(m: re.Match[str]) -> str | None:
        return m.group(index) or None
    return _extract


def keyword_pattern(keywords: Iterable[str] = DEFAULT_KEYWORDS) -> TaskPattern:
    """
    Wzorzec 1: słowo kluczowe, opcjonalnie "№"/"#" i numer.

    Słowa kluczowe porównywane bez rozróżniania wielkości liter; dłuższe
    warianty mają pierwszeństwo w alternatywie regexu.
    """
    words = sorted({w.strip() for w in keywords if w.strip()}, key=len, reverse=True)
    if not words:
        raise ValueError("Lista słów kluczowych nie może być pusta.")
    alternatives = "|".join(re.escape(w) for w in words)
    return TaskPattern(
        name="keyword",
        regex=_p(rf"^({alternatives})\s*[№#]?[\s:]*([0-9]+)?", re.IGNORECASE),
        extract_id=_number_or_keyword,
    )


# Wzorzec 2: "1) ", "12. ", "3] "
NUMBERED = TaskPattern(
    name="numbered",
    regex=_p(r"^([0-9]{1,3})[.)\]]\s+"),
    extract_id=_group(1),
)

# Wzorzec 3: "№123", "№ 12"
NUMERO = TaskPattern(
    name="numero",
    regex=_p(r"^№\s*([0-9]{1,4})"),
    extract_id=_group(1),
)


def build_patterns(keywords: Iterable[str] | None = None) -> tuple[TaskPattern, ...]:
    """Zwraca trzy wzorce w kolejności priorytetu (keyword, numbered, numero)."""
    kw = DEFAULT_KEYWORDS if keywords is None else tuple(keywords)
    return (keyword_pattern(kw), NUMBERED, NUMERO)


DEFAULT_PATTERNS: tuple[TaskPattern, ...] = build_patterns()


def match_marker(
    line: str,
    patterns: Sequence[TaskPattern] = DEFAULT_PATTERNS,
) -> MarkerMatch | None:
    """
    Sprawdza, czy linia otwiera nowe zadanie.

    Zwraca MarkerMatch(pattern, task_id) dla pierwszego pasującego wzorca
    albo None, gdy żaden wzorzec nie pasuje.
    """
    for pat in patterns:
        m = pat.regex.match(line)
        if m:
            return MarkerMatch(pattern=pat, task_id=pat.extract_id(m))
    return None
