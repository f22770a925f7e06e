"""Testy pdf.segmenter — automat stanów dzielący stronę na zadania."""

from data_model.tasks import SegmentedTask
from pdf.segmenter import segment_page
from pdf.task_patterns import build_patterns


def test_page_without_markers_yields_nothing():
    text = "Розділ 1\nВступ до алгебри\nТекст без жодного номера"
    assert segment_page(text) == []


def test_empty_page_yields_nothing():
    assert segment_page("") == []
    assert segment_page("  \n\n \r\n") == []


def test_multi_line_accumulation():
    text = "1) Compute the sum.\nof 2 and 2.\n2) Compute the product."
    assert segment_page(text) == [
        SegmentedTask(id="1", text="1) Compute the sum.\nof 2 and 2."),
        SegmentedTask(id="2", text="2) Compute the product."),
    ]


def test_preamble_is_discarded():
    tasks = segment_page("Chapter intro text\n1) First task.")
    assert tasks == [SegmentedTask(id="1", text="1) First task.")]


def test_lines_are_trimmed_and_blank_lines_dropped():
    text = "   №12   Обчисліть  \r\n\r\n   значення виразу  \n"
    assert segment_page(text) == [
        SegmentedTask(id="12", text="№12   Обчисліть\nзначення виразу"),
    ]


def test_keyword_id_wins_over_leading_number():
    tasks = segment_page("Завдання № 5 extra text\nпродовження")
    assert tasks[0].id == "5"
    assert tasks[0].text == "Завдання № 5 extra text\nпродовження"


def test_marker_without_number_keeps_keyword_id():
    tasks = segment_page("Приклад.\nРозв'язання: x = 2\n1. Знайдіть y")
    assert [t.id for t in tasks] == ["Приклад", "1"]
    assert tasks[0].text == "Приклад.\nРозв'язання: x = 2"


def test_ids_do_not_leak_between_tasks():
    tasks = segment_page("№ 7 Перше\n3) Друге\nВправа 9\nтекст")
    assert [(t.id, t.text.split("\n")[0]) for t in tasks] == [
        ("7", "№ 7 Перше"),
        ("3", "3) Друге"),
        ("9", "Вправа 9"),
    ]


def test_consecutive_markers_each_start_a_task():
    tasks = segment_page("1. a\n2. b\n3. c")
    assert [t.text for t in tasks] == ["1. a", "2. b", "3. c"]


def test_custom_patterns_are_used():
    patterns = build_patterns(["Задача"])
    tasks = segment_page("Вправа 1\nЗадача 2\nумова", patterns)
    assert tasks == [SegmentedTask(id="2", text="Задача 2\nумова")]
