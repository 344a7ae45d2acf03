from algodrills.sorting import Student, count_hires, sort_serials, sort_students


def _names(students):
    return [s.name for s in students]


def test_students_korean_descending():
    students = [Student("Ann", 50, 60, 70), Student("Bob", 90, 60, 70), Student("Cy", 70, 60, 70)]
    assert _names(sort_students(students)) == ["Bob", "Cy", "Ann"]


def test_students_english_ascending_on_korean_tie():
    students = [Student("Ann", 80, 90, 70), Student("Bob", 80, 40, 70)]
    assert _names(sort_students(students)) == ["Bob", "Ann"]


def test_students_math_descending_on_english_tie():
    students = [Student("Ann", 80, 40, 10), Student("Bob", 80, 40, 99)]
    assert _names(sort_students(students)) == ["Bob", "Ann"]


def test_students_name_ascending_on_full_tie():
    students = [Student("Zed", 1, 1, 1), Student("Amy", 1, 1, 1), Student("Moe", 1, 1, 1)]
    assert _names(sort_students(students)) == ["Amy", "Moe", "Zed"]


def test_students_uppercase_before_lowercase():
    students = [Student("amy", 1, 1, 1), Student("Bob", 1, 1, 1)]
    assert _names(sort_students(students)) == ["Bob", "amy"]


def test_students_sort_is_permutation():
    students = [Student(f"s{i}", i % 3, i % 5, i % 7) for i in range(20)]
    result = sort_students(students)
    assert sorted(result, key=lambda s: s.name) == sorted(students, key=lambda s: s.name)
    assert sort_students(reversed(students)) == result


def test_serials_worked_example():
    serials = ["ABCD", "145C", "A", "A910", "Z321"]
    assert sort_serials(serials) == ["A", "ABCD", "Z321", "145C", "A910"]


def test_serials_length_first():
    assert sort_serials(["999", "1"]) == ["1", "999"]


def test_serials_digit_sum_before_text():
    assert sort_serials(["A9", "Z1"]) == ["Z1", "A9"]


def test_serials_text_on_full_tie():
    assert sort_serials(["B12", "A21"]) == ["A21", "B12"]


def test_count_hires_worked_examples():
    assert count_hires([(3, 2), (1, 4), (4, 1), (2, 3), (5, 5)]) == 4
    assert count_hires([(3, 6), (7, 3), (4, 2), (1, 4), (5, 7), (2, 5), (6, 1)]) == 3


def test_count_hires_one_dominates_all():
    n = 6
    assert count_hires([(i, i) for i in range(1, n + 1)]) == 1


def test_count_hires_nobody_dominated():
    n = 6
    assert count_hires([(i, n + 1 - i) for i in range(1, n + 1)]) == n


def test_count_hires_empty():
    assert count_hires([]) == 0