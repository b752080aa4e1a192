"""
Unit Tests for Chapter Model

Tests for collection management and the circular navigation cursor.
"""

import pytest

from mockmate.core.models.chapters import Chapter, EmptyChapterError


class TestChapterInit:
    """Tests for Chapter construction."""

    @pytest.mark.parametrize(
        "number, title",
        [
            (1, "Building Blocks"),
            (2, "Operators"),
            (3, "Making Decisions"),
        ],
    )
    def test_init_when_valid_then_starts_empty(self, number, title):
        chapter = Chapter(number, title)

        assert chapter.chapter_number == number
        assert chapter.title == title
        assert chapter.get_all_questions() == ()
        assert chapter.count_questions() == 0
        assert chapter.cursor == 0

    @pytest.mark.parametrize("number", [0, -1])
    def test_init_when_number_not_positive_then_raises_error(self, number):
        with pytest.raises(ValueError, match="Invalid chapter number"):
            Chapter(number, "Valid Title")

    @pytest.mark.parametrize("title", ["", None])
    def test_init_when_title_empty_then_raises_error(self, title):
        with pytest.raises(ValueError, match="title"):
            Chapter(1, title)


class TestChapterCollection:
    """Tests for add/remove/get."""

    def test_add_question_when_valid_then_appended_in_order(self, make_question):
        chapter = Chapter(1, "Title")
        q1, q2 = make_question(1), make_question(2)

        chapter.add_question(q1)
        chapter.add_question(q2)

        assert chapter.count_questions() == 2
        assert len(chapter) == 2
        assert chapter.get_all_questions() == (q1, q2)

    def test_add_question_when_none_then_raises_error(self):
        chapter = Chapter(1, "Title")
        with pytest.raises(ValueError):
            chapter.add_question(None)
        assert chapter.count_questions() == 0

    def test_add_question_when_same_object_twice_then_counted_twice(self, make_question):
        chapter = Chapter(1, "Title")
        q = make_question(1)

        chapter.add_question(q)
        chapter.add_question(q)

        assert chapter.count_questions() == 2

    def test_remove_question_when_duplicates_then_removes_first_only(self, make_question):
        chapter = Chapter(1, "Title")
        first = make_question(7, question_text="first")
        middle = make_question(8)
        second = make_question(7, question_text="second")
        for q in (first, middle, second):
            chapter.add_question(q)

        assert chapter.remove_question(7) is True
        assert chapter.get_all_questions() == (middle, second)

    def test_remove_question_when_absent_then_false_and_unchanged(self, three_question_chapter):
        before = three_question_chapter.get_all_questions()

        assert three_question_chapter.remove_question(99) is False
        assert three_question_chapter.get_all_questions() == before

    def test_remove_question_when_empty_then_false(self):
        assert Chapter(1, "Title").remove_question(1) is False

    def test_get_question_when_present_then_returns_first_match(self, make_question):
        chapter = Chapter(1, "Title")
        first = make_question(4, question_text="first")
        chapter.add_question(first)
        chapter.add_question(make_question(4, question_text="second"))

        assert chapter.get_question(4) is first

    def test_get_question_when_absent_then_raises_error(self, three_question_chapter):
        with pytest.raises(ValueError, match="Invalid question number"):
            three_question_chapter.get_question(42)

    def test_get_question_when_empty_then_raises_error(self):
        with pytest.raises(ValueError):
            Chapter(1, "Title").get_question(1)


class TestGetAllQuestions:
    """The returned view must reject mutation and not affect the chapter."""

    def test_get_all_questions_when_append_attempted_then_fails(self, three_question_chapter, make_question):
        view = three_question_chapter.get_all_questions()
        with pytest.raises(AttributeError):
            view.append(make_question(4))
        assert three_question_chapter.count_questions() == 3

    def test_get_all_questions_when_item_assigned_then_fails(self, three_question_chapter, make_question):
        view = three_question_chapter.get_all_questions()
        with pytest.raises(TypeError):
            view[0] = make_question(9)
        assert three_question_chapter.get_question(1).ordinal == 1

    def test_get_all_questions_when_item_deleted_then_fails(self, three_question_chapter):
        view = three_question_chapter.get_all_questions()
        with pytest.raises(TypeError):
            del view[0]
        assert three_question_chapter.count_questions() == 3

    def test_get_all_questions_when_chapter_changes_then_snapshot_unchanged(self, three_question_chapter):
        view = three_question_chapter.get_all_questions()
        three_question_chapter.remove_question(1)

        assert [q.ordinal for q in view] == [1, 2, 3]


class TestNavigation:
    """Tests for next_question() / previous_question()."""

    def test_next_question_when_empty_then_raises_error(self):
        with pytest.raises(EmptyChapterError):
            Chapter(1, "Title").next_question()

    def test_previous_question_when_empty_then_raises_error(self):
        with pytest.raises(EmptyChapterError):
            Chapter(1, "Title").previous_question()

    def test_empty_chapter_error_when_raised_then_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            Chapter(1, "Title").next_question()

    def test_next_question_when_called_repeatedly_then_cycles_in_order(self, three_question_chapter):
        ordinals = [three_question_chapter.next_question().ordinal for _ in range(4)]
        assert ordinals == [1, 2, 3, 1]

    def test_previous_question_when_fresh_then_returns_last(self, make_question):
        chapter = Chapter(1, "Title")
        q1, q2 = make_question(1), make_question(2)
        chapter.add_question(q1)
        chapter.add_question(q2)

        assert chapter.previous_question() is q2

    def test_next_question_when_fresh_then_returns_first(self, make_question):
        chapter = Chapter(1, "Title")
        q1, q2 = make_question(1), make_question(2)
        chapter.add_question(q1)
        chapter.add_question(q2)

        assert chapter.next_question() is q1

    def test_previous_question_when_called_repeatedly_then_cycles_backwards(self, three_question_chapter):
        ordinals = [three_question_chapter.previous_question().ordinal for _ in range(4)]
        assert ordinals == [3, 2, 1, 3]

    def test_next_then_previous_when_called_then_returns_same_question(self, three_question_chapter):
        """next reads then advances; previous steps back then reads."""
        first = three_question_chapter.next_question()
        assert three_question_chapter.previous_question() is first

    def test_previous_then_next_when_called_then_returns_same_question(self, three_question_chapter):
        last = three_question_chapter.previous_question()
        assert three_question_chapter.next_question() is last
        assert three_question_chapter.next_question().ordinal == 1

    def test_single_question_when_navigated_then_always_returned(self, make_question):
        chapter = Chapter(1, "Title")
        q = make_question(1)
        chapter.add_question(q)

        assert chapter.next_question() is q
        assert chapter.next_question() is q
        assert chapter.previous_question() is q
        assert chapter.cursor == 0

    def test_next_question_when_cursor_past_end_after_remove_then_wraps(self, three_question_chapter):
        """Removing questions may leave the cursor beyond the new end."""
        three_question_chapter.next_question()
        three_question_chapter.next_question()
        assert three_question_chapter.cursor == 2

        three_question_chapter.remove_question(3)
        three_question_chapter.remove_question(2)

        assert three_question_chapter.next_question().ordinal == 1
        assert three_question_chapter.cursor == 0

    def test_previous_question_when_cursor_past_end_after_remove_then_in_range(self, three_question_chapter):
        three_question_chapter.next_question()
        three_question_chapter.next_question()
        three_question_chapter.remove_question(3)
        three_question_chapter.remove_question(2)

        assert three_question_chapter.previous_question().ordinal == 1
        assert three_question_chapter.cursor == 0

    def test_navigation_when_all_removed_then_raises_error(self, three_question_chapter):
        three_question_chapter.next_question()
        for ordinal in (1, 2, 3):
            three_question_chapter.remove_question(ordinal)

        with pytest.raises(EmptyChapterError):
            three_question_chapter.next_question()


class TestChapterRendering:
    def test_str_when_rendered_then_starts_with_heading(self, three_question_chapter):
        text = str(three_question_chapter)
        assert text.startswith("Chapter 1: Building Blocks\n")
        assert "3.\tQuestion 3?" in text

    def test_iter_when_iterated_then_yields_insertion_order(self, three_question_chapter):
        assert [q.ordinal for q in three_question_chapter] == [1, 2, 3]
