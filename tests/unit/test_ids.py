"""
Unit tests for shell identifier parsing.

Run: pytest tests/unit/test_ids.py -v
"""

import pytest

from quiztrainer.core.errors import MissingArgument, NotANumber
from quiztrainer.core.ids import parse_quiz_id


class TestParseQuizId:

    def test_plain_integer(self):
        assert parse_quiz_id("3") == 3

    def test_surrounding_whitespace(self):
        assert parse_quiz_id("  12  ") == 12

    def test_trailing_text_is_dropped(self):
        assert parse_quiz_id("7th") == 7
        assert parse_quiz_id("3.9") == 3

    def test_extra_words_are_ignored(self):
        assert parse_quiz_id("4 please") == 4

    def test_signed(self):
        assert parse_quiz_id("-2") == -2
        assert parse_quiz_id("+5") == 5

    @pytest.mark.parametrize("arg", [None, "", "   "])
    def test_missing(self, arg):
        with pytest.raises(MissingArgument):
            parse_quiz_id(arg)

    @pytest.mark.parametrize("arg", ["abc", "x1", "-", ".", "\u0663", "\uff17"])
    def test_not_a_number(self, arg):
        with pytest.raises(NotANumber) as exc:
            parse_quiz_id(arg)
        assert exc.value.value == arg

    def test_error_message_names_parameter(self):
        with pytest.raises(MissingArgument, match="<id>"):
            parse_quiz_id(None)
