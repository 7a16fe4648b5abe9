"""
Unit tests for the shell command handlers.

Every handler must print one message per error and hand control back to the
shell (return False), except quit which returns True.

Run: pytest tests/unit/test_commands.py -v
"""

import pytest
from sqlalchemy.exc import OperationalError

from quiztrainer.play.engine import Outcome


class TestArgumentErrors:

    @pytest.mark.parametrize("name", ["show", "delete", "edit", "test"])
    def test_missing_id(self, commands, out, name):
        assert getattr(commands, name)(None) is False
        assert out.errors == ["Missing parameter <id>."]

    @pytest.mark.parametrize("name", ["show", "delete", "edit", "test"])
    def test_not_a_number(self, commands, out, name):
        assert getattr(commands, name)("abc") is False
        assert len(out.errors) == 1
        assert "not a number" in out.errors[0]

    @pytest.mark.parametrize("name", ["show", "delete", "edit", "test"])
    def test_not_found(self, commands, out, channel, name):
        assert getattr(commands, name)("42") is False
        assert out.errors == ["There is no quiz with id=42."]
        assert channel.prompts == []

    @pytest.mark.parametrize("name", ["show", "delete", "edit", "test"])
    def test_id_beyond_storage_range_is_not_found(self, commands, out, channel, name):
        assert getattr(commands, name)("99999999999999999999") is False
        assert out.errors == ["There is no quiz with id=99999999999999999999."]
        assert channel.prompts == []

    def test_non_ascii_digits_are_not_a_number(self, commands, store, out):
        store.create("2+2?", "4")
        assert commands.show("\u0661") is False
        assert len(out.errors) == 1
        assert "not a number" in out.errors[0]


class TestReadCommands:

    def test_help_lists_every_command(self, commands, out):
        assert commands.help() is False
        for word in ["help", "list", "show", "add", "delete", "edit", "test", "play", "credits", "quit"]:
            assert word in out.text

    def test_list(self, commands, store, out):
        store.create("2+2?", "4")
        store.create("Capital of France?", "Paris")
        assert commands.list_quizzes() is False
        assert "[1]:  2+2?" in out.text
        assert "[2]:  Capital of France?" in out.text
        assert "Paris" not in out.text

    def test_list_empty(self, commands, out):
        commands.list_quizzes()
        assert "no quizzes" in out.text

    def test_show(self, commands, store, out):
        store.create("2+2?", "4")
        assert commands.show("1") is False
        assert "[1]:  2+2? => 4" in out.text
        assert out.errors == []

    def test_show_keeps_brackets_in_question(self, commands, store, out):
        store.create("What is [x] in f[x]?", "[y]")
        commands.show("1")
        assert "What is [x] in f[x]? => [y]" in out.text

    def test_credits(self, commands, out):
        assert commands.credits() is False
        assert "Ada Lovelace" in out.text


class TestEditCommands:

    def test_add_prompts_question_then_answer(self, commands, store, channel, out):
        channel.replies = ["  2+2?  ", " 4 "]
        assert commands.add() is False
        assert channel.prompts == ["Enter a question: ", "Enter the answer: "]
        assert store.get_by_id(1).question == "2+2?"
        assert store.get_by_id(1).answer == "4"
        assert "Added" in out.text

    def test_add_blank_answer_is_rejected(self, commands, store, channel, out):
        channel.replies = ["2+2?", ""]
        assert commands.add() is False
        assert store.count() == 0
        assert out.errors == ["The quiz is invalid:"]
        assert "Answer must not be empty." in out.text

    def test_add_interrupted(self, commands, store, channel, out):
        channel.replies = ["2+2?"]
        assert commands.add() is False
        assert store.count() == 0
        assert out.errors == ["No more scripted input."]

    def test_delete(self, commands, store, out):
        store.create("2+2?", "4")
        assert commands.delete("1") is False
        assert store.count() == 0
        assert "Deleted quiz" in out.text

    def test_edit_prefills_current_text(self, commands, store, channel, out):
        store.create("2+2?", "4")
        channel.replies = ["3+3?", "6"]
        assert commands.edit("1") is False
        assert channel.prefills == ["2+2?", "4"]
        assert store.get_by_id(1).question == "3+3?"
        assert store.get_by_id(1).answer == "6"
        assert "changed to" in out.text

    def test_edit_blank_question_keeps_quiz(self, commands, store, channel, out):
        store.create("2+2?", "4")
        channel.replies = ["", "6"]
        commands.edit("1")
        assert store.get_by_id(1).question == "2+2?"
        assert out.errors == ["The quiz is invalid:"]


class TestAnswerCommands:

    def test_test_correct(self, commands, store, channel, out):
        store.create("Heart in Spanish", "Corazón")
        channel.replies = ["corazon"]
        assert commands.test("1") is False
        assert channel.prompts == ["Heart in Spanish? "]
        assert "Your answer is correct." in out.text
        assert "CORRECT" in out.text

    def test_test_incorrect(self, commands, store, channel, out):
        store.create("2+2?", "4")
        channel.replies = ["5"]
        commands.test("1")
        assert "Your answer is incorrect." in out.text
        assert "INCORRECT" in out.text

    def test_play_win(self, commands, store, channel, out):
        store.create("1+1?", "2")
        channel.replies = ["2"]
        assert commands.play() is False
        assert commands.last_play.outcome is Outcome.WIN
        assert commands.last_play.score == 1

    def test_play_empty(self, commands, channel):
        assert commands.play() is False
        assert commands.last_play.outcome is Outcome.EXHAUSTED
        assert channel.prompts == []


class TestSessionControl:

    def test_quit_ends_loop(self, commands):
        assert commands.quit() is True


class TestStorageErrors:

    def test_storage_error_is_reported_once(self, commands, store, out, monkeypatch):
        def broken():
            raise OperationalError("SELECT", {}, Exception("disk I/O error"))

        monkeypatch.setattr(store, "list_all", broken)
        assert commands.list_quizzes() is False
        assert len(out.errors) == 1
        assert out.errors[0].startswith("Storage error:")
