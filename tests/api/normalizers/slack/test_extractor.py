"""Testes do extrator de mensagens Slack."""

from __future__ import annotations

from api.normalizers.slack import extract_file, extract_files, extract_message, extract_messages


class TestExtractFile:
    """Conversão de arquivos anexados."""

    def test_full_file(self) -> None:
        ref = extract_file({"id": "F1", "name": "brief.pdf", "mimetype": "application/pdf"})
        assert ref.id == "F1"
        assert ref.describe() == "[File: brief.pdf (application/pdf)]"

    def test_title_used_when_name_missing(self) -> None:
        assert extract_file({"title": "Screenshot"}).display_name == "Screenshot"

    def test_defaults(self) -> None:
        ref = extract_file({})
        assert ref.describe() == "[File: Untitled (unknown type)]"
        assert ref.id is None

    def test_extract_files_ignores_non_list(self) -> None:
        assert extract_files(None) == ()
        assert extract_files("oops") == ()
        assert len(extract_files([{"id": "F1"}, "junk"])) == 1


class TestExtractMessage:
    """Conversão de mensagens de histórico."""

    def test_user_message(self) -> None:
        message = extract_message(
            {"ts": "1700000000.000100", "user": "U1", "text": "hello", "thread_ts": "1699.1"}
        )
        assert message.timestamp_key == "1700000000.000100"
        assert message.author_id == "U1"
        assert message.thread_key == "1699.1"
        assert message.is_from_automated_actor is False

    def test_bot_message_is_automated(self) -> None:
        assert extract_message({"ts": "1", "bot_id": "B1", "text": "beep"}).is_from_automated_actor

    def test_missing_fields(self) -> None:
        message = extract_message({})
        assert message.timestamp_key == ""
        assert message.author_id == ""
        assert message.text == ""
        assert message.sort_key == 0.0

    def test_extract_messages_without_list(self) -> None:
        assert extract_messages({"ok": True}) == []
