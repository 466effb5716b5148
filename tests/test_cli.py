"""Tests for the decline command line tool."""

import json

from scripts.decline import main


class TestDeclineCli:
    def test_fio(self, capsys) -> None:
        assert main(["fio", "Иванов Иван Иванович", "--case", "ДП"]) == 0
        assert capsys.readouterr().out.strip() == "Иванову Ивану Ивановичу"

    def test_word(self, capsys) -> None:
        assert main(["word", "Анна", "-c", "ТП", "-t", "firstname"]) == 0
        assert capsys.readouterr().out.strip() == "Анной"

    def test_phrase(self, capsys) -> None:
        assert main(["phrase", "учитель школа", "-c", "РП", "-t", "noun"]) == 0
        assert capsys.readouterr().out.strip() == "учителя школы"

    def test_gender(self, capsys) -> None:
        assert main(["gender", "Smith", "-t", "lastname"]) == 0
        assert capsys.readouterr().out.strip() == "unknown"

    def test_paradigm(self, capsys) -> None:
        assert main(["paradigm", "Иван"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0].split() == ["ИП", "Иван"]
        assert lines[-1].split() == ["ПП", "Иване"]

    def test_invalid_case(self, capsys) -> None:
        assert main(["fio", "Иванов Иван Иванович", "--case", "XX"]) == 1
        assert "Unknown case label 'XX'" in capsys.readouterr().err

    def test_custom_tables(self, tmp_path, capsys, rules_source, genders_source) -> None:
        rules = tmp_path / "rules.json"
        genders = tmp_path / "gender.json"
        rules.write_text(json.dumps(rules_source), encoding="utf-8")
        genders.write_text(json.dumps(genders_source), encoding="utf-8")
        assert main(["--rules", str(rules), "--genders", str(genders), "word", "Лев", "-c", "ДП"]) == 0
        assert capsys.readouterr().out.strip() == "Льву"

    def test_unreadable_tables(self, tmp_path, capsys) -> None:
        assert main(["--rules", str(tmp_path / "none.json"), "gender", "Анна"]) == 1
        assert "Failed to load rule table" in capsys.readouterr().err
