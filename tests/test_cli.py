"""
Tests for cli.py - Command line interface.
"""

import json

import pytest

from erpun.cli import main


@pytest.fixture
def lexicon_args(lexicon_files):
    pronunciations_path, parts_of_speech_path = lexicon_files
    return ['--pronunciations', pronunciations_path, '--pos', parts_of_speech_path]


class TestCLIBasics:

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(['--help'])
        assert exc_info.value.code == 0
        assert 'hardly know her' in capsys.readouterr().out

    def test_no_input(self, lexicon_args):
        with pytest.raises(SystemExit) as exc_info:
            main(lexicon_args)
        assert exc_info.value.code == 1

    def test_bad_lexicon(self, tmp_path, capsys):
        sounds = tmp_path / "sounds.txt"
        sounds.write_text("fish /fɪʃ/\n", encoding="utf-8")
        pos = tmp_path / "pos.txt"
        pos.write_text("fish\0N\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(['--pronunciations', str(sounds), '--pos', str(pos), 'fish'])
        assert exc_info.value.code == 1
        assert 'Error loading lexicon' in capsys.readouterr().out

    def test_env_config(self, lexicon_files, monkeypatch, capsys):
        pronunciations_path, parts_of_speech_path = lexicon_files
        monkeypatch.setenv('ERPUN_PRONUNCIATIONS', pronunciations_path)
        monkeypatch.setenv('ERPUN_PARTS_OF_SPEECH', parts_of_speech_path)

        main(['--word', 'smother'])
        assert 'smother -> smith' in capsys.readouterr().out


class TestCLIModes:

    def test_sentence(self, lexicon_args, capsys):
        main(lexicon_args + ['stop it, you smother'])
        assert "smith 'er?! I hardly know her!" in capsys.readouterr().out

    def test_sentence_no_pun(self, lexicon_args, capsys):
        main(lexicon_args + ['a fish'])
        assert 'No puns detected' in capsys.readouterr().out

    def test_sentence_json(self, lexicon_args, capsys):
        main(lexicon_args + ['--json', 'Smother'])
        data = json.loads(capsys.readouterr().out)
        assert data['has_pun'] == 1
        assert data['er_less_word'] == 'smith'

    def test_word_verbose(self, lexicon_args, capsys):
        main(lexicon_args + ['--word', 'hammer', '--verbose'])
        out = capsys.readouterr().out
        assert 'hammer -> no match' in out
        assert 'Candidates: ham' in out

    def test_word_json(self, lexicon_args, capsys):
        main(lexicon_args + ['--json', '-w', 'SMOTHER'])
        assert json.loads(capsys.readouterr().out) == {
            'word': 'smother',
            'er_less_word': 'smith',
            'candidates': ['smith'],
        }

    def test_file(self, lexicon_args, tmp_path, capsys):
        messages = tmp_path / "messages.txt"
        messages.write_text("smother\n\nhammer time\n", encoding="utf-8")

        main(lexicon_args + ['--json', '--file', str(messages)])
        data = json.loads(capsys.readouterr().out)
        assert [r['has_pun'] for r in data] == [1, 0]

    def test_missing_file(self, lexicon_args, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(lexicon_args + ['--file', str(tmp_path / 'missing.txt')])
        assert exc_info.value.code == 1

    def test_interactive(self, lexicon_args, monkeypatch, capsys):
        inputs = iter(['smother', '', 'quit'])
        monkeypatch.setattr('builtins.input', lambda prompt='': next(inputs))

        main(lexicon_args + ['--interactive'])
        out = capsys.readouterr().out
        assert "smith 'er?!" in out
        assert 'Goodbye!' in out


class TestBundledDictionary:
    """The sample dictionary shipped with the package."""

    @pytest.mark.parametrize("word,expected", [
        ('lover', 'lover -> love'),
        ('BORDER', 'border -> board'),
        ('hammer', 'hammer -> no match'),
        ('butter', 'butter -> no match'),
        ('mother', 'mother -> no match'),
    ])
    def test_sample_words(self, word, expected, monkeypatch, capsys):
        monkeypatch.delenv('ERPUN_PRONUNCIATIONS', raising=False)
        monkeypatch.delenv('ERPUN_PARTS_OF_SPEECH', raising=False)

        main(['--word', word])
        assert expected in capsys.readouterr().out
