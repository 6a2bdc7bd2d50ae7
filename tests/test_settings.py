"""
Tests for settings.py - lexicon locations.
"""

import os

from erpun import settings
from erpun.engine import HardlyKnowHerEngine


class TestDefaultPaths:

    def test_bundled_inside_package(self, monkeypatch):
        monkeypatch.delenv('ERPUN_PRONUNCIATIONS', raising=False)
        monkeypatch.delenv('ERPUN_PARTS_OF_SPEECH', raising=False)

        package_dir = os.path.dirname(os.path.abspath(settings.__file__))
        for path in (settings.get_pronunciations_path(), settings.get_parts_of_speech_path()):
            assert os.path.commonpath([path, package_dir]) == package_dir
            assert os.path.isfile(path)

    def test_default_lexicon_resolves(self, monkeypatch):
        monkeypatch.delenv('ERPUN_PRONUNCIATIONS', raising=False)
        monkeypatch.delenv('ERPUN_PARTS_OF_SPEECH', raising=False)

        engine = HardlyKnowHerEngine.from_files(
            settings.get_pronunciations_path(), settings.get_parts_of_speech_path()
        )
        assert engine.resolve('lover') == 'love'

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv('ERPUN_PRONUNCIATIONS', str(tmp_path / 'sounds.txt'))
        monkeypatch.setenv('ERPUN_PARTS_OF_SPEECH', str(tmp_path / 'pos.txt'))

        assert settings.get_pronunciations_path() == str(tmp_path / 'sounds.txt')
        assert settings.get_parts_of_speech_path() == str(tmp_path / 'pos.txt')
