import pathlib
import site

import pytest
from dbspecifics import clear_specifics_cache
from dbspecifics.config import SpecificsConfig

HERE = pathlib.Path(pathlib.Path(__file__).resolve()).parent
site.addsitedir(HERE)


@pytest.fixture(autouse=True)
def isolate_specifics(monkeypatch):
    """Keep configuration files on this machine out of the tests and clear
    cached specifics before and after each test."""
    monkeypatch.setattr('dbspecifics.config.overrides.DEFAULT_LOCATIONS', ())
    SpecificsConfig.reset_instance()
    clear_specifics_cache()
    yield
    SpecificsConfig.reset_instance()
    clear_specifics_cache()


pytest_plugins = [
    'tests.fixtures.profiles',
]
