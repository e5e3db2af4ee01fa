import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[2] / 'src'

# Every module, each imported alone in a fresh interpreter
MODULES = [
    # Independent modules (no internal deps)
    'dbspecifics.exceptions',
    'dbspecifics.typemap',
    'dbspecifics.utils',

    # Configuration
    'dbspecifics.config',
    'dbspecifics.config.overrides',

    # Profiles
    'dbspecifics.profiles.base',
    'dbspecifics.profiles.mysql',
    'dbspecifics.profiles.postgres',
    'dbspecifics.profiles.oracle',
    'dbspecifics.profiles.sqlserver',
    'dbspecifics.profiles.sqlite',
    'dbspecifics.profiles',

    # Engine and options
    'dbspecifics.specifics',
    'dbspecifics.options',

    # Main package
    'dbspecifics',
]


@pytest.mark.parametrize('module', MODULES)
def test_circular_dependencies(module):
    """Test if each module imports first, in a fresh interpreter, without circular dependencies"""
    result = subprocess.run(
        [sys.executable, '-c', f'import {module}'],
        capture_output=True,
        text=True,
        env={**os.environ, 'PYTHONPATH': str(SRC)},
    )
    assert result.returncode == 0, f'{module} failed to import:\n{result.stderr}'


if __name__ == '__main__':
    __import__('pytest').main([__file__])
